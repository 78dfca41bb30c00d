"""Rosé Pine and its light variant, Rosé Pine Dawn."""

from themesmith.color.ramp import build_ramp, color_ramp
from themesmith.core.types import Appearance, ThemeSeed

dark = ThemeSeed("rosé-pine", Appearance.DARK, {
    "neutral": build_ramp([
        "#191724",
        "#1f1d2e",
        "#26233A",
        "#3E3A53",
        "#56526C",
        "#6E6A86",
        "#908CAA",
        "#E0DEF4",
    ]),
    "red": color_ramp("#EB6F92"),
    "orange": color_ramp("#EBBCBA"),
    "yellow": color_ramp("#F6C177"),
    "green": color_ramp("#8DBD8D"),
    "cyan": color_ramp("#409BBE"),
    "blue": color_ramp("#9CCFD8"),
    "violet": color_ramp("#C4A7E7"),
    "magenta": color_ramp("#AB6FE9"),
})

dawn = ThemeSeed("Rosé Pine Dawn", Appearance.LIGHT, {
    "neutral": build_ramp(
        [
            "#575279",
            "#797593",
            "#9893A5",
            "#B5AFB8",
            "#D3CCCC",
            "#F2E9E1",
            "#FFFAF3",
            "#FAF4ED",
        ],
        domain=[0, 0.35, 0.45, 0.65, 0.7, 0.8, 0.9, 1],
    ),
    "red": color_ramp("#B4637A"),
    "orange": color_ramp("#D7827E"),
    "yellow": color_ramp("#EA9D34"),
    "green": color_ramp("#679967"),
    "cyan": color_ramp("#286983"),
    "blue": color_ramp("#56949F"),
    "violet": color_ramp("#907AA9"),
    "magenta": color_ramp("#79549F"),
})
