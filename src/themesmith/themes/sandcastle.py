from themesmith.color.ramp import build_ramp, color_ramp
from themesmith.core.types import Appearance, ThemeSeed

dark = ThemeSeed("sandcastle", Appearance.DARK, {
    "neutral": build_ramp([
        "#282c34",
        "#2c323b",
        "#3e4451",
        "#665c54",
        "#928374",
        "#a89984",
        "#d5c4a1",
        "#fdf4c1",
    ]),
    "red": color_ramp("#B4637A"),
    "orange": color_ramp("#a07e3b"),
    "yellow": color_ramp("#a07e3b"),
    "green": color_ramp("#83a598"),
    "cyan": color_ramp("#83a598"),
    "blue": color_ramp("#528b8b"),
    "violet": color_ramp("#d75f5f"),
    "magenta": color_ramp("#a87322"),
})
