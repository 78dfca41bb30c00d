from themesmith.color.ramp import build_ramp, color_ramp
from themesmith.core.types import Appearance, ThemeSeed

dark = ThemeSeed("Summercamp", Appearance.DARK, {
    # The repeated #3a3527 holds the mid-dark band flat between 0.38 and 0.4.
    "neutral": build_ramp(
        [
            "#1c1810",
            "#2a261c",
            "#3a3527",
            "#3a3527",
            "#5f5b45",
            "#736e55",
            "#bab696",
            "#f8f5de",
        ],
        domain=[0, 0.2, 0.38, 0.4, 0.65, 0.7, 0.85, 1],
    ),
    "red": color_ramp("#e35142"),
    "orange": color_ramp("#fba11b"),
    "yellow": color_ramp("#f2ff27"),
    "green": color_ramp("#5ceb5a"),
    "cyan": color_ramp("#5aebbc"),
    "blue": color_ramp("#489bf0"),
    "violet": color_ramp("#FF8080"),
    "magenta": color_ramp("#F69BE7"),
})
