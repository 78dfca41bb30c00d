"""Atelier Cave, dark and light."""

from themesmith.color.ramp import build_ramp, color_ramp
from themesmith.core.types import Appearance, ThemeSeed

ramps = {
    "neutral": build_ramp([
        "#19171c",
        "#26232a",
        "#585260",
        "#655f6d",
        "#7e7887",
        "#8b8792",
        "#e2dfe7",
        "#efecf4",
    ]),
    "red": color_ramp("#be4678"),
    "orange": color_ramp("#aa573c"),
    "yellow": color_ramp("#a06e3b"),
    "green": color_ramp("#2a9292"),
    "cyan": color_ramp("#398bc6"),
    "blue": color_ramp("#576ddb"),
    "violet": color_ramp("#955ae7"),
    "magenta": color_ramp("#bf40bf"),
}

dark = ThemeSeed("cave-dark", Appearance.DARK, ramps)
light = ThemeSeed("cave-light", Appearance.LIGHT, ramps)
