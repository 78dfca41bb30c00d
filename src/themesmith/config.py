"""Default configuration, constants, and sampling tables for ThemeSmith."""

from pathlib import Path

# --- Output ---
DEFAULT_OUTPUT_DIR = Path("assets/themes")
OUTPUT_DIR_ENV_VAR = "THEMESMITH_OUTPUT_DIR"
THEME_FILE_SUFFIX = ".json"
JSON_INDENT = 2

# --- Ramp construction ---
MIN_RAMP_SEEDS = 2
# Single-hue ramps run dark -> seed -> light at these HSL anchors.
COLOR_RAMP_START_SATURATION = 0.68
COLOR_RAMP_START_LIGHTNESS = 0.12
COLOR_RAMP_END_SATURATION = 0.88
COLOR_RAMP_END_LIGHTNESS = 0.96
DARKEN_STEP = 0.18  # Oklab L per unit of darken()

# --- Scheme sampling ---
RAMP_ROLES = (
    "neutral",
    "red",
    "orange",
    "yellow",
    "green",
    "cyan",
    "blue",
    "violet",
    "magenta",
)
STATE_STEP = 0.08
STATE_OFFSETS = {
    "base": 0.0,
    "hovered": 1.0,
    "active": 2.2,
    "focused": 1.5,
    "disabled": 0.0,
}
PLAYER_RAMPS = ("blue", "green", "magenta", "orange", "violet", "cyan", "red", "yellow")
PLAYER_POSITION = 0.5
PLAYER_SELECTION_ALPHA = 0.24
SHADOW_ALPHA = 0.2
