"""ThemeSmith: color-ramp driven theme generation for the editor UI."""

__version__ = "0.1.0"
