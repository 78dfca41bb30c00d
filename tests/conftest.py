"""Shared fixtures for ThemeSmith tests."""

from __future__ import annotations

import pytest

from themesmith.color.ramp import build_ramp, color_ramp
from themesmith.color.scheme import build_scheme
from themesmith.core.types import DEFAULT_LAYOUT

HUES = {
    "red": "#B4637A",
    "orange": "#aa573c",
    "yellow": "#a06e3b",
    "green": "#2a9292",
    "cyan": "#398bc6",
    "blue": "#576ddb",
    "violet": "#955ae7",
    "magenta": "#bf40bf",
}


@pytest.fixture
def layout():
    """Default typography and spacing tokens."""
    return DEFAULT_LAYOUT


@pytest.fixture
def bw_ramps():
    """Black-to-white neutral plus one single-hue ramp per color role."""
    ramps = {"neutral": build_ramp(["black", "white"])}
    ramps.update({role: color_ramp(hex_value) for role, hex_value in HUES.items()})
    return ramps


@pytest.fixture
def dark_scheme(bw_ramps):
    return build_scheme("test-dark", False, bw_ramps)


@pytest.fixture
def light_scheme(bw_ramps):
    return build_scheme("test-light", True, bw_ramps)
