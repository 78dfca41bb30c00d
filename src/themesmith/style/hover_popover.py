"""Hover popover containers, one per diagnostic severity."""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import (
    StyleNode,
    background,
    border,
    overlay,
    shadow,
    text,
)


def hover_popover(scheme: Scheme, layout: Layout) -> StyleNode:
    container = {
        "background": background(scheme, "100"),
        "cornerRadius": 8,
        "padding": {"left": 8, "right": 8, "top": 4, "bottom": 4},
        "shadow": shadow(scheme, "popover"),
        "border": border(scheme, "primary"),
        "margin": {"left": -8},
    }
    return {
        "container": container,
        "infoContainer": overlay(
            container,
            background=background(scheme, "info"),
            border=border(scheme, "info"),
        ),
        "warningContainer": overlay(
            container,
            background=background(scheme, "warning"),
            border=border(scheme, "warning"),
        ),
        "errorContainer": overlay(
            container,
            background=background(scheme, "error"),
            border=border(scheme, "error"),
        ),
        "blockStyle": {"padding": {"top": 4}},
        "prose": text(scheme, layout, "sans", "primary", size="sm"),
        "highlight": scheme.ramps.neutral.sample(0.5).with_alpha(0.2).hex,
    }
