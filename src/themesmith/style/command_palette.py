"""Command palette keystroke badges."""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import StyleNode, background, border, text


def command_palette(scheme: Scheme, layout: Layout) -> StyleNode:
    return {
        "keystrokeSpacing": 8,
        "key": {
            "text": text(scheme, layout, "mono", "active", size="xs"),
            "cornerRadius": 4,
            "background": background(scheme, "on300"),
            "border": border(scheme, "secondary"),
            "padding": {"top": 3, "bottom": 3, "left": 8, "right": 8},
            "margin": {"left": 2},
        },
    }
