from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import StyleNode, background, border, shadow, text


def tooltip(scheme: Scheme, layout: Layout) -> StyleNode:
    return {
        "background": background(scheme, "500"),
        "border": border(scheme, "secondary"),
        "padding": {"top": 4, "bottom": 4, "left": 8, "right": 8},
        "margin": {"top": 6, "left": 6},
        "shadow": shadow(scheme, "popover"),
        "cornerRadius": 6,
        "text": text(scheme, layout, "sans", "secondary", size="xs", weight="bold"),
        "keystroke": {
            "background": background(scheme, "on500"),
            "cornerRadius": 4,
            "margin": {"left": 6},
            "padding": {"left": 4, "right": 4},
            **text(scheme, layout, "mono", "muted", size="xs", weight="bold"),
        },
        "maxTextWidth": 200,
    }
