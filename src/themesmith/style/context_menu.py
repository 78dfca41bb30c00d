"""Right-click context menu."""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import (
    StyleNode,
    background,
    border,
    border_color,
    overlay,
    shadow,
    text,
)


def context_menu(scheme: Scheme, layout: Layout) -> StyleNode:
    return {
        "background": background(scheme, "300"),
        "cornerRadius": 6,
        "padding": 6,
        "shadow": shadow(scheme, "popover"),
        "border": border(scheme, "primary"),
        "keystrokeMargin": 30,
        "item": {
            "padding": {"left": 4, "right": 4, "top": 2, "bottom": 2},
            "cornerRadius": 6,
            "label": text(scheme, layout, "sans", "secondary", size="sm"),
            "keystroke": overlay(
                text(scheme, layout, "sans", "muted", size="sm", weight="bold"),
                padding={"left": 3, "right": 3},
            ),
            "hover": {
                "background": background(scheme, "300", "hovered"),
                "text": text(scheme, layout, "sans", "primary", size="sm"),
            },
            "active": {
                "background": background(scheme, "300", "active"),
                "text": text(scheme, layout, "sans", "primary", size="sm"),
            },
            "activeHover": {
                "background": background(scheme, "300", "hovered"),
                "text": text(scheme, layout, "sans", "active", size="sm"),
            },
        },
        "separator": {
            "background": border_color(scheme, "primary"),
            "margin": {"top": 2, "bottom": 2},
        },
    }
