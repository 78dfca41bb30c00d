"""Fuzzy selector modal (file finder, theme picker)."""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import (
    StyleNode,
    background,
    border,
    selection,
    shadow,
    text,
)


def selector(scheme: Scheme, layout: Layout) -> StyleNode:
    return {
        "background": background(scheme, "300"),
        "cornerRadius": 8,
        "padding": 8,
        "item": {
            "padding": {"bottom": 4, "left": 12, "right": 12, "top": 4},
            "cornerRadius": 6,
            "text": text(scheme, layout, "sans", "secondary"),
            "highlightText": text(scheme, layout, "sans", "feature", weight="bold"),
        },
        "activeItem": {
            "extends": "$selector.item",
            "background": background(scheme, "300", "active"),
            "text": text(scheme, layout, "sans", "active"),
        },
        "border": border(scheme, "primary"),
        "emptyMessage": {
            "padding": {"bottom": 4, "left": 12, "right": 12, "top": 8},
            **text(scheme, layout, "sans", "placeholder"),
        },
        "inputEditor": {
            "background": background(scheme, "500"),
            "cornerRadius": 6,
            "placeholderText": text(scheme, layout, "sans", "placeholder"),
            "selection": selection(scheme, 1),
            "text": text(scheme, layout, "mono", "active"),
            "border": border(scheme, "secondary"),
            "padding": {"bottom": 7, "left": 16, "right": 16, "top": 7},
        },
        "margin": {"bottom": 52, "top": 52},
        "shadow": shadow(scheme, "modal"),
    }
