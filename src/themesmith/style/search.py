"""Buffer and project search bar."""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import (
    StyleNode,
    background,
    border,
    selection,
    text,
)


def search(scheme: Scheme, layout: Layout) -> StyleNode:
    return {
        "background": background(scheme, "300"),
        "matchBackground": scheme.editor.match.hex,
        "tabIconSpacing": 4,
        "tabIconWidth": 14,
        "optionButton": {
            **text(scheme, layout, "mono", "secondary"),
            "background": background(scheme, "100"),
            "cornerRadius": 6,
            "border": border(scheme, "primary"),
            "margin": {"left": 1, "right": 1},
            "padding": {"bottom": 1, "left": 6, "right": 6, "top": 1},
        },
        "activeOptionButton": {
            "background": background(scheme, "100", "active"),
            "extends": "$search.option_button",
        },
        "hoveredOptionButton": {
            "background": background(scheme, "100", "hovered"),
            "extends": "$search.optionButton",
        },
        "activeHoveredOptionButton": {
            "background": background(scheme, "100", "active"),
            "extends": "$search.hoveredOptionButton",
        },
        "editor": {
            "background": background(scheme, "500"),
            "cornerRadius": 6,
            "maxWidth": 400,
            "placeholderText": text(scheme, layout, "mono", "placeholder"),
            "selection": selection(scheme, 1),
            "text": text(scheme, layout, "mono", "active"),
            "border": border(scheme, "primary"),
            "margin": {"bottom": 5, "left": 5, "right": 5, "top": 5},
            "padding": {"bottom": 3, "left": 13, "right": 13, "top": 3},
        },
        "invalidEditor": {
            "extends": "$search.editor",
            "border": border(scheme, "error"),
        },
        "matchIndex": {**text(scheme, layout, "mono", "muted"), "padding": 6},
        "optionButtonGroup": {"padding": {"left": 2, "right": 2}},
        "resultsStatus": {
            **text(scheme, layout, "mono", "primary"),
            "size": layout.font_size("lg"),
        },
    }
