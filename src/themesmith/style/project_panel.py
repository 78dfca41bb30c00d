"""Project panel (file tree)."""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import (
    StyleNode,
    background,
    icon_color,
    selection,
    text,
)


def project_panel(scheme: Scheme, layout: Layout) -> StyleNode:
    active_text = text(scheme, layout, "mono", "active", size="sm")
    return {
        "padding": {"left": 12, "right": 12, "top": 6, "bottom": 6},
        "indentWidth": 20,
        "entry": {
            "height": 24,
            "iconColor": icon_color(scheme, "muted"),
            "iconSize": 8,
            "iconSpacing": 8,
            "text": text(scheme, layout, "mono", "secondary", size="sm"),
            "hover": {"background": background(scheme, "300", "hovered")},
            "active": {
                "background": background(scheme, "300", "active"),
                "text": active_text,
            },
            "activeHover": {
                "background": background(scheme, "300", "active"),
                "text": "$projectPanel.entry.active.text",
            },
        },
        "cutEntryFade": 0.4,
        "ignoredEntryFade": 0.6,
        "filenameEditor": {
            "background": background(scheme, "on300"),
            "text": "$projectPanel.entry.active.text",
            "selection": selection(scheme, 1),
        },
    }
