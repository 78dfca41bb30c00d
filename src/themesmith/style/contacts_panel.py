"""Contacts panel with shared and unshared project rows."""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import (
    StyleNode,
    background,
    border,
    border_color,
    foreground,
    icon_color,
    overlay,
    panel,
    selection,
    text,
)


def contacts_panel(scheme: Scheme, layout: Layout) -> StyleNode:
    return overlay(panel(layout), **{
        "userQueryEditor": {
            "background": background(scheme, "500"),
            "cornerRadius": 6,
            "text": text(scheme, layout, "mono", "primary"),
            "placeholderText": text(scheme, layout, "mono", "placeholder", size="sm"),
            "selection": selection(scheme, 1),
            "border": border(scheme, "secondary"),
            "padding": {"bottom": 4, "left": 8, "right": 8, "top": 4},
        },
        "addContactIcon": {
            "margin": {"left": 6},
            "color": icon_color(scheme, "primary"),
        },
        "rowHeight": 28,
        "treeBranchColor": border_color(scheme, "muted"),
        "treeBranchWidth": 1,
        "contactAvatar": {"cornerRadius": 10, "width": 18},
        "contactUsername": overlay(
            text(scheme, layout, "mono", "primary", size="sm"),
            padding={"left": 8},
        ),
        "editContact": {
            **text(scheme, layout, "mono", "primary", size="sm"),
            "background": background(scheme, "100"),
            "cornerRadius": 12,
            "padding": {"left": 7, "right": 7},
        },
        "header": text(scheme, layout, "mono", "secondary", size="sm"),
        "project": {
            "guestAvatarSpacing": 4,
            "height": 24,
            "guestAvatar": {"cornerRadius": 8, "width": 14},
            "name": overlay(
                text(scheme, layout, "mono", "placeholder", size="sm"),
                margin={"right": 6},
            ),
            "padding": {"left": 8},
        },
        "sharedProject": {
            "extends": "$contactsPanel.project",
            "background": background(scheme, "300"),
            "cornerRadius": 6,
            "name": {"color": foreground(scheme, "secondary")},
        },
        "hoveredSharedProject": {
            "background": background(scheme, "300", "hovered"),
            "cornerRadius": 6,
            "extends": "$contacts_panel.sharedProject",
        },
        "unsharedProject": {
            "extends": "$contactsPanel.project",
        },
        "hoveredUnsharedProject": {
            "cornerRadius": 6,
            "extends": "$contacts_panel.unsharedProject",
        },
    })
