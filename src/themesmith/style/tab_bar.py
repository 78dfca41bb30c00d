"""Tab bar styles, nested under ``workspace.tabBar``."""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import (
    StyleNode,
    background,
    border,
    icon_color,
    overlay,
    shadow,
    text,
    with_opacity,
)

TAB_HEIGHT = 32


def tab_bar(scheme: Scheme, layout: Layout) -> StyleNode:
    tab = {
        "height": TAB_HEIGHT,
        "background": background(scheme, "300"),
        "border": border(scheme, "primary", left=True, bottom=True, overlay=True),
        "iconClose": icon_color(scheme, "muted"),
        "iconCloseActive": icon_color(scheme, "active"),
        "iconConflict": icon_color(scheme, "warning"),
        "iconDirty": icon_color(scheme, "info"),
        "iconWidth": 8,
        "spacing": 8,
        "text": text(scheme, layout, "sans", "secondary", size="sm"),
        "padding": {"left": 8, "right": 8},
        "description": overlay(
            text(scheme, layout, "sans", "muted", size="2xs"),
            margin={"left": 6, "top": 1},
        ),
    }

    active_pane_active_tab = overlay(
        tab,
        background=background(scheme, "500"),
        text=text(scheme, layout, "sans", "active", size="sm"),
        border={"bottom": False},
    )
    inactive_pane_active_tab = overlay(
        tab,
        text=text(scheme, layout, "sans", "primary", size="sm"),
        border={"bottom": False},
    )
    dragged_tab = overlay(
        active_pane_active_tab,
        background=with_opacity(tab["background"], 0.8),
        border={"top": False, "left": False, "right": False, "bottom": False},
        shadow=shadow(scheme, "popover"),
    )

    return {
        "height": TAB_HEIGHT,
        "background": background(scheme, "300"),
        "dropTargetOverlayColor": with_opacity(icon_color(scheme, "primary"), 0.6),
        "border": border(scheme, "primary", left=True, bottom=True, overlay=True),
        "activePane": {
            "activeTab": active_pane_active_tab,
            "inactiveTab": tab,
        },
        "inactivePane": {
            "activeTab": inactive_pane_active_tab,
            "inactiveTab": overlay(tab),
        },
        "draggedTab": dragged_tab,
        "paneButton": {
            "color": icon_color(scheme, "secondary"),
            "border": overlay(tab["border"]),
            "iconWidth": 12,
            "buttonWidth": TAB_HEIGHT,
            "hover": {"color": icon_color(scheme, "active")},
        },
    }
