"""Workspace chrome: titlebar, status bar, toolbar, dock and friends."""

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
    shadow,
    text,
    with_opacity,
)
from themesmith.style.tab_bar import tab_bar

TITLEBAR_PADDING = 6
AVATAR_WIDTH = 18


def status_bar(scheme: Scheme, layout: Layout) -> StyleNode:
    status_item = {
        "cornerRadius": 6,
        "padding": {"top": 1, "bottom": 1, "left": 6, "right": 6},
        "margin": {"right": 6},
    }
    return {
        "height": 30,
        "itemSpacing": 8,
        "padding": {"left": TITLEBAR_PADDING, "right": TITLEBAR_PADDING},
        "border": border(scheme, "primary", top=True, overlay=True),
        "background": background(scheme, "300"),
        "cursorPosition": text(scheme, layout, "sans", "muted"),
        "autoUpdateProgressMessage": text(scheme, layout, "sans", "muted"),
        "autoUpdateDoneMessage": text(scheme, layout, "sans", "muted"),
        "lspStatus": {
            "iconSpacing": 4,
            "iconWidth": 14,
            "height": 18,
            "message": text(scheme, layout, "sans", "muted"),
            "iconColor": icon_color(scheme, "muted"),
            "hover": {
                "message": text(scheme, layout, "sans", "primary"),
                "iconColor": icon_color(scheme, "primary"),
                "background": background(scheme, "300", "hovered"),
            },
        },
        "diagnosticMessage": {
            **text(scheme, layout, "sans", "muted"),
            "hover": text(scheme, layout, "sans", "primary"),
        },
        "feedback": {
            **text(scheme, layout, "sans", "secondary"),
            "hover": text(scheme, layout, "sans", "active"),
        },
        "diagnosticSummary": {
            "height": 16,
            "iconWidth": 14,
            "iconSpacing": 2,
            "summarySpacing": 6,
            "text": text(scheme, layout, "sans", "primary", size="sm"),
            "colorOk": icon_color(scheme, "muted"),
            "colorWarning": icon_color(scheme, "warning"),
            "colorError": icon_color(scheme, "error"),
            "containerOk": overlay(status_item),
            "containerWarning": overlay(
                status_item,
                background=background(scheme, "warning"),
                border=border(scheme, "warning"),
            ),
            "containerError": overlay(
                status_item,
                background=background(scheme, "error"),
                border=border(scheme, "error"),
            ),
            "hover": {
                "containerOk": {"background": background(scheme, "300", "hovered")},
                "containerWarning": {"background": background(scheme, "warning", "hovered")},
                "containerError": {"background": background(scheme, "error", "hovered")},
            },
        },
        "sidebarButtons": {
            "groupLeft": {},
            "groupRight": {},
            "item": {
                "iconColor": icon_color(scheme, "muted"),
                "iconSize": 16,
                "iconSpacing": 8,
                "cornerRadius": 6,
                "padding": {"top": 1, "bottom": 1, "left": 6, "right": 6},
            },
            "itemActive": {"iconColor": icon_color(scheme, "active")},
            "itemHover": {
                "iconColor": icon_color(scheme, "primary"),
                "background": background(scheme, "300", "hovered"),
            },
            "badge": {
                "cornerRadius": 3,
                "padding": 2,
                "margin": {"bottom": -1, "right": -1},
                "border": border(scheme, "primary"),
                "background": icon_color(scheme, "info"),
            },
        },
    }


def workspace(scheme: Scheme, layout: Layout) -> StyleNode:
    titlebar_button = {
        "cornerRadius": 6,
        "padding": {"top": 1, "bottom": 1, "left": 8, "right": 8},
        **text(scheme, layout, "sans", "secondary", size="xs"),
        "background": background(scheme, "100"),
        "border": border(scheme, "secondary"),
        "hover": {
            **text(scheme, layout, "sans", "active", size="xs"),
            "background": background(scheme, "100", "hovered"),
            "border": border(scheme, "active"),
        },
    }
    avatar_border = {"color": "#00000088", "width": 1}

    return {
        "background": background(scheme, "300"),
        "joiningProjectAvatar": {"cornerRadius": 40, "width": 80},
        "joiningProjectMessage": {
            "padding": 12,
            **text(scheme, layout, "sans", "primary", size="lg"),
        },
        "externalLocationMessage": {
            "background": background(scheme, "info"),
            "border": border(scheme, "info"),
            "cornerRadius": 6,
            "padding": 12,
            "margin": {"bottom": 8, "right": 8},
            **text(scheme, layout, "sans", "feature", size="xs"),
        },
        "leaderBorderOpacity": 0.7,
        "leaderBorderWidth": 2.0,
        "tabBar": tab_bar(scheme, layout),
        "modal": {
            "margin": {"bottom": 52, "top": 52},
            "cursor": "Arrow",
        },
        "sidebar": {
            "initialSize": 240,
            "border": border(scheme, "primary", left=True, right=True),
        },
        "paneDivider": {
            "color": border_color(scheme, "secondary"),
            "width": 1,
        },
        "statusBar": status_bar(scheme, layout),
        "titlebar": {
            "avatarWidth": AVATAR_WIDTH,
            "avatarMargin": 8,
            "height": 33,
            "background": background(scheme, "100"),
            "border": border(scheme, "primary", bottom=True, overlay=True),
            "padding": {"left": 80, "right": TITLEBAR_PADDING},
            "title": text(scheme, layout, "sans", "primary"),
            "avatar": {
                "cornerRadius": AVATAR_WIDTH // 2,
                "border": avatar_border,
            },
            "inactiveAvatar": {
                "cornerRadius": AVATAR_WIDTH // 2,
                "border": overlay(avatar_border),
                "grayscale": True,
            },
            "avatarRibbon": {"height": 3, "width": 12},
            "signInPrompt": overlay(titlebar_button),
            "offlineIcon": {
                "color": icon_color(scheme, "secondary"),
                "width": 16,
                "margin": {"left": TITLEBAR_PADDING},
                "padding": {"right": 4},
            },
            "outdatedWarning": {
                **text(scheme, layout, "sans", "warning", size="xs"),
                "background": with_opacity(background(scheme, "warning"), 0.3),
                "border": border(scheme, "warning"),
                "margin": {"left": TITLEBAR_PADDING},
                "padding": {"left": 8, "right": 8},
                "cornerRadius": 6,
            },
            "callControl": {
                "cornerRadius": 6,
                "color": icon_color(scheme, "secondary"),
                "iconWidth": 12,
                "buttonWidth": 20,
                "hover": {
                    "background": background(scheme, "100", "hovered"),
                    "color": icon_color(scheme, "primary"),
                },
            },
            "toggleContactsButton": {
                "margin": {"left": 6},
                "cornerRadius": 6,
                "color": icon_color(scheme, "secondary"),
                "iconWidth": 8,
                "buttonWidth": 20,
                "active": {
                    "background": background(scheme, "100", "active"),
                    "color": icon_color(scheme, "active"),
                },
                "hover": {
                    "background": background(scheme, "100", "hovered"),
                    "color": icon_color(scheme, "primary"),
                },
            },
            "toggleContactsBadge": {
                "cornerRadius": 3,
                "padding": 2,
                "margin": {"top": 3, "left": 3},
                "border": border(scheme, "primary"),
                "background": icon_color(scheme, "feature"),
            },
            "shareButton": overlay(titlebar_button),
        },
        "toolbar": {
            "height": 34,
            "background": background(scheme, "500"),
            "border": border(scheme, "secondary", bottom=True),
            "itemSpacing": 8,
            "navButton": {
                "color": icon_color(scheme, "secondary"),
                "iconWidth": 12,
                "buttonWidth": 24,
                "cornerRadius": 6,
                "hover": {
                    "color": icon_color(scheme, "active"),
                    "background": background(scheme, "on500", "hovered"),
                },
                "disabled": {"color": icon_color(scheme, "placeholder")},
            },
            "padding": {"left": 8, "right": 8, "top": 4, "bottom": 4},
        },
        "disconnectedOverlay": {
            **text(scheme, layout, "sans", "primary"),
            "background": with_opacity(background(scheme, "300"), 0.8),
        },
        "notification": {
            "margin": {"top": 10},
            "background": background(scheme, "100"),
            "cornerRadius": 6,
            "padding": 12,
            "border": border(scheme, "primary"),
            "shadow": shadow(scheme, "popover"),
        },
        "notifications": {
            "width": 400,
            "margin": {"right": 10, "bottom": 10},
        },
        "dock": {
            "initialSizeRight": 640,
            "initialSizeBottom": 480,
            "washColor": with_opacity(background(scheme, "500"), 0.5),
            "panel": {"border": border(scheme, "secondary")},
            "maximized": {
                "margin": 32,
                "border": border(scheme, "secondary", overlay=True),
                "shadow": shadow(scheme, "modal"),
            },
        },
        "dropTargetOverlayColor": with_opacity(foreground(scheme, "secondary"), 0.5),
    }
