"""Chat panel.

Hover and pending variants are declared with ``extends`` and value
references and filled in when the tree is resolved.
"""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import (
    StyleNode,
    background,
    border,
    foreground,
    overlay,
    panel,
    selection,
    shadow,
    text,
)


def chat_panel(scheme: Scheme, layout: Layout) -> StyleNode:
    hovered = background(scheme, "300", "hovered")
    return overlay(panel(layout), **{
        "channelName": text(scheme, layout, "sans", "primary", weight="bold"),
        "channelNameHash": {
            "text": text(scheme, layout, "sans", "muted"),
            "padding": {"right": 8},
        },
        "channelSelect": {
            "activeItem": {
                "extends": "$chatPanel.channel_select.item",
                "name": text(scheme, layout, "sans", "primary"),
            },
            "header": {
                "extends": "$chat_panel.channel_select.activeItem",
                "padding": {"bottom": 4, "left": 0},
            },
            "hoveredActiveItem": {
                "extends": "$chatPanel.channelSelect.hoveredItem",
                "name": text(scheme, layout, "sans", "primary"),
            },
            "hoveredItem": {
                "background": hovered,
                "cornerRadius": 6,
                "extends": "$chat_panel.channelSelect.item",
            },
            "item": {
                "name": text(scheme, layout, "sans", "secondary"),
                "padding": 4,
                "hash": overlay(
                    text(scheme, layout, "sans", "muted"),
                    margin={"right": 8},
                ),
            },
            "menu": {
                "background": background(scheme, "500"),
                "cornerRadius": 6,
                "padding": 4,
                "border": border(scheme, "primary"),
                "shadow": shadow(scheme, "popover"),
            },
        },
        "signInPrompt": overlay(
            text(scheme, layout, "sans", "primary"),
            underline=True,
        ),
        "hoveredSignInPrompt": {
            "color": foreground(scheme, "secondary"),
            "extends": "$chatPanel.signInPrompt",
        },
        "inputEditor": {
            "background": background(scheme, "300"),
            "cornerRadius": 6,
            "placeholderText": text(scheme, layout, "mono", "placeholder", size="sm"),
            "selection": selection(scheme, 1),
            "text": text(scheme, layout, "mono", "primary", size="sm"),
            "border": border(scheme, "primary"),
            "padding": {"bottom": 7, "left": 8, "right": 8, "top": 7},
        },
        "message": {
            "body": text(scheme, layout, "sans", "secondary"),
            "timestamp": text(scheme, layout, "sans", "muted"),
            "padding": {"bottom": 6},
            "sender": overlay(
                text(scheme, layout, "sans", "primary", weight="bold"),
                margin={"right": 8},
            ),
        },
        "pendingMessage": {
            "extends": "$chatPanel.message",
            "body": {"color": "$chatPanel.message.timestamp.color"},
            "sender": {"color": "$chatPanel.message.timestamp.color"},
            "timestamp": {"color": "$chatPanel.message.timestamp.color"},
        },
    })
