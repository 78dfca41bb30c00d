"""Compose the application-wide style tree from component functions."""

from __future__ import annotations

from typing import Callable

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.breadcrumbs import breadcrumbs
from themesmith.style.chat_panel import chat_panel
from themesmith.style.command_palette import command_palette
from themesmith.style.components import StyleNode
from themesmith.style.contacts_panel import contacts_panel
from themesmith.style.context_menu import context_menu
from themesmith.style.editor import editor
from themesmith.style.hover_popover import hover_popover
from themesmith.style.project_diagnostics import project_diagnostics
from themesmith.style.project_panel import project_panel
from themesmith.style.search import search
from themesmith.style.selector import selector
from themesmith.style.tooltip import tooltip
from themesmith.style.workspace import workspace

ComponentFn = Callable[[Scheme, Layout], StyleNode]

# Wire name -> component function, in emission order.
COMPONENTS: tuple[tuple[str, ComponentFn], ...] = (
    ("selector", selector),
    ("workspace", workspace),
    ("editor", editor),
    ("projectDiagnostics", project_diagnostics),
    ("commandPalette", command_palette),
    ("projectPanel", project_panel),
    ("chatPanel", chat_panel),
    ("contactsPanel", contacts_panel),
    ("contextMenu", context_menu),
    ("tooltip", tooltip),
    ("hoverPopover", hover_popover),
    ("search", search),
    ("breadcrumbs", breadcrumbs),
)


def compose_app(scheme: Scheme, layout: Layout) -> StyleNode:
    """Unresolved root tree: ``meta`` followed by one subtree per component."""
    root: StyleNode = {
        "meta": {
            "name": scheme.name,
            "isLight": scheme.is_light,
        },
    }
    for name, component in COMPONENTS:
        root[name] = component(scheme, layout)
    return root
