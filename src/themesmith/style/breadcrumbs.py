from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import StyleNode, text


def breadcrumbs(scheme: Scheme, layout: Layout) -> StyleNode:
    return {
        **text(scheme, layout, "sans", "secondary"),
        "padding": {"left": 6},
    }
