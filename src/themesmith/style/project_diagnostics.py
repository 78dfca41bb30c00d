"""Project-wide diagnostics view."""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import StyleNode, background, text


def project_diagnostics(scheme: Scheme, layout: Layout) -> StyleNode:
    return {
        "background": background(scheme, "300"),
        "tabIconSpacing": 4,
        "tabIconWidth": 13,
        "tabSummarySpacing": 10,
        "emptyMessage": text(scheme, layout, "sans", "primary", size="lg"),
        "statusBarItem": {
            **text(scheme, layout, "sans", "muted"),
            "margin": {"right": 10},
        },
    }
