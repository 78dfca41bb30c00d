"""Editor styles: gutter, highlights, autocomplete, diagnostics and syntax."""

from __future__ import annotations

from themesmith.color.scheme import Scheme
from themesmith.core.types import Layout
from themesmith.style.components import (
    StyleNode,
    background,
    border,
    foreground,
    icon_color,
    overlay,
    selection,
    text,
)

DIAGNOSTIC_TEXT_SCALE = 0.857

DIAGNOSTIC_SEVERITIES = (
    ("errorDiagnostic", "error"),
    ("warningDiagnostic", "warning"),
    ("informationDiagnostic", "info"),
    ("hintDiagnostic", "info"),
    ("invalidErrorDiagnostic", "muted"),
    ("invalidHintDiagnostic", "muted"),
    ("invalidInformationDiagnostic", "muted"),
    ("invalidWarningDiagnostic", "muted"),
)


def diagnostic(scheme: Scheme, layout: Layout, color: str) -> StyleNode:
    return {
        "textScaleFactor": DIAGNOSTIC_TEXT_SCALE,
        "header": {"border": border(scheme, "primary", top=True)},
        "message": {
            "text": text(scheme, layout, "sans", color, size="sm"),
            "highlightText": text(scheme, layout, "sans", color, size="sm", weight="bold"),
        },
    }


def syntax(scheme: Scheme) -> StyleNode:
    return {kind: highlight.to_style() for kind, highlight in scheme.syntax.items()}


def editor(scheme: Scheme, layout: Layout) -> StyleNode:
    colors = scheme.editor
    autocomplete_item = {
        "cornerRadius": 6,
        "padding": {"bottom": 2, "left": 6, "right": 6, "top": 2},
    }
    keyword = scheme.syntax["keyword"]

    style: StyleNode = {
        "textColor": foreground(scheme, "secondary"),
        "background": background(scheme, "500"),
        "activeLineBackground": colors.line_active.hex,
        "codeActionsIndicator": icon_color(scheme, "secondary"),
        "diffBackgroundDeleted": background(scheme, "error"),
        "diffBackgroundInserted": background(scheme, "ok"),
        "documentHighlightReadBackground": colors.occurrence.hex,
        "documentHighlightWriteBackground": colors.active_occurrence.hex,
        "errorColor": foreground(scheme, "error"),
        "gutterBackground": background(scheme, "500"),
        "gutterPaddingFactor": 2.5,
        "highlightedLineBackground": colors.line_highlighted.hex,
        "lineNumber": colors.gutter_primary.hex,
        "lineNumberActive": colors.gutter_active.hex,
        "renameFade": 0.6,
        "unnecessaryCodeFade": 0.5,
        "selection": selection(scheme, 1),
        "guestSelections": [selection(scheme, n) for n in range(2, 9)],
        "autocomplete": {
            "background": background(scheme, "100"),
            "cornerRadius": 6,
            "padding": 6,
            "border": border(scheme, "secondary"),
            "item": autocomplete_item,
            "hoveredItem": overlay(
                autocomplete_item, background=background(scheme, "100", "hovered")
            ),
            "margin": {"left": -14},
            "matchHighlight": {
                "color": keyword.color.hex,
                "weight": keyword.weight.value,
            },
            "selectedItem": overlay(
                autocomplete_item, background=background(scheme, "100", "active")
            ),
        },
        "diagnosticHeader": {
            "background": background(scheme, "500"),
            "iconWidthFactor": 1.5,
            "textScaleFactor": DIAGNOSTIC_TEXT_SCALE,
            "border": border(scheme, "secondary", bottom=True, top=True),
            "code": overlay(
                text(scheme, layout, "mono", "muted", size="sm"),
                margin={"left": 10},
            ),
            "message": {
                "highlightText": text(scheme, layout, "sans", "primary", size="sm", weight="bold"),
                "text": text(scheme, layout, "sans", "secondary", size="sm"),
            },
        },
        "diagnosticPathHeader": {
            "background": colors.line_active.hex,
            "textScaleFactor": DIAGNOSTIC_TEXT_SCALE,
            "filename": text(scheme, layout, "mono", "primary", size="sm"),
            "path": overlay(
                text(scheme, layout, "mono", "muted", size="sm"),
                margin={"left": 12},
            ),
        },
    }
    for key, color in DIAGNOSTIC_SEVERITIES:
        style[key] = diagnostic(scheme, layout, color)
    style["matchBackground"] = colors.match.hex
    style["activeMatchBackground"] = colors.active_match.hex
    style["syntax"] = syntax(scheme)
    return style
