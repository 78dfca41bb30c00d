"""Shared style helpers.

Every helper reads from a :class:`Scheme` (and a :class:`Layout` where
typography is involved) and returns JSON-native values: hex strings,
numbers, booleans and plain dicts. Component modules build their
subtrees from these, and build variants with :func:`overlay` rather than
by mutating a shared record.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from themesmith.color.scheme import Scheme
from themesmith.core.types import Color, FontWeight, Layout

StyleNode = dict[str, Any]


def text(
    scheme: Scheme,
    layout: Layout,
    family: str,
    color: str = "primary",
    size: Optional[str] = None,
    weight: Optional[Union[FontWeight, str]] = None,
    underline: Optional[bool] = None,
    italic: Optional[bool] = None,
) -> StyleNode:
    """Text style from a font family token and a text color slot.

    ``size`` defaults to ``sm`` for sans and ``md`` for mono.
    """
    if size is None:
        size = "sm" if family == "sans" else "md"
    style: StyleNode = {
        "family": layout.font_family(family),
        "color": foreground(scheme, color),
        "size": layout.font_size(size),
    }
    if weight is not None:
        style["weight"] = FontWeight(weight).value
    if underline is not None:
        style["underline"] = underline
    if italic is not None:
        style["italic"] = italic
    return style


def border(
    scheme: Scheme,
    color: str = "primary",
    *,
    width: int = 1,
    top: Optional[bool] = None,
    bottom: Optional[bool] = None,
    left: Optional[bool] = None,
    right: Optional[bool] = None,
    overlay: Optional[bool] = None,
) -> StyleNode:
    """Border style; side flags are emitted only when given."""
    style: StyleNode = {"color": border_color(scheme, color), "width": width}
    for side, flag in (
        ("top", top), ("bottom", bottom), ("left", left), ("right", right), ("overlay", overlay),
    ):
        if flag is not None:
            style[side] = flag
    return style


def background(scheme: Scheme, slot: str = "500", state: str = "base") -> str:
    return scheme.background[slot].get(state).hex


def foreground(scheme: Scheme, slot: str = "primary") -> str:
    return scheme.text[slot].hex


def border_color(scheme: Scheme, slot: str = "primary") -> str:
    return scheme.border[slot].hex


def icon_color(scheme: Scheme, slot: str = "primary") -> str:
    return scheme.icon[slot].hex


def with_opacity(color: str, alpha: float) -> str:
    """Re-emit a hex color string at a different alpha."""
    return Color.parse(color).with_alpha(alpha).hex


def shadow(scheme: Scheme, kind: str = "popover") -> StyleNode:
    """Shadow record for ``popover`` or ``modal`` elevation."""
    if kind == "popover":
        value = scheme.popover_shadow
    elif kind == "modal":
        value = scheme.modal_shadow
    else:
        raise KeyError(f"Unknown shadow kind: {kind!r}")
    return {
        "blur": value.blur,
        "color": value.color.hex,
        "offset": list(value.offset),
    }


def selection(scheme: Scheme, player_number: int) -> StyleNode:
    """Cursor and selection colors for one collaborator."""
    player = scheme.player(player_number)
    return {
        "cursor": player.cursor.hex,
        "selection": player.selection.hex,
    }


def panel(layout: Layout) -> StyleNode:
    """Padding shared by the side panels."""
    padding = layout.panel_padding
    return {"padding": {"top": padding, "left": padding, "bottom": padding, "right": padding}}


def overlay(base: Mapping[str, Any], **overrides: Any) -> StyleNode:
    """Build a variant record from ``base`` and explicit overrides.

    Returns a new dict. Where both sides hold a mapping the two are merged
    key by key; any other override replaces the base value. Neither input
    is mutated.
    """
    return _merge(base, overrides)


def _merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> StyleNode:
    merged = {key: _copy(value) for key, value in base.items()}
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _merge(current, value)
        else:
            merged[key] = _copy(value)
    return merged


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_copy(v) for v in value]
    return value
