"""Key flattening: camelCase style keys to the renderer's snake_case."""

from __future__ import annotations

import re
from typing import Any

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def decamelize(key: str) -> str:
    """``tabBar`` -> ``tab_bar``; already snake_case keys pass through."""
    key = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
    key = _WORD_BOUNDARY.sub(r"\1_\2", key)
    return key.lower()


def decamelize_tree(tree: Any) -> Any:
    """Rename every mapping key, preserving order. Values are untouched."""
    if isinstance(tree, dict):
        return {decamelize(key): decamelize_tree(value) for key, value in tree.items()}
    if isinstance(tree, list):
        return [decamelize_tree(item) for item in tree]
    return tree
