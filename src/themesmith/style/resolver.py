"""Inheritance resolution for composed style trees.

Two kinds of edges may appear in a tree:

* ``"extends": "$a.b.c"`` on a mapping: the mapping inherits every key of
  the node at ``a.b.c`` that it does not declare itself. Where both sides
  hold a mapping for the same key, the two are merged key by key.
  Declared keys keep their order and inherited keys follow.
* A string value ``"$a.b.c"``: replaced by a copy of the resolved value
  at ``a.b.c``.

Path components match keys exactly or by their snake_case form, so
``$chat_panel.channel_select`` finds ``chatPanel.channelSelect``.

Resolution runs in two phases. :meth:`StyleResolver.resolve` first indexes
every mapping and list into an arena addressed by path tuples, recording
the edges above. It then resolves nodes depth-first, marking each path
pending, active or done; reaching an active path again means the edges
form a cycle. Inheritance also reaches into children: if ``a`` extends
``b``, then ``a.x`` implicitly inherits from ``b.x`` when that exists.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Union

from themesmith.errors import CyclicExtendsError, DanglingExtendsError, StyleTreeError
from themesmith.style.flatten import decamelize

logger = logging.getLogger(__name__)

EXTENDS_KEY = "extends"
REFERENCE_PREFIX = "$"

Key = Union[str, int]
Path = tuple[Key, ...]


class _State(Enum):
    ACTIVE = "active"
    DONE = "done"


@dataclass(frozen=True)
class _Child:
    path: Path


@dataclass(frozen=True)
class _Ref:
    target: tuple[str, ...]


_MISSING = object()


@dataclass
class _Node:
    """One mapping or list of the unresolved tree."""
    path: Path
    is_list: bool = False
    extends: Optional[tuple[str, ...]] = None
    entries: dict[Key, Any] = field(default_factory=dict)

    def match(self, component: str) -> Optional[Key]:
        if self.is_list:
            if component.isdigit() and int(component) in self.entries:
                return int(component)
            return None
        if component in self.entries:
            return component
        wanted = decamelize(component)
        for key in self.entries:
            if decamelize(key) == wanted:
                return key
        return None


def is_reference(value: Any) -> bool:
    return (
        isinstance(value, str)
        and value.startswith(REFERENCE_PREFIX)
        and len(value) > len(REFERENCE_PREFIX)
    )


def parse_path(reference: str) -> tuple[str, ...]:
    """``"$a.b.c"`` -> ``("a", "b", "c")``; the ``$`` prefix is optional."""
    if reference.startswith(REFERENCE_PREFIX):
        reference = reference[len(REFERENCE_PREFIX):]
    components = tuple(reference.split("."))
    if not reference or any(not c for c in components):
        raise DanglingExtendsError(reference, "empty path component")
    return components


def _dotted(path: Path) -> str:
    return ".".join(str(k) for k in path)


class StyleResolver:
    """Resolves ``extends`` edges and ``$path`` references in a style tree."""

    def __init__(self) -> None:
        self._nodes: dict[Path, _Node] = {}
        self._state: dict[Path, _State] = {}
        self._resolved: dict[Path, Any] = {}
        self._stack: list[Path] = []

    def resolve(self, tree: dict[str, Any]) -> dict[str, Any]:
        """Return a new, fully resolved tree. ``tree`` is not modified.

        Raises:
            DanglingExtendsError: A reference names a path that does not exist.
            CyclicExtendsError: References depend on each other in a loop.
        """
        if not isinstance(tree, dict):
            raise StyleTreeError(f"Style tree root must be a mapping, got {type(tree).__name__}")
        self._nodes = {}
        self._state = {}
        self._resolved = {}
        self._stack = []

        self._index((), tree)
        edges = sum(node.extends is not None for node in self._nodes.values())
        logger.debug("Indexed %d style nodes (%d extends edges)", len(self._nodes), edges)

        return self._resolve_node(())

    # -- Phase 1: arena ------------------------------------------------------

    def _index(self, path: Path, value: Union[dict, list]) -> None:
        node = _Node(path=path, is_list=isinstance(value, list))
        self._nodes[path] = node
        items = enumerate(value) if node.is_list else value.items()
        for key, item in items:
            if key == EXTENDS_KEY and not node.is_list:
                if not isinstance(item, str):
                    raise StyleTreeError(
                        f"'{EXTENDS_KEY}' at '{_dotted(path)}' must be a path string, got {item!r}"
                    )
                node.extends = parse_path(item)
            elif isinstance(item, (dict, list)):
                child = path + (key,)
                node.entries[key] = _Child(child)
                self._index(child, item)
            elif is_reference(item):
                node.entries[key] = _Ref(parse_path(item))
            else:
                node.entries[key] = item

    # -- Phase 2: depth-first resolution ---------------------------------------

    def _guarded(self, path: Path, compute: Callable[[], Any]) -> Any:
        state = self._state.get(path)
        if state is _State.DONE:
            return self._resolved[path]
        if state is _State.ACTIVE:
            start = self._stack.index(path)
            raise CyclicExtendsError([_dotted(p) for p in self._stack[start:]] + [_dotted(path)])

        self._state[path] = _State.ACTIVE
        self._stack.append(path)
        value = compute()
        self._stack.pop()
        self._state[path] = _State.DONE
        self._resolved[path] = value
        return value

    def _resolve_node(self, path: Path) -> Any:
        return self._guarded(path, lambda: self._build(self._nodes[path]))

    def _build(self, node: _Node) -> Any:
        values = [
            (key, self._resolve_entry(node.path + (key,), entry))
            for key, entry in node.entries.items()
        ]
        if node.is_list:
            return [value for _, value in values]

        result = dict(values)
        for base_path, required in self._bases(node.path):
            base = self._lookup(base_path, required=required, origin=node.path)
            if base is _MISSING:
                continue
            if not isinstance(base, dict):
                if required:
                    raise DanglingExtendsError(
                        ".".join(base_path),
                        f"extended by '{_dotted(node.path)}' but is not a mapping",
                    )
                continue
            result = _inherit(result, base)
        return result

    def _resolve_entry(self, path: Path, entry: Any) -> Any:
        if isinstance(entry, _Child):
            return self._resolve_node(entry.path)
        if isinstance(entry, _Ref):
            return self._guarded(
                path,
                lambda: copy.deepcopy(self._lookup(entry.target, required=True, origin=path)),
            )
        return entry

    def _bases(self, path: Path) -> list[tuple[tuple[str, ...], bool]]:
        """Inheritance sources for ``path``, strongest first.

        The node's own ``extends`` is required to exist. Sources implied by
        an ancestor's ``extends`` are optional.
        """
        node = self._nodes[path]
        bases = []
        if node.extends is not None:
            bases.append((node.extends, True))
        if path and not self._nodes[path[:-1]].is_list:
            for parent_base, _ in self._bases(path[:-1]):
                bases.append((parent_base + (str(path[-1]),), False))
        return bases

    def _lookup(self, components: tuple[str, ...], required: bool, origin: Path) -> Any:
        """Resolved value at ``components``.

        Walks declared arena entries as far as possible so that looking up
        a sibling of a node under construction does not resolve its
        ancestors. An inherited key is read from the resolved node, or
        straight from its bases while that node is still being built.
        """
        path: Path = ()
        value: Any = _MISSING
        in_arena = True
        for component in components:
            if in_arena:
                node = self._nodes[path]
                key = node.match(component)
                if key is not None and isinstance(node.entries[key], _Child):
                    path = node.entries[key].path
                    continue
                in_arena = False
                if key is not None:
                    value = self._resolve_entry(path + (key,), node.entries[key])
                    continue
                # Undeclared keys can only come from inheritance.
                if node.is_list or not self._bases(path):
                    value = _MISSING
                elif self._state.get(path) is _State.ACTIVE:
                    value = self._guarded(
                        path + (component,), lambda: self._inherited(path, component)
                    )
                else:
                    value = _child(self._resolve_node(path), component)
            else:
                value = _child(value, component)
            if value is _MISSING:
                if required:
                    raise DanglingExtendsError(
                        ".".join(components), f"referenced from '{_dotted(origin)}'"
                    )
                return _MISSING
        if in_arena:
            return self._resolve_node(path)
        return value

    def _inherited(self, path: Path, component: str) -> Any:
        """Value ``path`` inherits for an undeclared key while ``path`` is under construction."""
        found = []
        for base_path, _ in self._bases(path):
            value = self._lookup(base_path + (component,), required=False, origin=path)
            if value is not _MISSING:
                found.append(value)
        if not found:
            return _MISSING
        value = found[0]
        for other in found[1:]:
            if isinstance(value, dict) and isinstance(other, dict):
                value = _inherit(value, other)
        return value


def _child(value: Any, component: str) -> Any:
    if isinstance(value, dict):
        if component in value:
            return value[component]
        wanted = decamelize(component)
        for key, item in value.items():
            if decamelize(key) == wanted:
                return item
        return _MISSING
    if isinstance(value, list) and component.isdigit() and int(component) < len(value):
        return value[int(component)]
    return _MISSING


def _inherit(own: dict[str, Any], base: dict[str, Any]) -> dict[str, Any]:
    result = {}
    for key, value in own.items():
        inherited = base.get(key, _MISSING)
        if isinstance(value, dict) and isinstance(inherited, dict):
            result[key] = _inherit(value, inherited)
        else:
            result[key] = value
    for key, value in base.items():
        if key not in own:
            result[key] = copy.deepcopy(value)
    return result


def resolve_extends(tree: dict[str, Any]) -> dict[str, Any]:
    """Resolve every ``extends`` edge and ``$path`` reference in ``tree``."""
    return StyleResolver().resolve(tree)
