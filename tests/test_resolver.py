"""Tests for extends / reference resolution."""

from __future__ import annotations

import copy

import pytest

from themesmith.errors import CyclicExtendsError, DanglingExtendsError, StyleTreeError
from themesmith.style.app import compose_app
from themesmith.style.resolver import StyleResolver, parse_path, resolve_extends


def _walk(value):
    yield value
    if isinstance(value, dict):
        for key, item in value.items():
            yield key
            yield from _walk(item)
    elif isinstance(value, list):
        for item in value:
            yield from _walk(item)


class TestExtends:
    """Tests for inheritance semantics."""

    def test_override_wins(self):
        tree = {
            "b": {"k": "base", "j": 2},
            "a": {"extends": "$b", "k": "own"},
        }
        resolved = resolve_extends(tree)
        assert resolved["a"]["k"] == "own"
        assert resolved["a"]["j"] == 2

    def test_own_keys_first_then_inherited(self):
        tree = {
            "base": {"x": 1, "y": 2, "z": 3},
            "child": {"w": 0, "extends": "$base", "y": 20},
        }
        assert list(resolve_extends(tree)["child"].items()) == [
            ("w", 0), ("y", 20), ("x", 1), ("z", 3),
        ]

    def test_nested_mappings_merge(self):
        tree = {
            "editor": {"border": {"color": "#111111", "width": 1}, "padding": 4},
            "invalid": {"extends": "$editor", "border": {"color": "#ff0000"}},
        }
        invalid = resolve_extends(tree)["invalid"]
        assert invalid["border"] == {"color": "#ff0000", "width": 1}
        assert invalid["padding"] == 4

    def test_nested_override_replaces_scalar_base(self):
        tree = {
            "item": {"padding": 4},
            "header": {"extends": "$item", "padding": {"bottom": 4, "left": 0}},
        }
        assert resolve_extends(tree)["header"]["padding"] == {"bottom": 4, "left": 0}

    def test_extends_key_dropped(self):
        tree = {"b": {"x": 1}, "a": {"extends": "$b"}}
        resolved = resolve_extends(tree)
        assert "extends" not in resolved["a"]
        assert resolved["a"] == {"x": 1}

    def test_chain(self):
        tree = {
            "item": {"name": "secondary", "padding": 4},
            "active": {"extends": "$item", "name": "primary"},
            "header": {"extends": "$active", "padding": 0},
        }
        assert resolve_extends(tree)["header"] == {"padding": 0, "name": "primary"}

    def test_chain_declared_out_of_order(self):
        tree = {
            "hoveredActive": {"extends": "$hovered", "name": "primary"},
            "hovered": {"extends": "$item", "background": "#333333"},
            "item": {"name": "secondary", "padding": 4},
        }
        assert resolve_extends(tree)["hoveredActive"] == {
            "name": "primary",
            "background": "#333333",
            "padding": 4,
        }

    def test_nested_child_inherits_through_ancestor(self):
        """``a.c`` picks up keys from ``b.c`` when ``a`` extends ``b``."""
        tree = {
            "message": {"body": {"family": "Zed Sans", "color": "#aaaaaa", "size": 14}},
            "pending": {"extends": "$message", "body": {"color": "#555555"}},
        }
        body = resolve_extends(tree)["pending"]["body"]
        assert body == {"color": "#555555", "family": "Zed Sans", "size": 14}

    def test_inherited_values_are_copies(self):
        tree = {"b": {"pad": {"left": 1}}, "a": {"extends": "$b"}}
        resolved = resolve_extends(tree)
        assert resolved["a"]["pad"] == resolved["b"]["pad"]
        assert resolved["a"]["pad"] is not resolved["b"]["pad"]

    def test_snake_case_path_components(self):
        tree = {
            "chatPanel": {
                "channelSelect": {
                    "item": {"padding": 4},
                    "activeItem": {"extends": "$chat_panel.channel_select.item"},
                },
            },
        }
        resolved = resolve_extends(tree)
        assert resolved["chatPanel"]["channelSelect"]["activeItem"] == {"padding": 4}

    def test_input_not_mutated(self):
        tree = {
            "b": {"x": {"y": 1}},
            "a": {"extends": "$b", "x": {"z": 2}, "ref": "$b.x.y"},
        }
        snapshot = copy.deepcopy(tree)
        resolve_extends(tree)
        assert tree == snapshot


class TestReferences:
    """Tests for ``$path`` value references."""

    def test_scalar_reference(self):
        tree = {"text": {"muted": {"color": "#777777"}}, "label": {"color": "$text.muted.color"}}
        assert resolve_extends(tree)["label"]["color"] == "#777777"

    def test_mapping_reference_is_copied(self):
        tree = {"text": {"primary": {"color": "#ffffff"}}, "a": "$text.primary", "b": "$text.primary"}
        resolved = resolve_extends(tree)
        assert resolved["a"] == {"color": "#ffffff"}
        assert resolved["a"] is not resolved["b"]
        assert resolved["a"] is not resolved["text"]["primary"]

    def test_sibling_reference_inside_parent(self):
        tree = {
            "panel": {
                "message": {"timestamp": {"color": "#888888"}},
                "pending": {"color": "$panel.message.timestamp.color"},
            },
        }
        assert resolve_extends(tree)["panel"]["pending"]["color"] == "#888888"

    def test_reference_to_inherited_key(self):
        tree = {"a": {"x": 1}, "b": {"extends": "$a"}, "c": "$b.x"}
        assert resolve_extends(tree)["c"] == 1

    def test_reference_to_own_inherited_key(self):
        tree = {"b": {"z": 1}, "a": {"extends": "$b", "y": "$a.z"}}
        assert resolve_extends(tree)["a"] == {"y": 1, "z": 1}

    def test_reference_to_own_inherited_mapping(self):
        tree = {
            "base": {"text": {"color": "#111111", "size": 12}},
            "item": {"extends": "$base", "label": "$item.text.size"},
        }
        item = resolve_extends(tree)["item"]
        assert item["label"] == 12
        assert item["text"] == {"color": "#111111", "size": 12}

    def test_reference_to_nested_inherited_key(self):
        tree = {
            "b": {"c": {"z": 1}},
            "a": {"extends": "$b", "c": {"y": "$a.c.z"}},
        }
        assert resolve_extends(tree)["a"]["c"] == {"y": 1, "z": 1}

    def test_reference_chain(self):
        tree = {"a": "$b", "b": "$c", "c": 7}
        assert resolve_extends(tree) == {"a": 7, "b": 7, "c": 7}

    def test_reference_into_list(self):
        tree = {"guests": [{"cursor": "#111111"}, {"cursor": "#222222"}], "second": "$guests.1.cursor"}
        assert resolve_extends(tree)["second"] == "#222222"

    def test_references_inside_lists(self):
        tree = {"primary": "#123456", "colors": ["$primary", "#000000"]}
        assert resolve_extends(tree)["colors"] == ["#123456", "#000000"]

    def test_plain_strings_untouched(self):
        tree = {"color": "#00000088", "cursor": "Arrow", "dollar": "$"}
        assert resolve_extends(tree) == tree


class TestErrors:
    """Tests for dangling and cyclic references."""

    def test_dangling_extends(self):
        tree = {"a": {"extends": "$missing.node", "x": 1}}
        with pytest.raises(DanglingExtendsError) as exc:
            resolve_extends(tree)
        assert exc.value.path == "missing.node"
        assert "missing.node" in str(exc.value)

    def test_dangling_nested_component(self):
        tree = {"b": {"x": 1}, "a": {"extends": "$b.y"}}
        with pytest.raises(DanglingExtendsError) as exc:
            resolve_extends(tree)
        assert exc.value.path == "b.y"

    def test_dangling_reference(self):
        with pytest.raises(DanglingExtendsError):
            resolve_extends({"a": "$nowhere"})

    def test_extends_non_mapping(self):
        with pytest.raises(DanglingExtendsError):
            resolve_extends({"a": 1, "b": {"extends": "$a"}})

    def test_self_cycle(self):
        with pytest.raises(CyclicExtendsError) as exc:
            resolve_extends({"a": {"extends": "$a"}})
        assert exc.value.cycle == ("a", "a")

    def test_mutual_cycle(self):
        tree = {
            "x": {"extends": "$y", "a": 1},
            "y": {"extends": "$x", "b": 2},
        }
        with pytest.raises(CyclicExtendsError) as exc:
            resolve_extends(tree)
        assert exc.value.cycle == ("x", "y", "x")

    def test_three_node_cycle(self):
        tree = {
            "a": {"extends": "$b"},
            "b": {"extends": "$c"},
            "c": {"extends": "$a"},
        }
        with pytest.raises(CyclicExtendsError):
            resolve_extends(tree)

    def test_reference_cycle(self):
        with pytest.raises(CyclicExtendsError) as exc:
            resolve_extends({"a": "$b", "b": "$a"})
        assert exc.value.cycle == ("a", "b", "a")

    def test_extends_own_undeclared_child(self):
        with pytest.raises(CyclicExtendsError):
            resolve_extends({"a": {"extends": "$a.x"}})

    def test_missing_own_inherited_key(self):
        tree = {"b": {"z": 1}, "a": {"extends": "$b", "y": "$a.w"}}
        with pytest.raises(DanglingExtendsError):
            resolve_extends(tree)

    def test_reference_to_own_ancestor(self):
        with pytest.raises(CyclicExtendsError):
            resolve_extends({"a": {"b": "$a"}})

    def test_extends_must_be_string(self):
        with pytest.raises(StyleTreeError):
            resolve_extends({"a": {"extends": 3}})

    def test_empty_path_component(self):
        with pytest.raises(DanglingExtendsError):
            parse_path("$a..b")

    def test_resolver_reusable_after_error(self):
        resolver = StyleResolver()
        with pytest.raises(CyclicExtendsError):
            resolver.resolve({"a": {"extends": "$a"}})
        assert resolver.resolve({"b": {"x": 1}, "a": {"extends": "$b"}})["a"] == {"x": 1}


class TestComposedTree:
    """Resolution of the full application tree."""

    def test_no_edges_remain(self, dark_scheme, layout):
        resolved = resolve_extends(compose_app(dark_scheme, layout))
        for item in _walk(resolved):
            assert item != "extends"
            if isinstance(item, str):
                assert not (item.startswith("$") and len(item) > 1)

    def test_chat_panel_variants(self, dark_scheme, layout):
        chat = resolve_extends(compose_app(dark_scheme, layout))["chatPanel"]
        muted = chat["message"]["timestamp"]["color"]
        assert chat["pendingMessage"]["body"]["color"] == muted
        assert chat["pendingMessage"]["body"]["family"] == chat["message"]["body"]["family"]
        assert chat["pendingMessage"]["padding"] == {"bottom": 6}
        assert chat["hoveredSignInPrompt"]["underline"] is True
        assert chat["channelSelect"]["header"]["padding"] == {"bottom": 4, "left": 0}
        assert "hash" in chat["channelSelect"]["hoveredActiveItem"]

    def test_search_invalid_editor(self, dark_scheme, layout):
        search = resolve_extends(compose_app(dark_scheme, layout))["search"]
        assert search["invalidEditor"]["maxWidth"] == 400
        assert search["invalidEditor"]["border"]["color"] == dark_scheme.border["error"].hex
        assert search["activeHoveredOptionButton"]["cornerRadius"] == 6

    def test_contacts_panel_projects(self, dark_scheme, layout):
        contacts = resolve_extends(compose_app(dark_scheme, layout))["contactsPanel"]
        shared = contacts["hoveredSharedProject"]
        assert shared["height"] == 24
        assert shared["name"]["color"] == dark_scheme.text["secondary"].hex
        assert shared["name"]["margin"] == {"right": 6}
        assert "background" not in contacts["hoveredUnsharedProject"]
        assert contacts["hoveredUnsharedProject"]["cornerRadius"] == 6
        assert contacts["hoveredUnsharedProject"]["height"] == 24
