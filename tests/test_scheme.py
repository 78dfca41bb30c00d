"""Tests for color scheme assembly."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from themesmith.color.ramp import build_ramp, color_ramp
from themesmith.color.scheme import (
    BACKGROUND_SLOTS,
    BORDER_SLOTS,
    ICON_SLOTS,
    SYNTAX_SLOTS,
    TEXT_SLOTS,
    build_scheme,
)
from themesmith.color.spaces import srgb_to_oklab
from themesmith.config import RAMP_ROLES
from themesmith.core.types import Color, FontWeight
from themesmith.errors import MissingRampError


def _lightness(color: Color) -> float:
    return float(srgb_to_oklab(color.unit_rgb)[0])


class TestRequiredRoles:
    """Tests for ramp role validation."""

    @pytest.mark.parametrize("role", RAMP_ROLES)
    def test_missing_role_named(self, bw_ramps, role):
        ramps = {k: v for k, v in bw_ramps.items() if k != role}
        with pytest.raises(MissingRampError) as exc:
            build_scheme("broken", False, ramps)
        assert exc.value.role == role
        assert role in str(exc.value)

    def test_first_missing_role_reported(self, bw_ramps):
        ramps = {k: v for k, v in bw_ramps.items() if k not in ("red", "blue")}
        with pytest.raises(MissingRampError) as exc:
            build_scheme("broken", False, ramps)
        assert exc.value.role == "red"

    def test_extra_roles_allowed(self, bw_ramps):
        ramps = dict(bw_ramps, teal=color_ramp("#008080"))
        scheme = build_scheme("extra", False, ramps)
        assert "teal" in scheme.ramps.ramps


class TestOrientation:
    """Dark themes read backgrounds from the low end, light from the high end."""

    def test_dark_background_is_darkest(self, dark_scheme):
        assert dark_scheme.background["500"].base == Color(0, 0, 0)

    def test_dark_text_is_lightest(self, dark_scheme):
        assert dark_scheme.text["active"] == Color(255, 255, 255)

    def test_light_inverts(self, light_scheme):
        assert light_scheme.background["500"].base == Color(255, 255, 255)
        assert light_scheme.text["active"] == Color(0, 0, 0)

    def test_end_to_end_contrast(self, bw_ramps):
        """neutral=[black, white], red from #B4637A: dark vs light swap ends."""
        dark = build_scheme("dark", False, bw_ramps)
        light = build_scheme("light", True, bw_ramps)
        assert _lightness(dark.background["500"].base) < 0.2
        assert _lightness(dark.text["primary"]) > 0.8
        assert _lightness(light.background["500"].base) > 0.8
        assert _lightness(light.text["primary"]) < 0.2

    def test_light_orientation_matches_reversed_sampling(self, bw_ramps, light_scheme):
        neutral = bw_ramps["neutral"]
        position = TEXT_SLOTS["secondary"][1]
        assert light_scheme.text["secondary"] == neutral.sample(1.0 - position)

    def test_input_ramps_not_modified(self, bw_ramps):
        build_scheme("light", True, bw_ramps)
        assert bw_ramps["neutral"].sample(0.0) == Color(0, 0, 0)


class TestSlots:
    """Tests for semantic slot coverage and interaction states."""

    def test_all_slots_present(self, dark_scheme):
        assert set(dark_scheme.background) == set(BACKGROUND_SLOTS)
        assert set(dark_scheme.border) == set(BORDER_SLOTS)
        assert set(dark_scheme.text) == set(TEXT_SLOTS)
        assert set(dark_scheme.icon) == set(ICON_SLOTS)
        assert set(dark_scheme.syntax) == set(SYNTAX_SLOTS)

    def test_states_step_toward_foreground(self, dark_scheme):
        states = dark_scheme.background["500"]
        base, hovered, focused, active = (
            _lightness(states.base),
            _lightness(states.hovered),
            _lightness(states.focused),
            _lightness(states.active),
        )
        assert base < hovered < focused < active

    def test_disabled_matches_base(self, dark_scheme):
        states = dark_scheme.background["300"]
        assert states.disabled == states.base

    def test_state_lookup_by_name(self, dark_scheme):
        states = dark_scheme.background["ok"]
        assert states.get("hovered") == states.hovered
        with pytest.raises(KeyError):
            states.get("pressed")

    def test_text_hierarchy(self, dark_scheme):
        order = ["placeholder", "muted", "secondary", "primary", "active"]
        values = [_lightness(dark_scheme.text[slot]) for slot in order]
        assert values == sorted(values)

    def test_tints_use_their_hue(self, dark_scheme, bw_ramps):
        assert dark_scheme.text["error"] == bw_ramps["red"].sample(0.5)
        assert dark_scheme.text["ok"] == bw_ramps["green"].sample(0.5)


class TestPlayers:
    """Tests for collaborator colors."""

    def test_eight_players(self, dark_scheme):
        assert len(dark_scheme.players) == 8

    def test_hue_order(self, dark_scheme, bw_ramps):
        expected = ["blue", "green", "magenta", "orange", "violet", "cyan", "red", "yellow"]
        for number, role in enumerate(expected, start=1):
            assert dark_scheme.player(number).cursor == bw_ramps[role].sample(0.5)

    def test_selection_is_translucent_cursor(self, dark_scheme):
        player = dark_scheme.player(1)
        assert player.selection.alpha == pytest.approx(0.24)
        assert player.selection.alpha < player.cursor.alpha
        assert player.selection.with_alpha(1.0) == player.cursor

    def test_player_numbers_are_one_based(self, dark_scheme):
        with pytest.raises(IndexError):
            dark_scheme.player(0)
        with pytest.raises(IndexError):
            dark_scheme.player(9)


class TestSyntax:
    """Tests for syntax highlight records."""

    def test_weights_and_flags(self, dark_scheme):
        syntax = dark_scheme.syntax
        assert syntax["title"].weight is FontWeight.BOLD
        assert syntax["emphasis.strong"].weight is FontWeight.BOLD
        assert syntax["keyword"].weight is FontWeight.NORMAL
        assert syntax["linkUri"].underline is True
        assert syntax["linkText"].italic is True
        assert syntax["keyword"].italic is None

    def test_family_defaults_shared(self, dark_scheme):
        syntax = dark_scheme.syntax
        assert syntax["enum"].color == syntax["operator"].color == syntax["string"].color
        assert syntax["number"].color == syntax["boolean"].color

    def test_to_style(self, dark_scheme):
        style = dark_scheme.syntax["linkUri"].to_style()
        assert style == {
            "color": dark_scheme.syntax["linkUri"].color.hex,
            "weight": "normal",
            "underline": True,
        }


class TestEditorAndShadows:
    """Tests for supplemented editor colors and shadows."""

    def test_line_washes_are_translucent(self, dark_scheme):
        editor = dark_scheme.editor
        assert editor.line_active.alpha < editor.line_highlighted.alpha < 1.0

    def test_occurrences_wash_the_background_end(self, dark_scheme, light_scheme):
        for scheme, rgb in ((dark_scheme, (0, 0, 0)), (light_scheme, (255, 255, 255))):
            read = scheme.editor.occurrence
            write = scheme.editor.active_occurrence
            assert (read.r, read.g, read.b) == rgb
            assert (write.r, write.g, write.b) == rgb
            assert read.alpha == pytest.approx(0.12)
            assert write.alpha == pytest.approx(0.16)

    def test_gutter_follows_text(self, dark_scheme):
        assert dark_scheme.editor.gutter_primary == dark_scheme.text["placeholder"]
        assert dark_scheme.editor.gutter_active == dark_scheme.text["active"]

    def test_shadow_geometry(self, dark_scheme):
        assert dark_scheme.popover_shadow.blur == 4
        assert dark_scheme.popover_shadow.offset == (1, 2)
        assert dark_scheme.modal_shadow.blur == 16
        assert dark_scheme.modal_shadow.offset == (0, 2)

    def test_shadow_color(self, dark_scheme, light_scheme):
        for scheme in (dark_scheme, light_scheme):
            color = scheme.popover_shadow.color
            assert color.alpha == pytest.approx(0.2)
            assert (color.r, color.g, color.b) == (0, 0, 0)


class TestImmutability:
    """Schemes never change after construction."""

    def test_frozen(self, dark_scheme):
        with pytest.raises(dataclasses.FrozenInstanceError):
            dark_scheme.name = "other"

    def test_slot_tables_read_only(self, dark_scheme):
        with pytest.raises(TypeError):
            dark_scheme.text["primary"] = Color(1, 2, 3)

    def test_deterministic(self, bw_ramps):
        first = build_scheme("a", False, bw_ramps)
        second = build_scheme("a", False, bw_ramps)
        assert first.text == second.text
        assert first.players == second.players
        assert np.all([
            first.background[k] == second.background[k] for k in BACKGROUND_SLOTS
        ])
