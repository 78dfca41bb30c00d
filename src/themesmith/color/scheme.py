"""Color scheme assembly: semantic roles sampled from a ramp set.

Every slot is pinned to one ramp and one hard-coded position in
appearance space (0 = background end, 1 = foreground end). Light themes
reverse their ramps before sampling, so the same tables serve both
appearances: dark schemes read backgrounds from the dark end of
``neutral`` and text from the light end, light schemes the opposite.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from themesmith.color.ramp import Ramp
from themesmith.config import (
    PLAYER_POSITION,
    PLAYER_RAMPS,
    PLAYER_SELECTION_ALPHA,
    RAMP_ROLES,
    SHADOW_ALPHA,
    STATE_OFFSETS,
    STATE_STEP,
)
from themesmith.core.types import (
    Color,
    EditorColors,
    FontWeight,
    Player,
    Shadow,
    StateColors,
    SyntaxHighlight,
)
from themesmith.errors import MissingRampError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Sampling tables: slot -> (ramp role, position)
# ---------------------------------------------------------------------------

BACKGROUND_SLOTS = {
    "100": ("neutral", 0.15),
    "300": ("neutral", 0.10),
    "500": ("neutral", 0.0),
    "on300": ("neutral", 0.05),
    "on500": ("neutral", 0.15),
    "ok": ("green", 0.15),
    "error": ("red", 0.15),
    "warning": ("yellow", 0.15),
    "info": ("blue", 0.15),
}

BORDER_SLOTS = {
    "primary": ("neutral", 0.08),
    "secondary": ("neutral", 0.12),
    "muted": ("neutral", 0.20),
    "focused": ("blue", 0.40),
    "active": ("neutral", 0.30),
    "ok": ("green", 0.30),
    "error": ("red", 0.30),
    "warning": ("yellow", 0.30),
    "info": ("blue", 0.30),
}

TEXT_SLOTS = {
    "primary": ("neutral", 0.90),
    "secondary": ("neutral", 0.75),
    "muted": ("neutral", 0.60),
    "placeholder": ("neutral", 0.45),
    "active": ("neutral", 1.0),
    "feature": ("blue", 0.5),
    "ok": ("green", 0.5),
    "error": ("red", 0.5),
    "warning": ("yellow", 0.5),
    "info": ("blue", 0.5),
}

ICON_SLOTS = {
    "primary": ("neutral", 0.80),
    "secondary": ("neutral", 0.65),
    "muted": ("neutral", 0.50),
    "placeholder": ("neutral", 0.40),
    "active": ("neutral", 1.0),
    "feature": ("blue", 0.5),
    "ok": ("green", 0.5),
    "error": ("red", 0.5),
    "warning": ("yellow", 0.5),
    "info": ("blue", 0.5),
}

# kind -> (ramp role, position, weight, italic, underline)
SYNTAX_SLOTS = {
    "primary": ("neutral", 1.0, FontWeight.NORMAL, None, None),
    "comment": ("neutral", 0.71, FontWeight.NORMAL, None, None),
    "punctuation": ("neutral", 0.75, FontWeight.NORMAL, None, None),
    "constant": ("neutral", 0.55, FontWeight.NORMAL, None, None),
    "keyword": ("blue", 0.5, FontWeight.NORMAL, None, None),
    "function": ("yellow", 0.5, FontWeight.NORMAL, None, None),
    "type": ("cyan", 0.5, FontWeight.NORMAL, None, None),
    "variant": ("blue", 0.5, FontWeight.NORMAL, None, None),
    "property": ("blue", 0.5, FontWeight.NORMAL, None, None),
    "enum": ("orange", 0.5, FontWeight.NORMAL, None, None),
    "operator": ("orange", 0.5, FontWeight.NORMAL, None, None),
    "string": ("orange", 0.5, FontWeight.NORMAL, None, None),
    "number": ("green", 0.5, FontWeight.NORMAL, None, None),
    "boolean": ("green", 0.5, FontWeight.NORMAL, None, None),
    "predictive": ("neutral", 0.60, FontWeight.NORMAL, None, None),
    "title": ("yellow", 0.5, FontWeight.BOLD, None, None),
    "emphasis": ("blue", 0.5, FontWeight.NORMAL, None, None),
    "emphasis.strong": ("blue", 0.5, FontWeight.BOLD, None, None),
    "linkUri": ("green", 0.5, FontWeight.NORMAL, None, True),
    "linkText": ("orange", 0.5, FontWeight.NORMAL, True, None),
}


@dataclass(frozen=True)
class RampSet:
    """Appearance-oriented ramps keyed by role name."""
    ramps: Mapping[str, Ramp]

    def __getitem__(self, role: str) -> Ramp:
        try:
            return self.ramps[role]
        except KeyError:
            raise MissingRampError(role) from None

    def __getattr__(self, role: str) -> Ramp:
        if role.startswith("_") or role == "ramps":
            raise AttributeError(role)
        return self[role]

    def __iter__(self):
        return iter(self.ramps)


@dataclass(frozen=True)
class Scheme:
    """Resolved semantic palette for one theme variant. Never mutated."""
    name: str
    is_light: bool
    ramps: RampSet
    background: Mapping[str, StateColors]
    border: Mapping[str, Color]
    text: Mapping[str, Color]
    icon: Mapping[str, Color]
    players: tuple[Player, ...]
    syntax: Mapping[str, SyntaxHighlight]
    editor: EditorColors
    popover_shadow: Shadow
    modal_shadow: Shadow

    def player(self, number: int) -> Player:
        """Player colors, numbered from 1 (the local user)."""
        if not 1 <= number <= len(self.players):
            raise IndexError(f"Player number must be 1-{len(self.players)}, got {number}")
        return self.players[number - 1]


def orient_ramps(ramps: Mapping[str, Ramp], is_light: bool) -> RampSet:
    """Check required roles and flip every ramp for light appearances."""
    for role in RAMP_ROLES:
        if role not in ramps:
            raise MissingRampError(role)
    oriented = {
        role: ramp.reversed() if is_light else ramp
        for role, ramp in ramps.items()
    }
    return RampSet(MappingProxyType(oriented))


def _sample(ramps: RampSet, slot: tuple[str, float]) -> Color:
    role, position = slot
    return ramps[role].sample(position)


def _state_colors(ramps: RampSet, role: str, position: float) -> StateColors:
    ramp = ramps[role]
    colors = ramp.sample_many(
        position + STATE_STEP * STATE_OFFSETS[state] for state in STATE_OFFSETS
    )
    return StateColors(**dict(zip(STATE_OFFSETS, colors)))


def _sample_table(ramps: RampSet, table: Mapping[str, tuple[str, float]]) -> Mapping[str, Color]:
    return MappingProxyType({slot: _sample(ramps, spec) for slot, spec in table.items()})


def build_scheme(name: str, is_light: bool, ramps: Mapping[str, Ramp]) -> Scheme:
    """Assemble the semantic palette for one theme.

    Args:
        name: Theme name.
        is_light: Appearance flag; light themes sample reversed ramps.
        ramps: Role name -> ramp. Must contain every role in ``RAMP_ROLES``.

    Raises:
        MissingRampError: A required role is absent.
    """
    oriented = orient_ramps(ramps, is_light)

    background = MappingProxyType({
        slot: _state_colors(oriented, role, position)
        for slot, (role, position) in BACKGROUND_SLOTS.items()
    })
    border = _sample_table(oriented, BORDER_SLOTS)
    text = _sample_table(oriented, TEXT_SLOTS)
    icon = _sample_table(oriented, ICON_SLOTS)

    players = tuple(
        _player(oriented[role]) for role in PLAYER_RAMPS
    )

    syntax = MappingProxyType({
        kind: SyntaxHighlight(
            color=oriented[role].sample(position),
            weight=weight,
            italic=italic,
            underline=underline,
        )
        for kind, (role, position, weight, italic, underline) in SYNTAX_SLOTS.items()
    })

    foreground = oriented.neutral.sample(1.0)
    backdrop = oriented.neutral.sample(0.0)
    violet = oriented.violet.sample(0.5)
    editor = EditorColors(
        line_active=foreground.with_alpha(0.07),
        line_highlighted=foreground.with_alpha(0.12),
        occurrence=backdrop.with_alpha(0.12),
        active_occurrence=backdrop.with_alpha(0.16),
        match=violet.with_alpha(0.5),
        active_match=violet.with_alpha(0.7),
        gutter_primary=text["placeholder"],
        gutter_active=text["active"],
    )

    # Shadows always use the darkest neutral, whichever end that is.
    darkest = oriented.neutral.sample(1.0 if is_light else 0.0)
    shadow_color = darkest.darken().with_alpha(SHADOW_ALPHA)

    scheme = Scheme(
        name=name,
        is_light=is_light,
        ramps=oriented,
        background=background,
        border=border,
        text=text,
        icon=icon,
        players=players,
        syntax=syntax,
        editor=editor,
        popover_shadow=Shadow(blur=4, color=shadow_color, offset=(1, 2)),
        modal_shadow=Shadow(blur=16, color=shadow_color, offset=(0, 2)),
    )
    logger.debug(
        "Built %s scheme '%s' from %d ramps",
        "light" if is_light else "dark", name, len(ramps),
    )
    return scheme


def _player(ramp: Ramp) -> Player:
    cursor = ramp.sample(PLAYER_POSITION)
    return Player(cursor=cursor, selection=cursor.with_alpha(PLAYER_SELECTION_ALPHA))
