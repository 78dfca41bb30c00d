"""Core data types and enums for ThemeSmith.

CRITICAL CONVENTION:
    Every scheme sampling position is expressed in "appearance space":
    0.0 is the background end of a ramp and 1.0 the foreground end.
    Light themes get there by reversing their ramps, never by flipping
    positions in the sampling tables.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

import numpy as np

from themesmith.config import DARKEN_STEP
from themesmith.errors import InvalidRampError

if TYPE_CHECKING:
    from themesmith.color.ramp import Ramp
    from themesmith.color.scheme import Scheme


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Appearance(str, Enum):
    """Theme variant controlling ramp sampling direction."""
    DARK = "dark"
    LIGHT = "light"

    @property
    def is_light(self) -> bool:
        return self is Appearance.LIGHT


class FontWeight(str, Enum):
    """Font weights understood by the renderer."""
    NORMAL = "normal"
    BOLD = "bold"


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

NAMED_COLORS = {
    "black": "#000000",
    "white": "#ffffff",
    "transparent": "#00000000",
}

ColorLike = Union["Color", str]


@dataclass(frozen=True)
class Color:
    """An 8-bit sRGB color with an independent alpha channel."""
    r: int
    g: int
    b: int
    alpha: float = 1.0

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise InvalidRampError(f"Channel value {channel} outside 0-255")
        if not 0.0 <= self.alpha <= 1.0:
            raise InvalidRampError(f"Alpha {self.alpha} outside 0-1")

    @classmethod
    def parse(cls, value: ColorLike) -> Color:
        """Parse a hex string (#rgb, #rrggbb, #rrggbbaa) or a basic color name."""
        if isinstance(value, Color):
            return value
        text = NAMED_COLORS.get(str(value).strip().lower(), str(value).strip())
        match = _HEX_RE.match(text)
        if match is None:
            raise InvalidRampError(f"Cannot parse color: {value!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        alpha = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
        return cls(r, g, b, alpha)

    @classmethod
    def from_unit_rgb(cls, rgb, alpha: float = 1.0) -> Color:
        """Quantize unit-range sRGB floats to an 8-bit color."""
        channels = np.clip(np.rint(np.asarray(rgb, dtype=np.float64) * 255.0), 0, 255)
        alpha = min(max(float(alpha), 0.0), 1.0)
        return cls(int(channels[0]), int(channels[1]), int(channels[2]), alpha)

    @property
    def unit_rgb(self) -> np.ndarray:
        """(3,) float64 sRGB values in [0, 1]."""
        return np.array([self.r, self.g, self.b], dtype=np.float64) / 255.0

    @property
    def hex(self) -> str:
        """Stable string form: #rrggbb when opaque, #rrggbbaa otherwise."""
        base = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        alpha = int(round(self.alpha * 255))
        if alpha >= 255:
            return base
        return f"{base}{alpha:02x}"

    def with_alpha(self, alpha: float) -> Color:
        return Color(self.r, self.g, self.b, min(max(float(alpha), 0.0), 1.0))

    def darken(self, amount: float = 1.0) -> Color:
        """Lower perceptual lightness by ``amount`` Oklab steps."""
        from themesmith.color.spaces import oklab_to_srgb, srgb_to_oklab

        lab = srgb_to_oklab(self.unit_rgb)
        lab[0] = max(lab[0] - DARKEN_STEP * amount, 0.0)
        return Color.from_unit_rgb(oklab_to_srgb(lab), self.alpha)

    def mix(self, other: ColorLike, ratio: float = 0.5) -> Color:
        """Blend toward ``other`` in Oklab; ratio 0 keeps self, 1 gives other."""
        from themesmith.color.spaces import oklab_to_srgb, srgb_to_oklab

        other = Color.parse(other)
        t = min(max(float(ratio), 0.0), 1.0)
        lab = srgb_to_oklab(self.unit_rgb) * (1.0 - t) + srgb_to_oklab(other.unit_rgb) * t
        alpha = self.alpha + (other.alpha - self.alpha) * t
        return Color.from_unit_rgb(oklab_to_srgb(lab), alpha)

    def __str__(self) -> str:
        return self.hex


# ---------------------------------------------------------------------------
# Scheme records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StateColors:
    """One semantic slot sampled for every interaction state."""
    base: Color
    hovered: Color
    active: Color
    focused: Color
    disabled: Color

    def get(self, state: str) -> Color:
        try:
            return getattr(self, state)
        except AttributeError:
            raise KeyError(f"Unknown interaction state: {state!r}") from None


@dataclass(frozen=True)
class Player:
    """Collaborator cursor and selection colors."""
    cursor: Color
    selection: Color


@dataclass(frozen=True)
class SyntaxHighlight:
    """Highlight style for one syntax token kind."""
    color: Color
    weight: FontWeight = FontWeight.NORMAL
    italic: Optional[bool] = None
    underline: Optional[bool] = None

    def to_style(self) -> dict[str, Any]:
        style: dict[str, Any] = {"color": self.color.hex, "weight": self.weight.value}
        if self.italic is not None:
            style["italic"] = self.italic
        if self.underline is not None:
            style["underline"] = self.underline
        return style


@dataclass(frozen=True)
class Shadow:
    """Drop shadow parameters."""
    blur: int
    color: Color
    offset: tuple[int, int]


@dataclass(frozen=True)
class EditorColors:
    """Editor-specific washes and highlights."""
    line_active: Color
    line_highlighted: Color
    occurrence: Color
    active_occurrence: Color
    match: Color
    active_match: Color
    gutter_primary: Color
    gutter_active: Color


# ---------------------------------------------------------------------------
# Layout tokens
# ---------------------------------------------------------------------------

def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Layout:
    """Typography and spacing tokens shared by every style function."""
    font_families: Mapping[str, str] = field(
        default_factory=lambda: _frozen({"sans": "Zed Sans", "mono": "Zed Mono"})
    )
    font_sizes: Mapping[str, int] = field(
        default_factory=lambda: _frozen({
            "3xs": 8,
            "2xs": 10,
            "xs": 12,
            "sm": 14,
            "md": 16,
            "lg": 18,
            "xl": 20,
        })
    )
    corner_radius: int = 6
    panel_padding: int = 12
    border_width: int = 1

    def font_family(self, family: str) -> str:
        try:
            return self.font_families[family]
        except KeyError:
            raise KeyError(f"Unknown font family: {family!r}") from None

    def font_size(self, size: str) -> int:
        try:
            return self.font_sizes[size]
        except KeyError:
            raise KeyError(f"Unknown font size: {size!r}") from None


DEFAULT_LAYOUT = Layout()


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ThemeSeed:
    """Static seed definition for one theme variant."""
    name: str
    appearance: Appearance
    ramps: Mapping[str, Ramp]

    @property
    def is_light(self) -> bool:
        return self.appearance.is_light


@dataclass(frozen=True)
class Theme:
    """A fully built theme: scheme plus resolved, flattened style tree."""
    name: str
    appearance: Appearance
    scheme: Scheme
    styles: Mapping[str, Any]
