"""Color ramps: continuous, perceptual interpolation over seed colors.

A ramp maps a position in [0, 1] to a color. Seeds sit at evenly spaced
breakpoints unless a ``domain`` supplies explicit ones, which lets a seed
table concentrate resolution where a theme needs it (e.g. many dark
shades packed near 0). Between breakpoints, positions map linearly and
colors blend in Oklab.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import numpy as np

from themesmith.color.spaces import hsl_to_srgb, oklab_to_srgb, srgb_hue, srgb_to_oklab
from themesmith.config import (
    COLOR_RAMP_END_LIGHTNESS,
    COLOR_RAMP_END_SATURATION,
    COLOR_RAMP_START_LIGHTNESS,
    COLOR_RAMP_START_SATURATION,
    MIN_RAMP_SEEDS,
)
from themesmith.core.types import Color, ColorLike
from themesmith.errors import InvalidRampError

logger = logging.getLogger(__name__)


class Ramp:
    """Immutable interpolation function over an ordered seed sequence."""

    __slots__ = ("_seeds", "_domain", "_lab", "_alpha")

    def __init__(self, seeds: Sequence[Color], domain: np.ndarray):
        self._seeds = tuple(seeds)
        self._domain = domain
        self._domain.setflags(write=False)
        self._lab = srgb_to_oklab(np.stack([c.unit_rgb for c in self._seeds]))
        self._lab.setflags(write=False)
        self._alpha = np.array([c.alpha for c in self._seeds], dtype=np.float64)

    @property
    def seeds(self) -> tuple[Color, ...]:
        return self._seeds

    @property
    def domain(self) -> tuple[float, ...]:
        return tuple(float(d) for d in self._domain)

    def sample(self, position: float) -> Color:
        """Color at ``position``; positions outside [0, 1] are clamped."""
        return self.sample_many([position])[0]

    def sample_many(self, positions: Iterable[float]) -> list[Color]:
        """Vectorized :meth:`sample` preserving input order."""
        p = np.clip(np.asarray(list(positions), dtype=np.float64), 0.0, 1.0)
        if p.size == 0:
            return []

        last_segment = len(self._seeds) - 2
        idx = np.clip(np.searchsorted(self._domain, p, side="right") - 1, 0, last_segment)
        lo = self._domain[idx]
        hi = self._domain[idx + 1]
        t = np.clip((p - lo) / (hi - lo), 0.0, 1.0)

        lab = self._lab[idx] * (1.0 - t)[:, None] + self._lab[idx + 1] * t[:, None]
        alpha = self._alpha[idx] + (self._alpha[idx + 1] - self._alpha[idx]) * t
        rgb = oklab_to_srgb(lab)

        colors = []
        for i in range(p.size):
            if t[i] == 0.0:
                colors.append(self._seeds[idx[i]])
            elif t[i] == 1.0:
                colors.append(self._seeds[idx[i] + 1])
            else:
                colors.append(Color.from_unit_rgb(rgb[i], alpha[i]))
        return colors

    def colors(self, count: int) -> list[Color]:
        """``count`` evenly spaced shades from the start to the end."""
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        if count == 1:
            return [self.sample(0.0)]
        return self.sample_many(np.linspace(0.0, 1.0, count))

    def reversed(self) -> Ramp:
        """Ramp running the other way: ``r.reversed().sample(p) == r.sample(1 - p)``."""
        return Ramp(self._seeds[::-1], (1.0 - self._domain[::-1]).copy())

    def __call__(self, position: float) -> Color:
        return self.sample(position)

    def __repr__(self) -> str:
        seeds = ", ".join(c.hex for c in self._seeds)
        return f"Ramp([{seeds}], domain={list(self.domain)})"


def build_ramp(
    seed_colors: Sequence[ColorLike],
    domain: Optional[Sequence[float]] = None,
) -> Ramp:
    """Build a ramp from two or more seed colors.

    Args:
        seed_colors: Ordered colors (``Color`` or hex strings).
        domain: Optional breakpoints, one per seed, strictly increasing
            and within [0, 1].

    Raises:
        InvalidRampError: Fewer than two seeds or an invalid domain.
    """
    seeds = [Color.parse(c) for c in seed_colors]
    if len(seeds) < MIN_RAMP_SEEDS:
        raise InvalidRampError(
            f"A ramp needs at least {MIN_RAMP_SEEDS} seed colors, got {len(seeds)}"
        )

    if domain is None:
        breakpoints = np.linspace(0.0, 1.0, len(seeds))
    else:
        breakpoints = np.asarray(list(domain), dtype=np.float64)
        if breakpoints.shape != (len(seeds),):
            raise InvalidRampError(
                f"Domain has {breakpoints.size} breakpoints for {len(seeds)} seeds"
            )
        if np.any(breakpoints < 0.0) or np.any(breakpoints > 1.0):
            raise InvalidRampError(f"Domain breakpoints must lie in [0, 1]: {list(breakpoints)}")
        if np.any(np.diff(breakpoints) <= 0.0):
            raise InvalidRampError(f"Domain must be strictly increasing: {list(breakpoints)}")

    return Ramp(seeds, breakpoints)


def color_ramp(color: ColorLike) -> Ramp:
    """Expand a single hue into a dark -> seed -> light ramp.

    The seed sits at the midpoint, so ``color_ramp(c).sample(0.5) == c``.
    """
    seed = Color.parse(color)
    hue = srgb_hue(seed.unit_rgb)
    start = Color.from_unit_rgb(
        hsl_to_srgb(hue, COLOR_RAMP_START_SATURATION, COLOR_RAMP_START_LIGHTNESS)
    )
    end = Color.from_unit_rgb(
        hsl_to_srgb(hue, COLOR_RAMP_END_SATURATION, COLOR_RAMP_END_LIGHTNESS)
    )
    logger.debug("Expanded %s to ramp %s -> %s", seed.hex, start.hex, end.hex)
    return build_ramp([start, seed, end])
