"""Built-in theme seeds."""

from __future__ import annotations

from themesmith.core.types import ThemeSeed
from themesmith.themes import cave, rose_pine, sandcastle, summercamp

ALL_THEMES: tuple[ThemeSeed, ...] = (
    cave.dark,
    cave.light,
    rose_pine.dark,
    rose_pine.dawn,
    sandcastle.dark,
    summercamp.dark,
)


def get_theme(name: str) -> ThemeSeed:
    """Look up a built-in seed by name (case-insensitive)."""
    for seed in ALL_THEMES:
        if seed.name.lower() == name.lower():
            return seed
    available = ", ".join(seed.name for seed in ALL_THEMES)
    raise KeyError(f"Unknown theme '{name}'. Available: {available}")


__all__ = ["ALL_THEMES", "get_theme"]
