"""Theme build pipeline: seeds to scheme to style tree to JSON files.

This is the single entry point used by the CLI.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Iterable, Union

from themesmith.color.scheme import build_scheme
from themesmith.config import JSON_INDENT, THEME_FILE_SUFFIX
from themesmith.core.types import DEFAULT_LAYOUT, Layout, Theme, ThemeSeed
from themesmith.errors import ExportError
from themesmith.style.app import compose_app
from themesmith.style.flatten import decamelize_tree
from themesmith.style.resolver import resolve_extends

logger = logging.getLogger(__name__)


def build_theme(seed: ThemeSeed, layout: Layout = DEFAULT_LAYOUT) -> Theme:
    """Build one theme from its seed.

    Stages:
        1. Scheme: orient ramps and sample semantic slots
        2. Compose: run every component style function
        3. Resolve: apply ``extends`` and ``$path`` references
        4. Flatten: rename keys to snake_case
    """
    t0 = time.perf_counter()
    scheme = build_scheme(seed.name, seed.is_light, seed.ramps)
    tree = compose_app(scheme, layout)
    styles = decamelize_tree(resolve_extends(tree))
    logger.debug("Built '%s' in %.3fs", seed.name, time.perf_counter() - t0)
    return Theme(name=seed.name, appearance=seed.appearance, scheme=scheme, styles=styles)


def serialize(theme: Theme) -> str:
    """JSON text for a theme: 2-space indent, insertion order, no ASCII escaping."""
    return json.dumps(theme.styles, indent=JSON_INDENT, ensure_ascii=False)


def theme_path(theme: Theme, output_dir: Union[str, Path]) -> Path:
    return Path(output_dir) / f"{theme.name}{THEME_FILE_SUFFIX}"


def write_theme(theme: Theme, output_dir: Union[str, Path]) -> Path:
    """Write ``<name>.json`` into ``output_dir``, creating it if needed.

    Raises:
        ExportError: The directory or file could not be written.
    """
    path = theme_path(theme, output_dir)
    content = serialize(theme)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Cannot write theme '{theme.name}' to {path}: {exc}") from exc
    return path


def generate_themes(
    seeds: Iterable[ThemeSeed],
    output_dir: Union[str, Path],
    layout: Layout = DEFAULT_LAYOUT,
) -> list[Path]:
    """Build and write each theme in turn.

    Each theme is serialized in full before its file is opened, so a
    failure never leaves a partial file behind. The first error stops
    the run.
    """
    t0 = time.perf_counter()
    paths = []
    for seed in seeds:
        theme = build_theme(seed, layout)
        path = write_theme(theme, output_dir)
        logger.info("Generated %s", path)
        paths.append(path)
    logger.info("Generated %d themes in %.2fs", len(paths), time.perf_counter() - t0)
    return paths
