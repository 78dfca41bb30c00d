"""ThemeSmith CLI application.

Commands:
    build - Generate JSON theme files
    list  - Show the built-in themes
    ramp  - Sample one appearance-oriented ramp of a theme
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
import typer
from rich.console import Console
from rich.table import Table

from themesmith import __version__
from themesmith.color.scheme import orient_ramps
from themesmith.config import DEFAULT_OUTPUT_DIR, OUTPUT_DIR_ENV_VAR
from themesmith.core.types import ThemeSeed
from themesmith.errors import ThemeSmithError
from themesmith.themes import ALL_THEMES, get_theme

app = typer.Typer(
    name="themesmith",
    help="Color-ramp driven theme generator for the editor UI.",
    no_args_is_help=True,
)
console = Console()

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)


def version_callback(value: bool):
    if value:
        console.print(f"ThemeSmith v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version and exit.",
        callback=version_callback, is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    if verbose:
        logging.getLogger("themesmith").setLevel(logging.DEBUG)


def _select_themes(names: Optional[list[str]]) -> list[ThemeSeed]:
    if not names:
        return list(ALL_THEMES)
    try:
        return [get_theme(name) for name in names]
    except KeyError as e:
        raise typer.BadParameter(e.args[0], param_hint="--theme") from e


@app.command()
def build(
    output: Path = typer.Option(
        DEFAULT_OUTPUT_DIR, "-o", "--output",
        envvar=OUTPUT_DIR_ENV_VAR,
        help="Directory for the generated theme files.",
    ),
    theme: Optional[list[str]] = typer.Option(
        None, "-t", "--theme", help="Theme to build (repeatable). Defaults to all.",
    ),
):
    """Generate one JSON file per theme."""
    from themesmith.pipeline.build import build_theme, write_theme

    seeds = _select_themes(theme)

    console.print(f"\n[bold]ThemeSmith Build[/bold]")
    console.print(f"  Output: {output}")
    console.print(f"  Themes: {len(seeds)}")
    console.print()

    table = Table(title="Generated Themes", show_header=True, header_style="bold")
    table.add_column("Theme", style="cyan")
    table.add_column("Appearance")
    table.add_column("File")

    for seed in seeds:
        try:
            path = write_theme(build_theme(seed), output)
        except ThemeSmithError as e:
            console.print(f"\n[red]Error:[/red] {seed.name}: {e}")
            raise typer.Exit(code=1)
        table.add_row(seed.name, seed.appearance.value, str(path))

    console.print(table)


@app.command("list")
def list_themes():
    """Show the built-in themes."""
    table = Table(title="Themes", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Appearance")
    table.add_column("Ramps", justify="right")
    for seed in ALL_THEMES:
        table.add_row(seed.name, seed.appearance.value, str(len(seed.ramps)))
    console.print(table)


@app.command()
def ramp(
    theme: str = typer.Argument(..., help="Theme name."),
    role: str = typer.Argument(..., help="Ramp role, e.g. neutral or blue."),
    steps: int = typer.Option(9, "-n", "--steps", min=2, help="Number of evenly spaced samples."),
):
    """Sample a theme ramp as the scheme sees it (0 = background end)."""
    try:
        seed = get_theme(theme)
    except KeyError as e:
        raise typer.BadParameter(e.args[0], param_hint="THEME") from e

    try:
        oriented = orient_ramps(seed.ramps, seed.is_light)
        colors = oriented[role].colors(steps)
    except ThemeSmithError as e:
        console.print(f"\n[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title=f"{seed.name} / {role}", show_header=True, header_style="bold")
    table.add_column("Position", justify="right")
    table.add_column("Color")
    table.add_column("Swatch")
    for position, color in zip(np.linspace(0.0, 1.0, steps), colors):
        table.add_row(f"{position:.3f}", color.hex, f"[on {color.hex[:7]}]      [/]")
    console.print(table)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
