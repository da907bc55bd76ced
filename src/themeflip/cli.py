"""
themeflip CLI.

Commands:
- build: derive light tokens and render every configured format
- invert: write the light token document only
- formats: list registered formatters
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from themeflip._version import get_version
from themeflip.core.build import derive_light_document, run_build
from themeflip.core.config import load_build_config
from themeflip.core.errors import ThemeflipError
from themeflip.formatters import get_registry

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    help="themeflip – derive light design tokens from dark ones and render them",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    default = "INFO" if verbose else "WARNING"
    level = os.getenv("LOG_LEVEL", default).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"themeflip {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """themeflip CLI main callback for global options."""
    pass


@app.command(name="build")
def build_command(
    root: Path = typer.Option(Path("."), "--root", "-r", help="Project root directory"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: <root>/themeflip.toml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each build step"),
) -> None:
    """Derive the light token document and build all themes."""
    _configure_logging(verbose)

    try:
        build_config = load_build_config(root, config)
        report = run_build(build_config)
    except (ThemeflipError, OSError) as e:
        console.print(f"[red]Build failed: {e}[/red]")
        logger.exception(f"Build failed: {e}")
        raise typer.Exit(code=1)

    table = Table(title="Generated files")
    table.add_column("Theme")
    table.add_column("File")
    table.add_column("Tokens", justify="right")
    for result in report.themes:
        for path in result.files:
            table.add_row(result.theme.value, str(path), str(result.token_count))
    table.add_row("", str(report.light_document), "")
    console.print(table)
    console.print("[green]All tokens successfully generated[/green]")


@app.command(name="invert")
def invert_command(
    source: Path = typer.Argument(..., help="Dark token document"),
    destination: Path = typer.Argument(..., help="Where to write the light token document"),
    root: Path = typer.Option(Path("."), "--root", "-r", help="Project root directory"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Config file with [inversion] overrides"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each inverted reference"),
) -> None:
    """Write the light token document derived from SOURCE."""
    _configure_logging(verbose)

    try:
        table = load_build_config(root, config).inversion_table
        derive_light_document(source, destination, table)
    except (ThemeflipError, OSError) as e:
        console.print(f"[red]Inversion failed: {e}[/red]")
        logger.exception(f"Inversion failed: {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]Light tokens written to {destination}[/green]")


@app.command(name="formats")
def formats_command() -> None:
    """List registered output formats."""
    registry = get_registry()

    table = Table(title="Formatters")
    table.add_column("Name")
    table.add_column("Extension")
    table.add_column("Description")
    for name in registry.list_formatters():
        info = registry.get(name).get_info()
        table.add_row(name, info.extension, info.description)
    console.print(table)


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
