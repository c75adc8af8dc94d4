"""CLI entry point for zkday.

    zkday        — create (if missing) and open today's daily note

Installed as both ``zkday`` and ``day``. Takes no arguments; configuration
comes from ZETTELKASTEN and EDITOR.
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from zkday import __version__

console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@click.command()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Open today's daily note, creating it from the template if needed."""
    from zkday.config import MissingSettingError, load_settings
    from zkday.day import run_day_command

    _setup_logging(verbose)

    try:
        settings = load_settings()
    except MissingSettingError as exc:
        console.print(f"[red]✗[/red] {exc}")
        sys.exit(1)

    try:
        result = run_day_command(settings)
    except OSError as exc:
        console.print(f"[red]✗[/red] {exc}")
        sys.exit(1)

    verb = "Created" if result.created else "Opened"
    console.print(f"[green]✓[/green] {verb} daily note {result.path}")
