#!/usr/bin/env python3
"""
Asleep CLI Tool

Per-day sleep totals from exported sleep-state intervals.

Usage:
    asleep report sleep.json
    asleep report sleep.json --timezone Europe/Berlin --table
    asleep generate sleep.json --nights 11 --seed 42
"""

import json
import logging
import random
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from asleep_core import (
    AsleepSettings,
    ConfigError,
    DataSourceError,
    NoSleepRecordsError,
    __version__,
    build_report,
    dump_intervals,
    format_day,
    format_duration,
)
from asleep_core.alerts import show_alert
from asleep_core.sample_data import generate_sample_intervals

console = Console()

app = typer.Typer(
    name="asleep",
    help="Asleep CLI - Daily sleep totals from sleep intervals",
    no_args_is_help=True,
)


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"[bold cyan]Asleep CLI[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    )
):
    """Asleep CLI - Daily sleep totals from sleep intervals."""
    pass


# ============================================================================
# Helper Functions
# ============================================================================

def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _print_table(report, date_format: str):
    table = Table(title=f"Sleep per day ({report.record_count} records)")
    table.add_column("Date", style="cyan")
    table.add_column("Asleep", style="green", justify="right")
    table.add_column("Seconds", style="dim", justify="right")

    for day, seconds in report.totals.items():
        table.add_row(format_day(day, date_format), format_duration(seconds), str(seconds))

    console.print(table)


# ============================================================================
# REPORT Command
# ============================================================================

@app.command()
def report(
    path: Path = typer.Argument(..., help="Sleep data JSON file"),
    timezone: Optional[str] = typer.Option(None, "--timezone", "-z", help="Reference timezone (IANA name, default: system local)"),
    date_format: Optional[str] = typer.Option(None, "--date-format", "-f", help="strftime pattern for dates (default: %d %b %Y)"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Max records to read, newest first (default: 30)"),
    as_table: bool = typer.Option(False, "--table", help="Show a table instead of report lines"),
    as_json: bool = typer.Option(False, "--json", help="Print totals as JSON"),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help="Load settings from this .env file"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose logging"),
):
    """
    Print total sleep per day.

    Each interval counts toward the day it ends on.

    Example:
        asleep report sleep.json
        asleep report sleep.json --timezone Europe/Berlin --limit 60
    """
    _configure_logging(verbose)

    try:
        settings = AsleepSettings.from_env(
            env_file=env_file,
            timezone=timezone,
            date_format=date_format,
            sample_limit=limit,
        )
    except ConfigError as e:
        show_alert("Configuration Error", e.message, console=console)
        raise typer.Exit(1)

    try:
        sleep_report = build_report(path, settings)
    except NoSleepRecordsError as e:
        show_alert(None, e.message, console=console)
        raise typer.Exit(0)
    except DataSourceError as e:
        show_alert("Error Reading Sleep Data", e.message, console=console)
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(sleep_report.to_dict()))
    elif as_table:
        _print_table(sleep_report, settings.date_format)
    else:
        for line in sleep_report.lines(settings.date_format):
            console.print(line, highlight=False, markup=False)

    if sleep_report.skipped:
        console.print(f"[yellow]⚠️  Skipped {sleep_report.skipped} invalid record(s)[/yellow]")


# ============================================================================
# GENERATE Command - Sample Data
# ============================================================================

@app.command()
def generate(
    path: Path = typer.Argument(..., help="Output JSON file"),
    nights: int = typer.Option(11, "--nights", "-n", min=0, help="Number of nights to generate"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed for reproducible data"),
):
    """
    Write random sample sleep data.

    Each night gets an in-bed interval and an asleep interval inside it.
    Re-running overwrites the file.

    Example:
        asleep generate sleep.json --seed 42
    """
    intervals = generate_sample_intervals(nights=nights, rng=random.Random(seed))

    try:
        dump_intervals(intervals, path)
    except OSError as e:
        show_alert("Error Saving Data", str(e), console=console)
        raise typer.Exit(1)

    console.print(f"✅ Wrote {len(intervals)} intervals to [cyan]{path}[/cyan]")


# ============================================================================
# VERSION Command
# ============================================================================

@app.command()
def version():
    """Show version information."""
    console.print("[bold]Asleep CLI[/bold]")
    console.print(f"Version: [cyan]{__version__}[/cyan]")


# ============================================================================
# Main Entry Point
# ============================================================================

if __name__ == "__main__":
    app()
