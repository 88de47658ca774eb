"""
Command Line Interface for the date/time range helpers.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .config import config
from .formatting import format_date_time_range
from .models import DateTimeRangeInput
from .utils.dates import DEFAULT_DATE_FORMAT, TimeFormatError, convert_to_24_hour
from .validation import check_date_time_range


# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

console = Console()


def _range_options(fn):
    """Attach the four form field options to a command."""
    options = [
        click.option(
            "--start-date", default="", help=f"Start date ({DEFAULT_DATE_FORMAT})"
        ),
        click.option("--start-time", default="", help="Start time (e.g. '9:00 AM')"),
        click.option("--end-date", default="", help=f"End date ({DEFAULT_DATE_FORMAT})"),
        click.option("--end-time", default="", help="End time (e.g. '5:00 PM')"),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


def _display_instant(value: Optional[datetime]) -> str:
    if value is None:
        return "invalid"
    return value.strftime(config.display.datetime_format)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool):
    """Form date/time range helpers - validate and parse start/end fields."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(config.app.log_level)


@cli.command()
@_range_options
def validate(start_date: str, start_time: str, end_date: str, end_time: str):
    """Check that the end date/time is after the start date/time."""

    try:
        check = check_date_time_range(start_date, start_time, end_date, end_time)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        logger.exception("Error in validate command")
        sys.exit(1)

    table = Table(title="Range Validation")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Start", f"{start_date} {start_time}".strip() or "-")
    table.add_row("End", f"{end_date} {end_time}".strip() or "-")
    table.add_row("Valid", "✓ Yes" if check.valid else "✗ No")
    if check.reason:
        table.add_row("Reason", check.reason)

    console.print(table)
    if not check.valid:
        sys.exit(1)


@cli.command(name="format")
@_range_options
def format_range(start_date: str, start_time: str, end_date: str, end_time: str):
    """Parse 24-hour form fields into start and end instants."""

    try:
        result = format_date_time_range(
            DateTimeRangeInput(
                start_date=start_date,
                start_time=start_time,
                end_date=end_date,
                end_time=end_time,
            )
        )
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        logger.exception("Error in format command")
        sys.exit(1)

    table = Table(title="Formatted Range")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Start Instant", _display_instant(result.start_date_time))
    table.add_row("End Instant", _display_instant(result.end_date_time))
    for name, value in result.raw.items():
        table.add_row(f"raw.{name}", value)

    console.print(table)


@cli.command(name="to-24h")
@click.argument("time_str", metavar="TIME")
def to_24h(time_str: str):
    """Convert a 12-hour time such as '1:30 PM' to 24-hour HH:mm."""

    try:
        console.print(convert_to_24_hour(time_str))
    except TimeFormatError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@cli.command()
def status():
    """Show the effective configuration."""

    table = Table(title="Form Date/Time Range Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Date Format", config.display.date_format)
    table.add_row("Display Date/Time Format", config.display.datetime_format)
    table.add_row("Log Level", config.app.log_level)

    console.print(table)


def main():
    """Main entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user.[/yellow]")
        sys.exit(0)
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        logger.exception("Unexpected error in main")
        sys.exit(1)


if __name__ == "__main__":
    main()
