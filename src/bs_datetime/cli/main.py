"""
bs-datetime CLI - Click-based command line interface.

Usage:
    bs-datetime today                      # Today's BS date and time
    bs-datetime to-bs 2024-04-13           # AD -> BS
    bs-datetime to-ad 2081/01/01           # BS -> AD
    bs-datetime month 2081 1               # Month summary (1-indexed month)
    bs-datetime range                      # Supported range
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import timedelta
from functools import wraps
from typing import TypeVar

import click

from bs_datetime.core.config import Config
from bs_datetime.core.exceptions import NepaliDateError
from bs_datetime.core.nepali_date import NepaliDate
from bs_datetime.core.year_table import MAX_YEAR, MIN_YEAR, lookup

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

AD_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M"]

T = TypeVar("T")


def handle_errors(f: Callable[..., T]) -> Callable[..., T]:
    """Decorator to report conversion errors as Click errors."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except NepaliDateError as e:
            logger.debug("Command %s failed: %r", f.__name__, e)
            raise click.ClickException(str(e)) from e

    return wrapper


def render(value: NepaliDate, pattern: str | None, delimiter: str) -> str:
    """Formatted date, or date and time when no pattern is given."""
    if pattern:
        return value.format(pattern)
    return f"{value.to_date_string(delimiter)} {value.to_time_string()}"


@click.group(invoke_without_command=True)
@click.option("-c", "--config", "config_path", type=click.Path(dir_okay=False), help="YAML config file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Bikram Sambat date converter

    Examples:
        bs-datetime today
        bs-datetime to-bs 2024-04-13
        bs-datetime to-ad 2081/01/01
    """
    try:
        config = Config(config_path)
    except NepaliDateError as e:
        raise click.ClickException(str(e)) from e

    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    ctx.obj = config

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.option("-f", "--format", "pattern", help="Pattern such as 'YYYY-MM-DD HH:mm'")
@click.pass_obj
@handle_errors
def today(config: Config, pattern: str | None) -> None:
    """Today's date in Bikram Sambat."""
    click.echo(render(NepaliDate.now(), pattern, config.delimiter))


@cli.command("to-bs")
@click.argument("ad_date", type=click.DateTime(formats=AD_FORMATS))
@click.option("-f", "--format", "pattern", help="Pattern such as 'YYYY-MM-DD HH:mm'")
@click.pass_obj
@handle_errors
def to_bs_command(config: Config, ad_date, pattern: str | None) -> None:
    """Convert a Gregorian date (YYYY-MM-DD[ HH:MM[:SS]]) to BS."""
    click.echo(render(NepaliDate(ad_date), pattern, config.delimiter))


@cli.command("to-ad")
@click.argument("bs_date")
@handle_errors
def to_ad_command(bs_date: str) -> None:
    """Convert a BS date (YYYY/MM/DD or YYYY-MM-DD) to Gregorian."""
    click.echo(NepaliDate(bs_date).to_datetime().date().isoformat())


@cli.command()
@click.argument("year", type=int)
@click.argument("month", type=click.IntRange(1, 12))
@click.pass_obj
@handle_errors
def month(config: Config, year: int, month: int) -> None:
    """Summary of a BS month (MONTH is 1-12)."""
    start = NepaliDate.from_bs(year, month - 1)
    # end_of_month() is the day after the last one
    last = start.end_of_month().to_datetime() - timedelta(days=1)
    first = start.to_datetime()

    click.echo(start.format(f"YYYY[{config.delimiter}]MM"))
    click.echo(f"  days:  {start.days_in_month}")
    click.echo(f"  start: {first.date().isoformat()} ({first:%a})")
    click.echo(f"  end:   {last.date().isoformat()} ({last:%a})")


@cli.command("range")
def range_command() -> None:
    """Supported BS and AD range."""
    first = lookup(MIN_YEAR)
    last = lookup(MAX_YEAR)
    end = NepaliDate.from_bs(MAX_YEAR, 11, last.months[11])

    click.echo(f"BS: {MIN_YEAR}/01/01 - {end}")
    click.echo(f"AD: {first.start_date.isoformat()} - {end.to_datetime().date().isoformat()}")


if __name__ == "__main__":
    cli()
