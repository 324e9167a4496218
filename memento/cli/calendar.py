#!/usr/bin/env python3
"""
calendar.py
-----------
Terminal calendar commands.

Commands:
    - calendar: Twelve month grids with ISO week numbers and activity
    - activity: Compact activity strip of the recent weeks

Usage:
    memento calendar --year 2024 --today 2024-03-05
    memento activity --weeks 12
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime
from typing import Optional

# --- Third-party imports ---
import click

# --- Local imports ---
from memento.builders.calendar_grid import (
    build_recent_window,
    build_year,
    recent_window_range,
    year_range,
)
from memento.builders.charts import LEVEL_CHARS, activity_strip, year_grid
from memento.core.cli import LoadStats, reference_day
from memento.core.cli_options import today_option, weeks_option, year_option
from memento.core.logging_manager import handle_cli_error
from memento.journal.filters import counts_by_date
from memento.journal.loader import load_entries


@click.command()
@year_option
@today_option
@click.pass_context
def calendar(ctx: click.Context, year: Optional[int], today: Optional[datetime]) -> None:
    """
    Print the year calendar with activity levels.

    Each day shows its number and a shade for the number of entries;
    ``*`` marks today.

    Examples:
        memento calendar
        memento calendar --year 2023
    """
    try:
        logger = ctx.obj["logger"]
        reference = reference_day(today)
        year = year or reference.year

        stats = LoadStats()
        entries = load_entries(ctx.obj["entries_dir"], logger, stats)
        counts = counts_by_date(entries, *year_range(year))

        for line in year_grid(build_year(year, today=reference, counts=counts)):
            click.echo(line)
        click.echo(_legend())

        logger.log_operation("calendar", {"year": year, **stats.to_dict()})

    except Exception as e:
        handle_cli_error(ctx, e, "calendar", {"year": year})


@click.command()
@today_option
@weeks_option
@click.pass_context
def activity(ctx: click.Context, today: Optional[datetime], weeks: int) -> None:
    """
    Print the activity strip ending with the current week.

    Examples:
        memento activity
        memento activity --weeks 52
    """
    try:
        logger = ctx.obj["logger"]
        reference = reference_day(today)

        stats = LoadStats()
        entries = load_entries(ctx.obj["entries_dir"], logger, stats)
        start, end = recent_window_range(reference, weeks)
        counts = counts_by_date(entries, start, end)

        click.echo(f"Activity {start.isoformat()} to {end.isoformat()}")
        for line in activity_strip(build_recent_window(reference, weeks, counts)):
            click.echo(line)
        click.echo(_legend())

        logger.log_operation("activity", {"weeks": weeks, **stats.to_dict()})

    except Exception as e:
        handle_cli_error(ctx, e, "activity", {"weeks": weeks})


def _legend() -> str:
    return "Less " + "".join(LEVEL_CHARS[level] for level in range(5)) + " More"
