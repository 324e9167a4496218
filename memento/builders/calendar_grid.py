#!/usr/bin/env python3
"""
calendar_grid.py
-------------------
Calendar geometry for the year view and the compact activity strip.

Year view:
    Twelve months, each a list of Monday-first weeks. A month's weeks run
    from the Monday on or before the 1st to the Sunday on or after its
    last day. Days of neighbouring months pad the first and last week;
    they are flagged ``is_in_displayed_month=False``, get level -1 and
    are not interactive. Every week carries its ISO-8601 week number.

Activity strip:
    ``week_count`` Monday-aligned columns ending with the week that holds
    "today". Days after today are empty cells (level -1) and are never
    looked up in the counts.

Both builders are pure: they take "today", the selection and the counts
as arguments and never read the clock themselves.

Usage:
    from memento.builders.calendar_grid import build_year, build_recent_window

    months = build_year(2024, today=date(2024, 3, 5), counts=counts)
    strip = build_recent_window(date(2024, 3, 5), counts=counts)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date, timedelta
from typing import List, Mapping, Optional, Tuple

# --- Local imports ---
from memento.builders.activity import classify, level_for
from memento.dataclasses.calendar import (
    LEVEL_EMPTY,
    ActivityCell,
    CalendarDay,
    CalendarMonth,
    CalendarWeek,
)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DEFAULT_WINDOW_WEEKS = 17

_EMPTY_COUNTS: Mapping[date, int] = {}


# ----- Date arithmetic -----
def week_start(day: date) -> date:
    """Monday on or before ``day``."""
    return day - timedelta(days=day.weekday())


def week_end(day: date) -> date:
    """Sunday on or after ``day``."""
    return day + timedelta(days=6 - day.weekday())


def iso_week_number(day: date) -> int:
    """
    ISO-8601 week number (week 1 holds the year's first Thursday).

    Examples:
        >>> iso_week_number(date(2024, 1, 1))
        1
        >>> iso_week_number(date(2021, 1, 3))
        53
    """
    return day.isocalendar()[1]


def month_range(year: int, month: int) -> Tuple[date, date]:
    """First and last day of a month."""
    first = date(year, month, 1)
    following = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return first, following - timedelta(days=1)


def year_range(year: int) -> Tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


# ----- Year view -----
def build_month(
    year: int,
    month: int,
    today: Optional[date] = None,
    selected: Optional[date] = None,
    counts: Optional[Mapping[date, int]] = None,
) -> CalendarMonth:
    """
    Build the week grid of one month.

    Args:
        year: Calendar year
        month: Month number 1-12
        today: Day flagged ``is_today``
        selected: Day flagged ``is_selected``
        counts: Entry count per day for the activity levels

    Returns:
        CalendarMonth whose weeks each hold 7 days and at least one day
        of the month
    """
    counts = counts if counts is not None else _EMPTY_COUNTS
    first, last = month_range(year, month)

    weeks: List[CalendarWeek] = []
    monday = week_start(first)
    while monday <= last:
        days = []
        for offset in range(7):
            day = monday + timedelta(days=offset)
            in_month = day.month == month and day.year == year
            days.append(
                CalendarDay(
                    date=day,
                    is_in_displayed_month=in_month,
                    is_today=day == today,
                    is_selected=day == selected,
                    activity_level=classify(counts.get(day, 0)) if in_month else LEVEL_EMPTY,
                )
            )
        if any(day.is_in_displayed_month for day in days):
            weeks.append(CalendarWeek(iso_week_number(monday), tuple(days)))
        monday += timedelta(days=7)

    return CalendarMonth(year, month, MONTH_NAMES[month - 1], tuple(weeks))


def build_year(
    year: int,
    today: Optional[date] = None,
    selected: Optional[date] = None,
    counts: Optional[Mapping[date, int]] = None,
) -> List[CalendarMonth]:
    """
    Build all twelve month grids of a year.

    Examples:
        >>> months = build_year(2024)
        >>> months[0].label, months[0].weeks[0].iso_week_number
        ('January', 1)
    """
    return [build_month(year, month, today, selected, counts) for month in range(1, 13)]


# ----- Activity strip -----
def recent_window_range(
    today: date, week_count: int = DEFAULT_WINDOW_WEEKS
) -> Tuple[date, date]:
    """
    Days the activity strip can show, for the count query.

    Returns:
        (Monday of the first column, today)
    """
    if week_count < 1:
        raise ValueError(f"week_count must be positive, got {week_count}")
    return week_start(today - timedelta(days=7 * (week_count - 1))), today


def build_recent_window(
    today: date,
    week_count: int = DEFAULT_WINDOW_WEEKS,
    counts: Optional[Mapping[date, int]] = None,
) -> List[List[ActivityCell]]:
    """
    Build the compact activity strip.

    Args:
        today: Last day with data; later days are empty cells
        week_count: Number of week columns (default 17)
        counts: Entry count per day

    Returns:
        ``week_count`` columns of 7 cells, Monday first, oldest column
        first. The last column holds ``today``.
    """
    counts = counts if counts is not None else _EMPTY_COUNTS
    start, _ = recent_window_range(today, week_count)

    columns: List[List[ActivityCell]] = []
    for week in range(week_count):
        column = []
        for offset in range(7):
            day = start + timedelta(days=7 * week + offset)
            if day > today:
                column.append(ActivityCell(None, LEVEL_EMPTY))
            else:
                column.append(ActivityCell(day, level_for(day, counts)))
        columns.append(column)
    return columns
