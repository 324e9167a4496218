#!/usr/bin/env python3
"""
calendar.py
-------------------
View models for the calendar grid and the compact activity strip.

All types are frozen and recomputed from scratch whenever the year,
selection, or per-date counts change.

Activity levels:
    -1  no date (future day in the activity strip, or a day outside the
        displayed month in the calendar)
     0  no entries
    1-4 increasing entry density
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

LEVEL_EMPTY = -1
LEVEL_NONE = 0
LEVEL_MAX = 4


@dataclass(frozen=True)
class CalendarDay:
    """
    One cell of a month grid.

    Attributes:
        date: The calendar day
        is_in_displayed_month: False for padding days of adjacent months
        is_today: Day equals the reference "today"
        is_selected: Day equals the selected day
        activity_level: Classified entry count, -1 for padding days
    """
    date: date
    is_in_displayed_month: bool
    is_today: bool = False
    is_selected: bool = False
    activity_level: int = LEVEL_NONE

    @property
    def is_interactive(self) -> bool:
        """Only days of the displayed month can be clicked or dropped on."""
        return self.is_in_displayed_month


@dataclass(frozen=True)
class CalendarWeek:
    """
    A Monday-first row of exactly seven days.

    Attributes:
        iso_week_number: ISO-8601 week number of the row's Monday
        days: Seven CalendarDay cells, Monday..Sunday
    """
    iso_week_number: int
    days: Tuple[CalendarDay, ...]

    def __post_init__(self) -> None:
        if len(self.days) != 7:
            raise ValueError(f"A calendar week needs 7 days, got {len(self.days)}")

    @property
    def monday(self) -> date:
        return self.days[0].date


@dataclass(frozen=True)
class CalendarMonth:
    year: int
    month: int
    label: str
    weeks: Tuple[CalendarWeek, ...]

    @property
    def in_month_days(self) -> Tuple[CalendarDay, ...]:
        """Days of the month itself, in order."""
        return tuple(
            day for week in self.weeks for day in week.days if day.is_in_displayed_month
        )


@dataclass(frozen=True)
class ActivityCell:
    """
    One cell of the compact activity strip.

    ``date`` is None for days after "today"; such cells always carry
    level -1 and render empty.
    """
    date: Optional[date]
    level: int

    @property
    def is_empty(self) -> bool:
        return self.date is None
