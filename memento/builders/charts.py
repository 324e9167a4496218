"""
ASCII Chart Utilities
----------------------

Terminal renderings of the calendar and the activity strip.

Functions:
    - intensity_char: Shade character for an activity level
    - activity_strip: Seven-row heatmap of the recent window
    - month_grid: One month as a text calendar with week numbers
    - year_grid: Twelve month grids
"""

from typing import Dict, List, Sequence

from memento.builders.calendar_grid import WEEKDAY_LABELS
from memento.dataclasses.calendar import ActivityCell, CalendarMonth

LEVEL_CHARS: Dict[int, str] = {
    -1: " ",
    0: "·",
    1: "░",
    2: "▒",
    3: "▓",
    4: "█",
}


def intensity_char(level: int) -> str:
    """
    Get the shade character for an activity level.

    Example:
        >>> intensity_char(0)
        '·'
        >>> intensity_char(4)
        '█'
    """
    return LEVEL_CHARS.get(level, LEVEL_CHARS[-1])


def activity_strip(columns: Sequence[Sequence[ActivityCell]]) -> List[str]:
    """
    Render the activity window as seven rows, one per weekday.

    Args:
        columns: Output of build_recent_window

    Returns:
        Lines like ``Mon ░·▒█ ...``; future cells are blank

    Example:
        >>> lines = activity_strip(build_recent_window(date(2024, 3, 5)))
        >>> len(lines)
        7
    """
    lines = []
    for weekday, label in enumerate(WEEKDAY_LABELS):
        cells = "".join(intensity_char(column[weekday].level) for column in columns)
        lines.append(f"{label} {cells}".rstrip())
    return lines


def month_grid(month: CalendarMonth, show_activity: bool = True) -> List[str]:
    """
    Render one month with ISO week numbers.

    Each day cell is the day number followed by its shade character;
    today is marked with ``*`` and the selected day with ``>``. Days of
    neighbouring months are blank.

    Example:
        January 2024
        Wk  Mon  Tue  Wed  Thu  Fri  Sat  Sun
         1   1·   2░   3·   4·   5·   6·   7·
    """
    lines = [f"{month.label} {month.year}", "Wk  " + " ".join(f"{d:>4s}" for d in WEEKDAY_LABELS)]

    for week in month.weeks:
        cells = []
        for day in week.days:
            if not day.is_in_displayed_month:
                cells.append("    ")
                continue
            mark = ">" if day.is_selected else ("*" if day.is_today else " ")
            shade = intensity_char(day.activity_level) if show_activity else " "
            cells.append(f"{mark}{day.date.day:>2d}{shade}")
        lines.append(f"{week.iso_week_number:>2d}  " + " ".join(cells).rstrip())

    return lines


def year_grid(months: Sequence[CalendarMonth], show_activity: bool = True) -> List[str]:
    """Render all months, separated by blank lines."""
    lines: List[str] = []
    for month in months:
        lines.extend(month_grid(month, show_activity=show_activity))
        lines.append("")
    return lines
