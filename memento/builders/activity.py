#!/usr/bin/env python3
"""
activity.py
-------------------
Activity level classification for the heatmap and the calendar.

Entry counts are aggregated per calendar day by the storage collaborator
(one integer per day). Each count maps onto a five-step intensity scale:

    count   0    1-2   3-4   5-6   7+
    level   0     1     2     3     4

Cells with no day behind them (future days in the activity strip) use
level -1 and are rendered empty.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from bisect import bisect_left
from collections import Counter
from datetime import date
from typing import Dict, Iterable, Mapping, Optional, Tuple

# --- Local imports ---
from memento.dataclasses.calendar import LEVEL_EMPTY

# Inclusive upper count bounds of levels 1, 2 and 3; above the last is 4
ACTIVITY_THRESHOLDS: Tuple[int, ...] = (2, 4, 6)


def classify(count: int) -> int:
    """
    Map an entry count to an activity level 0-4.

    Examples:
        >>> [classify(n) for n in (0, 1, 2, 3, 4, 5, 6, 7, 100)]
        [0, 1, 1, 2, 2, 3, 3, 4, 4]
        >>> classify(-3)
        0
    """
    if count <= 0:
        return 0
    return bisect_left(ACTIVITY_THRESHOLDS, count) + 1


def level_for(day: Optional[date], counts: Mapping[date, int]) -> int:
    """
    Activity level of a day, or -1 when there is no day.

    Args:
        day: Calendar day, None for an empty cell
        counts: Entry count per day; missing days count as zero
    """
    if day is None:
        return LEVEL_EMPTY
    return classify(counts.get(day, 0))


def count_by_date(dates: Iterable[date]) -> Dict[date, int]:
    """
    Aggregate raw entry dates into per-day counts.

    Examples:
        >>> count_by_date([date(2024, 1, 1), date(2024, 1, 1), date(2024, 1, 3)])
        {datetime.date(2024, 1, 1): 2, datetime.date(2024, 1, 3): 1}
    """
    return dict(Counter(dates))
