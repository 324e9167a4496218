#!/usr/bin/env python3
"""
filters.py
----------
Browsing helpers over lists of entry snapshots.

These are the selections the journal screens are built from: the
search/tag filter, the selected day and the rest of its month, entries
grouped by day, the tag catalog and the pinned reminders.

Functions:
    - filter_entries: Search text and required tags
    - toggle_tag_selection: Add or remove a tag filter
    - entries_for_day / entries_for_month: Day and month partitions
    - group_by_date: Ordered day -> entries mapping
    - collect_tags: Sorted distinct tags
    - reminders / reminders_by_date: Pinned entries by date
    - counts_by_date: Per-day entry counts in a range
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from typing import Dict, Iterable, List, Sequence, Tuple

# --- Local imports ---
from memento.builders.activity import count_by_date
from memento.builders.calendar_grid import month_range
from memento.dataclasses.entry import Entry


def _newest_first_key(entry: Entry) -> Tuple[date, bool, float]:
    created = entry.created_at
    return (entry.date, created is not None, created.timestamp() if created else 0.0)


def matches_query(entry: Entry, query: str) -> bool:
    """Case-insensitive substring match on the text and the tags."""
    needle = query.strip().lower()
    if not needle:
        return True
    if needle in entry.raw_text.lower():
        return True
    return any(needle in tag.lower() for tag in entry.tags)


def filter_entries(
    entries: Iterable[Entry],
    query: str = "",
    selected_tags: Sequence[str] = (),
) -> List[Entry]:
    """
    Keep entries matching the search query and carrying every selected tag.

    Order of the input is preserved.
    """
    required = set(selected_tags)
    return [
        entry
        for entry in entries
        if matches_query(entry, query) and required <= entry.tags
    ]


def toggle_tag_selection(selected: Sequence[str], tag: str) -> List[str]:
    """
    Add a tag to the filter, or remove it if already selected.

    Examples:
        >>> toggle_tag_selection(["work"], "home")
        ['work', 'home']
        >>> toggle_tag_selection(["work", "home"], "work")
        ['home']
    """
    if tag in selected:
        return [t for t in selected if t != tag]
    return [*selected, tag]


def entries_for_day(entries: Iterable[Entry], day: date) -> List[Entry]:
    """Entries filed under ``day``, newest first."""
    return sorted(
        (entry for entry in entries if entry.date == day),
        key=_newest_first_key,
        reverse=True,
    )


def entries_for_month(entries: Iterable[Entry], day: date) -> List[Entry]:
    """
    Other entries of ``day``'s month, excluding ``day`` itself.

    Ordered by date, then creation time, newest first.
    """
    first, last = month_range(day.year, day.month)
    return sorted(
        (
            entry
            for entry in entries
            if first <= entry.date <= last and entry.date != day
        ),
        key=_newest_first_key,
        reverse=True,
    )


def group_by_date(entries: Iterable[Entry]) -> Dict[date, List[Entry]]:
    """Group entries by day, keeping first-seen order of days and entries."""
    groups: Dict[date, List[Entry]] = {}
    for entry in entries:
        groups.setdefault(entry.date, []).append(entry)
    return groups


def collect_tags(entries: Iterable[Entry]) -> List[str]:
    """Distinct tags of all entries, sorted."""
    tags = set()
    for entry in entries:
        tags.update(entry.tags)
    return sorted(tags)


def reminders(entries: Iterable[Entry]) -> List[Entry]:
    """Pinned entries, earliest date first."""
    return sorted(
        (entry for entry in entries if entry.is_pinned),
        key=lambda entry: (entry.date, entry.reminder_time or ""),
    )


def reminders_by_date(entries: Iterable[Entry]) -> Dict[date, List[Entry]]:
    return group_by_date(reminders(entries))


def counts_by_date(entries: Iterable[Entry], start: date, end: date) -> Dict[date, int]:
    """
    Entry count per day within ``[start, end]``.

    This is the aggregation the storage collaborator normally performs;
    it is used when entries are loaded from local files.
    """
    return count_by_date(entry.date for entry in entries if start <= entry.date <= end)
