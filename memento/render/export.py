#!/usr/bin/env python3
"""
export.py
---------
Static HTML export of one journal year.

Layout of the output directory:

    OUTPUT/
    ├── memento.css
    ├── 2024.html              # Year calendar, activity strip, tags, pins
    └── 2024/
        └── 2024-01-15.html    # One page per day with entries

Pages are written only when their content changed; the counts land in
``ExportStats``.

Usage:
    from memento.render.export import JournalExporter

    exporter = JournalExporter(output_dir, logger=logger)
    stats = exporter.export_year(entries, 2024, today=date.today())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence

# --- Local imports ---
from memento.builders.calendar_grid import (
    WEEKDAY_LABELS,
    build_recent_window,
    build_year,
    recent_window_range,
    year_range,
)
from memento.builders.entry_view import build_entry_view
from memento.core.cli import ExportStats
from memento.core.logging_manager import MementoLogger, safe_logger
from memento.dataclasses.entry import Entry
from memento.journal.filters import (
    collect_tags,
    counts_by_date,
    entries_for_day,
    group_by_date,
    reminders_by_date,
)
from memento.render.renderer import JournalRenderer

STYLESHEET = "memento.css"


def day_page_name(day: date) -> str:
    """Path of a day page relative to the output directory."""
    return f"{day.year}/{day.isoformat()}.html"


class JournalExporter:
    """
    Render a year of entries to static HTML pages.

    Attributes:
        output_dir: Directory receiving the pages
        renderer: Template renderer
        logger: Logger (NullLogger when none was given)
    """

    def __init__(
        self,
        output_dir: Path,
        renderer: Optional[JournalRenderer] = None,
        logger: Optional[MementoLogger] = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.renderer = renderer or JournalRenderer()
        self.logger = safe_logger(logger)

    def _write(self, template: str, context: Dict, path: Path, stats: ExportStats) -> None:
        if self.renderer.render_to_file(template, context, path):
            stats.pages_written += 1
            self.logger.log_debug(f"Wrote {path}")
        else:
            stats.pages_unchanged += 1

    def export_year(
        self,
        entries: Sequence[Entry],
        year: int,
        today: Optional[date] = None,
        stats: Optional[ExportStats] = None,
    ) -> ExportStats:
        """
        Export the year page and one page per day with entries.

        Args:
            entries: All loaded entries; only ``year``'s are exported
            year: Calendar year
            today: Reference day for highlighting and the activity strip
            stats: Counters to update (a fresh ExportStats by default)

        Returns:
            The updated statistics

        Raises:
            RenderError: If a template fails or a page cannot be written
        """
        stats = stats or ExportStats()
        today = today or date.today()
        self.logger.log_operation("export_year_start", {"year": year, "output": str(self.output_dir)})

        first, last = year_range(year)
        year_entries: List[Entry] = [e for e in entries if first <= e.date <= last]
        counts = counts_by_date(year_entries, first, last)

        window_start, window_end = recent_window_range(today)
        window_counts = counts_by_date(entries, window_start, window_end)

        days = sorted(group_by_date(year_entries))
        day_hrefs = {day: day_page_name(day) for day in days}
        css_href = STYLESHEET

        for day in days:
            views = [build_entry_view(entry) for entry in entries_for_day(year_entries, day)]
            self._write(
                "day.jinja2",
                {
                    "day": day,
                    "views": views,
                    "css_href": f"../{css_href}",
                    "back_href": f"../{year}.html",
                },
                self.output_dir / day_page_name(day),
                stats,
            )

        self._write(
            "journal.jinja2",
            {
                "year": year,
                "months": build_year(year, today=today, counts=counts),
                "weekday_labels": WEEKDAY_LABELS,
                "activity": build_recent_window(today, counts=window_counts),
                "tags": collect_tags(year_entries),
                "reminders": reminders_by_date(year_entries),
                "day_hrefs": day_hrefs,
                "css_href": css_href,
            },
            self.output_dir / f"{year}.html",
            stats,
        )
        self._write(STYLESHEET, {}, self.output_dir / STYLESHEET, stats)

        self.logger.log_operation("export_year_complete", {"year": year, **stats.to_dict()})
        return stats
