#!/usr/bin/env python3
"""
export.py
---------
HTML export command.

Commands:
    - export: Render one year of entries to static HTML

Usage:
    memento export --year 2024 -o ./site
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime
from pathlib import Path
from typing import Optional

# --- Third-party imports ---
import click

# --- Local imports ---
from memento.core.cli import ExportStats, reference_day
from memento.core.cli_options import output_option, today_option, year_option
from memento.core.logging_manager import handle_cli_error
from memento.journal.loader import load_entries
from memento.render.export import JournalExporter


@click.command()
@year_option
@today_option
@output_option(help_text="Directory for the HTML pages")
@click.pass_context
def export(
    ctx: click.Context,
    year: Optional[int],
    today: Optional[datetime],
    output: str,
) -> None:
    """
    Export one year of entries as a static HTML journal.

    Writes a year page, one page per day with entries and the
    stylesheet. Unchanged pages are left untouched.

    Examples:
        memento export
        memento export --year 2023 -o ./site
    """
    try:
        logger = ctx.obj["logger"]
        reference = reference_day(today)
        year = year or reference.year

        stats = ExportStats()
        entries = load_entries(ctx.obj["entries_dir"], logger, stats)

        click.echo(f"Exporting {year} to {output}...")
        JournalExporter(Path(output), logger=logger).export_year(
            entries, year, today=reference, stats=stats
        )
        click.echo(f"✅ {stats.summary()}")

    except Exception as e:
        handle_cli_error(ctx, e, "export", {"year": year, "output": output})
