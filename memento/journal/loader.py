#!/usr/bin/env python3
"""
loader.py
---------
Load entry snapshots from a directory of Markdown entry files.

Invalid files are skipped and logged; one bad file never stops a load.

Usage:
    from memento.journal.loader import load_entries

    stats = LoadStats()
    entries = load_entries(ENTRIES_DIR, logger, stats)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from memento.core.cli import LoadStats
from memento.core.exceptions import EntryParseError, ValidationError
from memento.core.logging_manager import MementoLogger, safe_logger
from memento.dataclasses.entry import Entry
from memento.utils.fs import find_entry_files


def load_entries(
    entries_dir: Path,
    logger: Optional[MementoLogger] = None,
    stats: Optional[LoadStats] = None,
) -> List[Entry]:
    """
    Load every ``*.md`` entry file below ``entries_dir``.

    Args:
        entries_dir: Directory of entry files (searched recursively)
        logger: Optional logger for skipped files
        stats: Optional counters, updated in place

    Returns:
        Entries in file path order
    """
    log = safe_logger(logger)
    entries: List[Entry] = []

    for path in find_entry_files(entries_dir):
        try:
            entries.append(Entry.from_markdown(path))
        except (EntryParseError, ValidationError) as e:
            log.log_warning(f"Skipping {path.name}: {e}", {"file": str(path)})
            if stats is not None:
                stats.files_skipped += 1
            continue
        if stats is not None:
            stats.files_loaded += 1

    log.log_debug(
        f"Loaded {len(entries)} entries from {entries_dir}",
        {"entries_dir": str(entries_dir)},
    )
    return entries
