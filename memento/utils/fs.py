#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for entry files.

Functions:
    find_entry_files: Discover entry files by glob pattern, sorted
    parse_date_from_filename: Extract date from YYYY, YYYY-MM, or YYYY-MM-DD names
    write_if_changed: Write text only when content differs

Usage:
    from memento.utils.fs import find_entry_files, parse_date_from_filename

    files = find_entry_files(Path("~/.memento/entries").expanduser())
    entry_date = parse_date_from_filename(Path("2024-01-15.md"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from pathlib import Path
from typing import List


def find_entry_files(directory: Path, pattern: str = "**/*.md") -> List[Path]:
    """Find entry files matching pattern, in path order."""
    directory = Path(directory)
    if not directory.exists():
        return []
    return sorted(path for path in directory.glob(pattern) if path.is_file())


def parse_date_from_filename(path: Path) -> date:
    """
    Parse a date from a filename formatted as:
        - YYYY
        - YYYY-MM
        - YYYY-MM-DD

    Falls back to the first day of the year/month if incomplete.

    Args:
        path: Path object or filename containing the date.

    Returns:
        datetime.date object corresponding to the parsed date.

    Raises:
        ValueError: If the filename does not match a supported format.
    """
    stem = Path(path).stem
    try:
        if len(stem) == 4:
            return date(int(stem), 1, 1)
        if len(stem) == 7 and stem[4] == "-":
            year, month = map(int, stem.split("-"))
            return date(year, month, 1)
        if len(stem) == 10 and stem[4] == "-" and stem[7] == "-":
            year, month, day = map(int, stem.split("-"))
            return date(year, month, day)
    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid date format in filename: {stem}") from e

    raise ValueError(f"Unsupported date format in filename: {stem}")


def write_if_changed(path: Path, content: str) -> bool:
    """
    Write content to path unless the file already holds it.

    Returns:
        True if the file was written, False if it was left untouched
    """
    path = Path(path)
    if path.exists() and path.read_text(encoding="utf-8") == content:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return True
