#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Memento commands.

Functions:
    setup_logger: Initialize MementoLogger for CLI operations
    reference_day: Resolve the --today option to a date

Classes:
    LoadStats: Counters for loading entry files
    ExportStats: Counters for HTML export

Usage:
    from memento.core.cli import setup_logger, LoadStats

    logger = setup_logger(log_dir, "cli")
    stats = LoadStats()
    stats.files_loaded += 1
    click.echo(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from memento.core.logging_manager import MementoLogger


def setup_logger(log_dir: Path, component_name: str) -> MementoLogger:
    """
    Setup logging for CLI operations.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier (e.g., 'cli', 'export')

    Returns:
        Configured MementoLogger writing under ``log_dir/operations``
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return MementoLogger(operations_log_dir, component_name=component_name)


def reference_day(today: Optional[datetime]) -> date:
    """The --today option as a date, or the system date when unset."""
    return today.date() if today else date.today()


@dataclass
class LoadStats:
    """
    Statistics for loading entry files.

    Attributes:
        files_loaded: Entry files parsed successfully
        files_skipped: Entry files rejected by validation
        start_time: Operation start timestamp
    """
    files_loaded: int = 0
    files_skipped: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.files_loaded < 0:
            raise ValueError(f"files_loaded must be non-negative, got {self.files_loaded}")
        if self.files_skipped < 0:
            raise ValueError(f"files_skipped must be non-negative, got {self.files_skipped}")

    def duration(self) -> float:
        """Seconds elapsed since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Human-readable one-line summary."""
        return (
            f"{self.files_loaded} entries loaded, "
            f"{self.files_skipped} skipped, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for log details."""
        return {
            "files_loaded": self.files_loaded,
            "files_skipped": self.files_skipped,
            "duration": self.duration(),
        }


@dataclass
class ExportStats(LoadStats):
    """
    Statistics for HTML export.

    Attributes:
        pages_written: Pages written because content changed
        pages_unchanged: Pages left untouched (identical content)
    """
    pages_written: int = 0
    pages_unchanged: int = 0

    def summary(self) -> str:
        return (
            f"{super().summary()}; "
            f"{self.pages_written} pages written, "
            f"{self.pages_unchanged} unchanged"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "pages_written": self.pages_written,
                "pages_unchanged": self.pages_unchanged,
            }
        )
        return data
