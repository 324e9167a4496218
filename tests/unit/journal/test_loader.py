"""
test_loader.py
--------------
Unit tests for memento.journal.loader.
"""
from unittest.mock import MagicMock

from memento.core.cli import LoadStats
from memento.core.logging_manager import MementoLogger
from memento.journal.loader import load_entries


class TestLoadEntries:
    """Loading a directory of entry files."""

    def test_loads_valid_files(self, entries_dir):
        stats = LoadStats()
        entries = load_entries(entries_dir, stats=stats)
        assert [e.id for e in entries] == ["2024-01-15", "abc-123"]
        assert stats.files_loaded == 2
        assert stats.files_skipped == 0

    def test_skips_invalid_files(self, entries_dir):
        (entries_dir / "broken.md").write_text("---\ntags: [oops\n---\n", encoding="utf-8")
        (entries_dir / "undated.md").write_text("no date here\n", encoding="utf-8")
        logger = MagicMock(spec=MementoLogger)
        stats = LoadStats()

        entries = load_entries(entries_dir, logger, stats)

        assert len(entries) == 2
        assert stats.files_skipped == 2
        assert logger.log_warning.call_count == 2

    def test_skips_impossible_frontmatter_date(self, entries_dir):
        (entries_dir / "leap.md").write_text(
            "---\ndate: 2024-02-30\n---\nNo such day\n", encoding="utf-8"
        )
        stats = LoadStats()

        entries = load_entries(entries_dir, stats=stats)

        assert [e.id for e in entries] == ["2024-01-15", "abc-123"]
        assert stats.files_skipped == 1

    def test_skips_non_utf8_file(self, entries_dir):
        (entries_dir / "2024-03-01.md").write_bytes(b"caf\xe9\n")
        logger = MagicMock(spec=MementoLogger)
        stats = LoadStats()

        entries = load_entries(entries_dir, logger, stats)

        assert len(entries) == 2
        assert stats.files_skipped == 1
        logger.log_warning.assert_called_once()

    def test_missing_directory(self, tmp_path):
        assert load_entries(tmp_path / "nope") == []
