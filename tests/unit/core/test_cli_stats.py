"""
test_cli_stats.py
-----------------
Unit tests for memento.core.cli statistics and helpers.
"""
from datetime import date, datetime

import pytest

from memento.core.cli import ExportStats, LoadStats, reference_day, setup_logger


class TestLoadStats:
    def test_summary(self):
        stats = LoadStats(files_loaded=3, files_skipped=1)
        assert stats.summary().startswith("3 entries loaded, 1 skipped, ")

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            LoadStats(files_loaded=-1)

    def test_to_dict(self):
        data = LoadStats(files_loaded=2).to_dict()
        assert data["files_loaded"] == 2
        assert data["files_skipped"] == 0
        assert "duration" in data


class TestExportStats:
    def test_summary_includes_pages(self):
        stats = ExportStats(files_loaded=1, pages_written=4, pages_unchanged=2)
        summary = stats.summary()
        assert "4 pages written" in summary
        assert "2 unchanged" in summary
        assert stats.to_dict()["pages_written"] == 4


class TestHelpers:
    def test_reference_day_from_option(self):
        assert reference_day(datetime(2024, 3, 5, 0, 0)) == date(2024, 3, 5)

    def test_reference_day_defaults_to_today(self):
        assert reference_day(None) == date.today()

    def test_setup_logger_uses_operations_dir(self, tmp_path):
        logger = setup_logger(tmp_path, "stats_test")
        assert logger.log_dir == tmp_path / "operations"
        assert (tmp_path / "operations").is_dir()
