"""
test_journal_filters.py
-----------------------
Unit tests for memento.journal.filters.

Tests search, tag filtering, day/month selections, grouping, the tag
catalog and reminders.
"""
from datetime import date, datetime, timezone

from memento.journal.filters import (
    collect_tags,
    counts_by_date,
    entries_for_day,
    entries_for_month,
    filter_entries,
    group_by_date,
    matches_query,
    reminders,
    reminders_by_date,
    toggle_tag_selection,
)


class TestSearch:
    """Search text and tag filters."""

    def test_query_matches_text_case_insensitive(self, sample_journal):
        result = filter_entries(sample_journal, "MORNING")
        assert [e.raw_text for e in result] == ["Morning run"]

    def test_query_matches_tags(self, sample_journal):
        result = filter_entries(sample_journal, "errand")
        assert len(result) == 1
        assert "errands" in result[0].tags

    def test_blank_query_matches_all(self, sample_journal):
        assert filter_entries(sample_journal, "   ") == sample_journal

    def test_all_selected_tags_required(self, sample_journal):
        assert len(filter_entries(sample_journal, selected_tags=["home"])) == 2
        result = filter_entries(sample_journal, selected_tags=["home", "errands"])
        assert [e.raw_text for e in result] == ["○ milk\n○ eggs"]

    def test_query_and_tags_combined(self, sample_journal):
        assert filter_entries(sample_journal, "mom", ["work"]) == []

    def test_matches_query_direct(self, make_entry):
        assert matches_query(make_entry(text="Hello"), "ell")
        assert not matches_query(make_entry(text="Hello"), "bye")

    def test_toggle_tag_selection(self):
        assert toggle_tag_selection([], "a") == ["a"]
        assert toggle_tag_selection(["a", "b"], "a") == ["b"]


class TestDaySelections:
    """Selected day and the rest of its month."""

    def test_entries_for_day_newest_first(self, sample_journal):
        result = entries_for_day(sample_journal, date(2024, 1, 15))
        assert [e.raw_text for e in result] == ["○ milk\n○ eggs", "Morning run"]

    def test_entries_for_month_excludes_day(self, sample_journal):
        result = entries_for_month(sample_journal, date(2024, 1, 15))
        assert [e.date for e in result] == [date(2024, 1, 28), date(2024, 1, 20)]

    def test_mixed_naive_and_aware_timestamps(self, make_entry):
        day = date(2024, 1, 15)
        naive = make_entry(day, "naive", created_at=datetime(2024, 1, 15, 8))
        aware = make_entry(day, "aware", created_at=datetime(2024, 1, 15, 8, tzinfo=timezone.utc))
        missing = make_entry(day, "missing", created_at=None)
        result = entries_for_day([naive, aware, missing], day)
        assert result[-1] is missing
        assert len(result) == 3

    def test_group_by_date_keeps_order(self, sample_journal):
        groups = group_by_date(sample_journal)
        assert list(groups)[:2] == [date(2024, 1, 15), date(2024, 1, 20)]
        assert len(groups[date(2024, 1, 15)]) == 2


class TestCatalogs:
    """Tag catalog, reminders and counts."""

    def test_collect_tags_sorted(self, sample_journal):
        assert collect_tags(sample_journal) == ["errands", "health", "home", "reading", "work"]

    def test_reminders_ascending(self, sample_journal):
        assert [e.date for e in reminders(sample_journal)] == [date(2024, 1, 28), date(2024, 2, 10)]

    def test_reminders_by_date(self, sample_journal):
        grouped = reminders_by_date(sample_journal)
        assert list(grouped) == [date(2024, 1, 28), date(2024, 2, 10)]

    def test_counts_by_date_in_range(self, sample_journal):
        counts = counts_by_date(sample_journal, date(2024, 1, 1), date(2024, 1, 31))
        assert counts == {date(2024, 1, 15): 2, date(2024, 1, 20): 1, date(2024, 1, 28): 1}
