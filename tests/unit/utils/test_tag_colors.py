"""
test_tag_colors.py
------------------
Unit tests for memento.utils.tag_colors.
"""
import pytest

from memento.utils.tag_colors import (
    COLOR_CLASSES,
    PALETTE_SIZE,
    color_class,
    color_index,
    color_value,
    tag_hash,
)


class TestTagColors:
    """Deterministic palette assignment."""

    def test_palette_has_twelve_colors(self):
        assert PALETTE_SIZE == 12
        assert len(set(COLOR_CLASSES)) == 12

    def test_case_insensitive(self):
        assert color_index("Work") == color_index("work") == color_index("WORK")

    def test_hash_polynomial(self):
        assert tag_hash("") == 0
        assert tag_hash("a") == 97
        assert tag_hash("ab") == 97 * 169 + 98

    def test_known_index(self):
        assert color_index("a") == 97 % 12
        assert color_class("a") == "periwinkle"
        assert color_value("a") == "var(--tag-periwinkle)"

    def test_hash_stays_32_bit(self):
        assert 0 <= tag_hash("a-rather-long-tag-name-to-overflow") < 2 ** 32

    @pytest.mark.parametrize("tag", ["work", "home", "ideas", "日記", "a b c"])
    def test_index_in_range(self, tag):
        assert 0 <= color_index(tag) < PALETTE_SIZE
        assert color_class(tag) in COLOR_CLASSES
