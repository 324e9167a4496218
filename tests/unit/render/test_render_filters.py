"""
test_render_filters.py
----------------------
Unit tests for memento.render.filters.
"""
from datetime import date, datetime

from markupsafe import Markup

from memento.render.filters import (
    date_long,
    date_short,
    level_char,
    markdown,
    tag_class,
    time_short,
    url_host,
)
from memento.utils.tag_colors import color_class


class TestFilters:
    """Jinja2 filter functions."""

    def test_markdown_is_safe_markup(self):
        html = markdown("*hi*")
        assert isinstance(html, Markup)
        assert "<em>hi</em>" in html

    def test_tag_class(self):
        assert tag_class("Work") == f"tag-{color_class('work')}"

    def test_dates(self):
        assert date_long(date(2024, 1, 5)) == "Friday, January 5"
        assert date_short(date(2024, 1, 5)) == "Jan 5, 2024"
        assert date_long(None) == ""

    def test_time_short(self):
        assert time_short(datetime(2024, 1, 5, 0, 7)) == "12:07 AM"
        assert time_short(datetime(2024, 1, 5, 12, 30)) == "12:30 PM"
        assert time_short(datetime(2024, 1, 5, 21, 5)) == "9:05 PM"
        assert time_short(None) == ""

    def test_url_host(self):
        assert url_host("https://blog.example/post?id=1") == "blog.example"
        assert url_host("not a url") == "not a url"

    def test_level_char(self):
        assert level_char(4) == "█"
        assert level_char(-1) == " "
