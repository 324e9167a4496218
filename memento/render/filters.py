#!/usr/bin/env python3
"""
filters.py
----------
Custom Jinja2 filters for the HTML journal.

Filters:
    - markdown: Render a text segment to HTML (markdown-it-py)
    - tag_class: Palette class of a tag chip
    - date_long / date_short: Date display formats
    - time_short: 12-hour clock time of an instant
    - url_host: Host part of a URL for link cards
    - level_char: Terminal shade of an activity level
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date, datetime
from typing import Optional
from urllib.parse import urlparse

# --- Third-party imports ---
from markupsafe import Markup

# --- Local imports ---
from memento.builders.charts import intensity_char
from memento.utils.md import render_markdown
from memento.utils.tag_colors import color_class


def markdown(text: str) -> Markup:
    """Markdown text segment to safe HTML."""
    return Markup(render_markdown(text))


def tag_class(tag: str) -> str:
    return f"tag-{color_class(tag)}"


def date_long(value: Optional[date]) -> str:
    """
    Format a day as 'Monday, January 15'.

    Examples:
        >>> date_long(date(2024, 1, 15))
        'Monday, January 15'
    """
    if value is None:
        return ""
    return f"{value.strftime('%A, %B')} {value.day}"


def date_short(value: Optional[date]) -> str:
    """
    Format a day as 'Jan 15, 2024'.

    Examples:
        >>> date_short(date(2024, 1, 15))
        'Jan 15, 2024'
    """
    if value is None:
        return ""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def time_short(value: Optional[datetime]) -> str:
    """
    Format an instant as '9:05 AM'.

    Examples:
        >>> time_short(datetime(2024, 1, 15, 21, 5))
        '9:05 PM'
    """
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d} {'AM' if value.hour < 12 else 'PM'}"


def url_host(url: str) -> str:
    """Host of a URL, or the URL itself when it has none."""
    return urlparse(url).hostname or url


def level_char(level: int) -> str:
    return intensity_char(level)
