#!/usr/bin/env python3
"""
segments.py
-------------------
Typed content segments produced by the content block parser.

An entry's raw text is rendered as an ordered list of segments:

- TextSegment: a run of Markdown prose, handed to the Markdown renderer
- UrlSegment: a bare http(s) URL shown as a link card
- ChecklistSegment: one checklist item; ``index`` is its position in the
  entry's flattened checklist and addresses its completion state

Segments are frozen so parsed output can be compared and cached safely.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class TextSegment:
    content: str
    kind: ClassVar[str] = "text"


@dataclass(frozen=True)
class UrlSegment:
    content: str
    kind: ClassVar[str] = "url"


@dataclass(frozen=True)
class ChecklistSegment:
    """
    One checklist item.

    Attributes:
        content: Item text without the marker (may be empty)
        index: 0-based position across all checklist lines of the entry
    """
    content: str
    index: int
    kind: ClassVar[str] = "checklist"


ContentSegment = Union[TextSegment, UrlSegment, ChecklistSegment]
