#!/usr/bin/env python3
"""
blocks.py
-------------------
Content block parser for journal entry text.

Splits an entry's raw text into ordered, typed segments:

    Paragraph text            -> TextSegment (rendered as Markdown)
    https://example.com       -> UrlSegment (a line holding only a URL)
    Read https://a.example    -> TextSegment("Read"), UrlSegment(...)
    ○ buy milk                -> ChecklistSegment("buy milk", index=0)

Parsing runs in two passes:

1. Line pass (``parse_blocks``): lines accumulate in a text buffer; bare
   URLs flush the buffer and become URL segments. Lines with Markdown
   link syntax are left to the Markdown renderer and never scanned.
2. Checklist pass (``extract_checklist``): checklist lines are pulled out
   of every text segment into one flat list. An item's index is its
   position in that list, which is what completion state is keyed on.

The parser is total: it never raises, and empty input parses to nothing.

Usage:
    from memento.content.blocks import parse

    segments = parse(entry.raw_text)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Any, FrozenSet, Iterable, List, Optional, Tuple

# --- Local imports ---
from memento.dataclasses.segments import (
    ChecklistSegment,
    ContentSegment,
    TextSegment,
    UrlSegment,
)

CHECKLIST_GLYPH = "○"
CHECKLIST_MARKER = f"{CHECKLIST_GLYPH} "

URL_PATTERN = re.compile(r"https?://\S+")
STANDALONE_URL_PATTERN = re.compile(r"^(https?://\S+)$")
MARKDOWN_LINK_PATTERN = re.compile(r"\]\(")

# Connectives that go with a neighbouring URL when it is removed
LEADING_CONNECTIVE = re.compile(r"^\s*(?:and|or|&)(?=\s|$)", re.IGNORECASE)
TRAILING_CONNECTIVE = re.compile(r"(?:^|(?<=\s))(?:and|or|&)\s*$", re.IGNORECASE)


# ----- Line classification -----
def is_markdown_link_line(line: str) -> bool:
    """Lines with Markdown link syntax (``](``) are left to the renderer."""
    return MARKDOWN_LINK_PATTERN.search(line) is not None


def is_checklist_line(line: str) -> bool:
    """
    Whether a line is a checklist item.

    Examples:
        >>> is_checklist_line("○ buy milk")
        True
        >>> is_checklist_line("○")
        True
        >>> is_checklist_line(" ○ indented")
        False
    """
    return line.startswith(CHECKLIST_MARKER) or line.rstrip() == CHECKLIST_GLYPH


def checklist_text(line: str) -> str:
    """Item text of a checklist line (empty for a bare marker)."""
    if line.startswith(CHECKLIST_MARKER):
        return line[len(CHECKLIST_MARKER):]
    return ""


def residual_text(line: str) -> str:
    """
    Text left on a line once its bare URLs are removed, trimmed.

    The line keeps its own characters and spacing. Only a connective
    word directly next to a removed URL is dropped with it.

    Examples:
        >>> residual_text("Check this http://a.example and http://b.example")
        'Check this'
        >>> residual_text("http://a.example is worth reading")
        'is worth reading'
        >>> residual_text("+ read https://a.example")
        '+ read'
    """
    pieces = URL_PATTERN.split(line)
    last = len(pieces) - 1
    for i, piece in enumerate(pieces):
        if i > 0:
            piece = LEADING_CONNECTIVE.sub("", piece)
        if i < last:
            piece = TRAILING_CONNECTIVE.sub("", piece)
        pieces[i] = piece
    return "".join(pieces).strip()


# ----- Pass 1: text and URL blocks -----
def parse_blocks(raw_text: Optional[str]) -> List[ContentSegment]:
    """
    Split raw text into text and URL segments, in source order.

    Args:
        raw_text: Entry text; None and "" parse to an empty list

    Returns:
        TextSegment/UrlSegment list. Checklist lines are still inside
        their text segments.
    """
    if not raw_text:
        return []
    if not isinstance(raw_text, str):
        return [TextSegment(str(raw_text))]

    segments: List[ContentSegment] = []
    buffer: List[str] = []

    def flush() -> None:
        if buffer:
            content = "\n".join(buffer).strip()
            if content:
                segments.append(TextSegment(content))
            buffer.clear()

    for line in raw_text.split("\n"):
        if is_markdown_link_line(line):
            buffer.append(line)
            continue

        standalone = STANDALONE_URL_PATTERN.match(line.strip())
        if standalone:
            flush()
            segments.append(UrlSegment(standalone.group(1)))
            continue

        urls = URL_PATTERN.findall(line)
        if urls:
            remainder = residual_text(line)
            if remainder:
                buffer.append(remainder)
            flush()
            segments.extend(UrlSegment(url) for url in urls)
        else:
            buffer.append(line)

    flush()
    return segments


# ----- Pass 2: checklist extraction -----
def extract_checklist(
    segments: Iterable[ContentSegment],
) -> Tuple[List[ContentSegment], List[ChecklistSegment]]:
    """
    Pull checklist lines out of text segments.

    Args:
        segments: Output of parse_blocks

    Returns:
        Tuple of (blocks, checklist): the text/URL segments that still
        have content, and every checklist item numbered across the whole
        entry in order of appearance.
    """
    blocks: List[ContentSegment] = []
    checklist: List[ChecklistSegment] = []

    for segment in segments:
        if not isinstance(segment, TextSegment):
            blocks.append(segment)
            continue

        kept: List[str] = []
        for line in segment.content.split("\n"):
            if is_checklist_line(line):
                checklist.append(ChecklistSegment(checklist_text(line), len(checklist)))
            else:
                kept.append(line)

        content = "\n".join(kept).strip()
        if content:
            blocks.append(TextSegment(content))

    return blocks, checklist


def parse(raw_text: Any) -> List[ContentSegment]:
    """
    Parse entry text into display segments.

    Text and URL segments come first, in source order, followed by the
    checklist items in index order.

    Examples:
        >>> parse("○ buy milk\\n○ walk dog")
        [ChecklistSegment(content='buy milk', index=0), ChecklistSegment(content='walk dog', index=1)]
    """
    blocks, checklist = extract_checklist(parse_blocks(raw_text))
    return [*blocks, *checklist]


def checklist_items(raw_text: Any) -> List[ChecklistSegment]:
    """Checklist items of an entry, in index order."""
    return extract_checklist(parse_blocks(raw_text))[1]


# ----- Completion state -----
def toggle_completed(completed: Iterable[int], index: int) -> FrozenSet[int]:
    """
    Flip the completion state of one checklist item.

    Examples:
        >>> sorted(toggle_completed({0}, 2))
        [0, 2]
        >>> sorted(toggle_completed({0, 2}, 2))
        [0]
    """
    current = frozenset(completed)
    if index in current:
        return current - {index}
    return current | {index}


def prune_completed(completed: Iterable[int], item_count: int) -> FrozenSet[int]:
    """Drop completion indices that no longer address a checklist item."""
    return frozenset(i for i in completed if 0 <= i < item_count)
