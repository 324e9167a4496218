#!/usr/bin/env python3
"""
entry_view.py
-------------------
Display model of a single journal entry.

Combines the parsed content segments with the entry's metadata into
everything a renderer needs: text/URL blocks in order, checklist items
with their completion state, images split from other files, and tag
chips colored from the palette.

Usage:
    from memento.builders.entry_view import build_entry_view

    view = build_entry_view(entry)
    for item in view.checklist:
        print("[x]" if item.completed else "[ ]", item.content)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from typing import List, Tuple

# --- Local imports ---
from memento.content.blocks import extract_checklist, parse_blocks
from memento.dataclasses.entry import Attachment, Entry
from memento.dataclasses.segments import ContentSegment
from memento.utils.tag_colors import color_class


@dataclass(frozen=True)
class ChecklistItemView:
    content: str
    index: int
    completed: bool


@dataclass(frozen=True)
class TagChip:
    name: str
    color_class: str


@dataclass(frozen=True)
class EntryView:
    """
    Everything needed to render one entry.

    Attributes:
        entry: Source snapshot
        blocks: Text and URL segments in source order
        checklist: Checklist items with completion state
        images: Image attachments
        files: Video and file attachments
        tags: Tag chips in alphabetical order
    """
    entry: Entry
    blocks: Tuple[ContentSegment, ...]
    checklist: Tuple[ChecklistItemView, ...]
    images: Tuple[Attachment, ...]
    files: Tuple[Attachment, ...]
    tags: Tuple[TagChip, ...]

    @property
    def has_more_content(self) -> bool:
        """Whether a collapsed preview (first block only) hides anything."""
        return (
            len(self.blocks) > 2
            or bool(self.checklist)
            or len(self.images) > 1
            or bool(self.files)
        )

    @property
    def completed_count(self) -> int:
        return sum(1 for item in self.checklist if item.completed)


def build_entry_view(entry: Entry) -> EntryView:
    """Derive the display model of an entry snapshot."""
    blocks, checklist = extract_checklist(parse_blocks(entry.raw_text))
    items: List[ChecklistItemView] = [
        ChecklistItemView(item.content, item.index, item.index in entry.completed_indices)
        for item in checklist
    ]
    return EntryView(
        entry=entry,
        blocks=tuple(blocks),
        checklist=tuple(items),
        images=tuple(entry.images),
        files=tuple(entry.files),
        tags=tuple(TagChip(tag, color_class(tag)) for tag in entry.sorted_tags),
    )
