#!/usr/bin/env python3
"""
controller.py
-------------------
Formatting operations of the entry composer as pure text transforms.

Every operation takes an ``EditState`` (the text plus the current
selection) and returns an ``EditResult`` (the new text plus the caret
position to restore). Nothing here touches a widget; the caller applies
the result to whatever text buffer it owns.

Line operations address the caret's *current line*: the text between the
nearest newline before the caret (or the start) and the nearest newline
after it (or the end).

Operations:
    toggle_heading_level: none -> "# " -> "## " -> none
    toggle_wrap / toggle_bold: wrap the selection in a marker pair
    toggle_line_prefix: add or remove a prefix on the current line
    toggle_list_item / toggle_quote / toggle_checklist_item
    handle_newline_continuation: Enter on a checklist line
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from typing import Tuple

# --- Local imports ---
from memento.content.blocks import CHECKLIST_GLYPH, CHECKLIST_MARKER

HEADING_1 = "# "
HEADING_2 = "## "
BOLD_MARKER = "**"
LIST_PREFIX = "- "
QUOTE_PREFIX = "> "


@dataclass(frozen=True)
class EditState:
    """
    Text buffer snapshot with a selection.

    ``selection_start == selection_end`` is a plain caret. Positions are
    clamped into the text and ordered on construction.
    """
    text: str
    selection_start: int = 0
    selection_end: int = -1

    def __post_init__(self) -> None:
        length = len(self.text)
        end = self.selection_start if self.selection_end < 0 else self.selection_end
        start = min(max(self.selection_start, 0), length)
        end = min(max(end, 0), length)
        if end < start:
            start, end = end, start
        object.__setattr__(self, "selection_start", start)
        object.__setattr__(self, "selection_end", end)

    @classmethod
    def at(cls, text: str, caret: int) -> "EditState":
        return cls(text, caret, caret)

    @property
    def caret(self) -> int:
        return self.selection_start

    @property
    def selected_text(self) -> str:
        return self.text[self.selection_start:self.selection_end]

    @property
    def has_selection(self) -> bool:
        return self.selection_end > self.selection_start


@dataclass(frozen=True)
class EditResult:
    text: str
    caret: int

    def as_state(self) -> EditState:
        """Continue editing from this result."""
        return EditState.at(self.text, self.caret)


# ----- Line addressing -----
def line_bounds(text: str, position: int) -> Tuple[int, int]:
    """
    Start and end offsets of the line holding ``position``.

    Examples:
        >>> line_bounds("one\\ntwo\\nthree", 5)
        (4, 7)
        >>> line_bounds("one", 0)
        (0, 3)
    """
    position = min(max(position, 0), len(text))
    start = text.rfind("\n", 0, position) + 1
    end = text.find("\n", position)
    return start, len(text) if end == -1 else end


def current_line(state: EditState) -> str:
    start, end = line_bounds(state.text, state.caret)
    return state.text[start:end]


def _replace_line_head(
    state: EditState, remove: int, insert: str
) -> EditResult:
    """
    Replace the first ``remove`` characters of the current line.

    The caret keeps its place relative to the line content; a caret that
    sat inside the removed head moves to the end of the new head.
    """
    start, _ = line_bounds(state.text, state.caret)
    text = state.text[:start] + insert + state.text[start + remove:]
    offset = state.caret - start
    new_offset = len(insert) + max(offset - remove, 0)
    return EditResult(text, start + new_offset)


# ----- Operations -----
def toggle_heading_level(state: EditState) -> EditResult:
    """
    Cycle the current line: plain -> "# " -> "## " -> plain.

    Examples:
        >>> toggle_heading_level(EditState.at("Title", 0)).text
        '# Title'
        >>> toggle_heading_level(EditState.at("# Title", 0)).text
        '## Title'
        >>> toggle_heading_level(EditState.at("## Title", 0)).text
        'Title'
    """
    line = current_line(state)
    if line.startswith(HEADING_2):
        return _replace_line_head(state, len(HEADING_2), "")
    if line.startswith(HEADING_1):
        return _replace_line_head(state, len(HEADING_1), HEADING_2)
    return _replace_line_head(state, 0, HEADING_1)


def toggle_wrap(state: EditState, marker: str) -> EditResult:
    """
    Wrap the selection in ``marker``.

    With a selection the caret lands after the closing marker; with a
    bare caret an empty marker pair is inserted and the caret is placed
    between its halves.
    """
    before = state.text[:state.selection_start]
    after = state.text[state.selection_end:]
    if state.has_selection:
        wrapped = f"{marker}{state.selected_text}{marker}"
        return EditResult(before + wrapped + after, len(before) + len(wrapped))
    return EditResult(before + marker + marker + after, len(before) + len(marker))


def toggle_bold(state: EditState) -> EditResult:
    return toggle_wrap(state, BOLD_MARKER)


def toggle_line_prefix(state: EditState, prefix: str) -> EditResult:
    """
    Add ``prefix`` to the current line, or remove it if already present.

    Applying the same toggle twice restores the original text.
    """
    if current_line(state).startswith(prefix):
        return _replace_line_head(state, len(prefix), "")
    return _replace_line_head(state, 0, prefix)


def toggle_list_item(state: EditState) -> EditResult:
    return toggle_line_prefix(state, LIST_PREFIX)


def toggle_quote(state: EditState) -> EditResult:
    return toggle_line_prefix(state, QUOTE_PREFIX)


def toggle_checklist_item(state: EditState) -> EditResult:
    return toggle_line_prefix(state, CHECKLIST_MARKER)


def insert_text(state: EditState, value: str) -> EditResult:
    """Replace the selection with ``value``; caret after the insertion."""
    before = state.text[:state.selection_start]
    return EditResult(before + value + state.text[state.selection_end:], len(before) + len(value))


def handle_newline_continuation(
    state: EditState, modifier_held: bool = False
) -> EditResult:
    """
    Handle Enter, continuing checklists.

    On a checklist line (caret at or after the marker) without a
    modifier:

    - an empty item loses everything from the line start to the caret;
      whatever follows the caret stays
    - otherwise a newline and a fresh marker are inserted at the caret,
      and the caret lands right after the new marker

    Anywhere else the selection is replaced with a plain newline.

    Examples:
        >>> r = handle_newline_continuation(EditState.at("○ milk", 6))
        >>> r.text, r.caret
        ('○ milk\\n○ ', 9)
        >>> r = handle_newline_continuation(EditState.at("○ milk\\n○ ", 9))
        >>> r.text, r.caret
        ('○ milk\\n', 7)
        >>> r = handle_newline_continuation(EditState.at("○ milk\\n○   ", 9))
        >>> r.text, r.caret
        ('○ milk\\n  ', 7)
    """
    if modifier_held:
        return insert_text(state, "\n")

    start, end = line_bounds(state.text, state.caret)
    line = state.text[start:end]
    on_checklist = (
        line.startswith(CHECKLIST_MARKER)
        and state.caret - start >= len(CHECKLIST_MARKER)
    ) or (line.rstrip() == CHECKLIST_GLYPH and state.caret > start)
    if not on_checklist:
        return insert_text(state, "\n")

    if not line[len(CHECKLIST_MARKER):].strip():
        text = state.text[:start] + state.text[state.caret:]
        return EditResult(text, start)

    return insert_text(state, "\n" + CHECKLIST_MARKER)
