"""
conftest.py
-----------
Shared pytest fixtures for Memento tests.

Provides fixtures for:
- Entry snapshots (factory and a small sample journal)
- Entry files on disk
- Preview handle bookkeeping for editing sessions
"""
import pytest
from datetime import date, datetime

from memento.dataclasses.entry import Attachment, AttachmentKind, Entry, LocationRef


# ----- Entry Fixtures -----

@pytest.fixture
def make_entry():
    """Factory for Entry snapshots with sensible defaults."""
    counter = {"n": 0}

    def _make(day=date(2024, 1, 15), text="Some text", **kwargs):
        counter["n"] += 1
        kwargs.setdefault("id", f"entry-{counter['n']}")
        kwargs.setdefault("created_at", datetime(day.year, day.month, day.day, 9, counter["n"]))
        if "tags" in kwargs:
            kwargs["tags"] = frozenset(kwargs["tags"])
        return Entry(date=day, raw_text=text, **kwargs)

    return _make


@pytest.fixture
def sample_attachments():
    """One image and one PDF, both uploaded."""
    return (
        Attachment(AttachmentKind.IMAGE, "beach.jpg", LocationRef.remote("https://cdn.example/beach.jpg")),
        Attachment(AttachmentKind.FILE, "notes.pdf", LocationRef.remote("https://cdn.example/notes.pdf")),
    )


@pytest.fixture
def sample_journal(make_entry):
    """A handful of entries spread over two months."""
    return [
        make_entry(date(2024, 1, 15), "Morning run", tags={"health"}),
        make_entry(date(2024, 1, 15), "○ milk\n○ eggs", tags={"home", "errands"}),
        make_entry(date(2024, 1, 20), "Read https://blog.example/post", tags={"reading"}),
        make_entry(date(2024, 1, 28), "Dentist", is_pinned=True, reminder_time="09:30"),
        make_entry(date(2024, 2, 3), "Work planning", tags={"work"}),
        make_entry(date(2024, 2, 10), "Call mom", is_pinned=True, tags={"home"}),
    ]


# ----- Entry File Fixtures -----

@pytest.fixture
def minimal_entry_content():
    """Entry file with only a date."""
    return """---
date: 2024-01-15
---

Just a line of text.
"""


@pytest.fixture
def complex_entry_content():
    """Entry file using every frontmatter key."""
    return """---
id: abc-123
date: 2024-03-05
created_at: 2024-03-05T08:15:00
tags: [work, Ideas]
pinned: true
reminder_time: "09:30"
attachments:
  - type: image
    name: sketch.png
    url: https://cdn.example/sketch.png
  - type: file
    name: plan.pdf
    url: https://cdn.example/plan.pdf
completed: [1]
---

Planning notes
https://docs.example/plan
○ draft outline
○ send invites
"""


@pytest.fixture
def entries_dir(tmp_path, minimal_entry_content, complex_entry_content):
    """Directory with two valid entry files."""
    directory = tmp_path / "entries"
    (directory / "2024").mkdir(parents=True)
    (directory / "2024" / "2024-01-15.md").write_text(minimal_entry_content, encoding="utf-8")
    (directory / "2024" / "2024-03-05.md").write_text(complex_entry_content, encoding="utf-8")
    return directory


# ----- Editing Fixtures -----

class PreviewHost:
    """Records preview handles created and released by a draft."""

    def __init__(self):
        self.created = []
        self.released = []

    def create(self, source):
        handle = f"blob:preview-{len(self.created)}"
        self.created.append(handle)
        return handle

    def release(self, handle):
        self.released.append(handle)


@pytest.fixture
def preview_host():
    return PreviewHost()
