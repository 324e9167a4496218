"""
test_session.py
---------------
Unit tests for memento.editing.session.

Tests the entry draft: tag editing, attachments, payload building, and
the ownership of local previews across remove/submit/discard.
"""
import json
from datetime import date
from unittest.mock import MagicMock

import pytest

from memento.core.exceptions import DraftClosedError
from memento.dataclasses.entry import AttachmentKind, Entry
from memento.editing.session import EntryDraft


DAY = date(2024, 1, 15)


@pytest.fixture
def draft(preview_host):
    return EntryDraft.for_new_entry(DAY, preview_host.create, preview_host.release)


@pytest.fixture
def saved_entry(sample_attachments):
    return Entry(
        id="e-1",
        date=DAY,
        raw_text="Beach day",
        tags=frozenset({"travel", "family"}),
        is_pinned=True,
        attachments=sample_attachments,
    )


class TestTags:
    """Tag list editing."""

    def test_add_strips_and_dedupes(self, draft):
        assert draft.add_tag("  work ") is True
        assert draft.add_tag("work") is False
        assert draft.add_tag("   ") is False
        assert draft.tags == ["work"]

    def test_remove_last_tag(self, draft):
        draft.add_tag("a")
        draft.add_tag("b")
        assert draft.remove_last_tag() == "b"
        assert draft.tags == ["a"]

    def test_remove_last_tag_when_empty(self, draft):
        assert draft.remove_last_tag() is None

    def test_remove_tag_by_position(self, draft):
        for tag in ("a", "b", "c"):
            draft.add_tag(tag)
        assert draft.remove_tag(1) == "b"
        assert draft.tags == ["a", "c"]


class TestAttachments:
    """Picked files and previews."""

    def test_image_gets_preview(self, draft, preview_host):
        attachment = draft.add_file(object(), "photo.jpg", "image/jpeg")
        assert attachment.kind is AttachmentKind.IMAGE
        assert attachment.owns_preview
        assert preview_host.created == ["blob:preview-0"]

    def test_file_has_no_preview(self, draft, preview_host):
        attachment = draft.add_file(object(), "doc.pdf", "application/pdf")
        assert attachment.kind is AttachmentKind.FILE
        assert attachment.location is None
        assert preview_host.created == []

    def test_video_kind(self, draft):
        assert draft.add_file(object(), "clip.mp4", "video/mp4").kind is AttachmentKind.VIDEO

    def test_remove_releases_preview(self, draft, preview_host):
        draft.add_file(object(), "photo.jpg", "image/jpeg")
        draft.remove_attachment(0)
        assert preview_host.released == ["blob:preview-0"]
        assert draft.attachments == []

    def test_existing_attachments_not_released(self, saved_entry, preview_host):
        draft = EntryDraft.for_entry(saved_entry, preview_host.create, preview_host.release)
        draft.remove_attachment(0)
        draft.discard()
        assert preview_host.released == []


class TestPayload:
    """Row fields handed to persist."""

    def test_empty_text_new_entry_gets_space_title(self, draft):
        draft.add_file(object(), "doc.pdf", "application/pdf")
        payload = draft.build_payload([])
        assert payload["title"] == " "
        assert payload["date"] == "2024-01-15"
        assert payload["tags"] is None
        assert payload["description"] is None

    def test_edit_payload_carries_id(self, saved_entry, preview_host):
        draft = EntryDraft.for_entry(saved_entry, preview_host.create, preview_host.release)
        payload = draft.build_payload(list(saved_entry.attachments))
        assert payload["id"] == "e-1"
        assert "date" not in payload
        assert payload["tags"] == ["family", "travel"]
        assert payload["is_reminder"] is True
        assert len(json.loads(payload["description"])) == 2


class TestSubmit:
    """Submitting a draft."""

    def test_submit_uploads_new_files(self, draft, preview_host):
        draft.text = "○ milk"
        draft.add_file("photo-bytes", "photo.jpg", "image/jpeg")
        upload = MagicMock(return_value="https://cdn.example/photo.jpg")
        persist = MagicMock()

        payload = draft.submit(upload, persist)

        upload.assert_called_once_with("photo-bytes")
        persist.assert_called_once_with(payload)
        stored = json.loads(payload["description"])
        assert stored == [
            {"type": "image", "name": "photo.jpg", "url": "https://cdn.example/photo.jpg"}
        ]
        assert payload["title"] == "○ milk"
        assert preview_host.released == ["blob:preview-0"]
        assert draft.is_closed

    def test_submit_keeps_existing_locations(self, saved_entry, preview_host):
        draft = EntryDraft.for_entry(saved_entry, preview_host.create, preview_host.release)
        upload = MagicMock()
        payload = draft.submit(upload, MagicMock())
        upload.assert_not_called()
        urls = [item["url"] for item in json.loads(payload["description"])]
        assert urls == ["https://cdn.example/beach.jpg", "https://cdn.example/notes.pdf"]

    def test_empty_draft_rejected(self, draft):
        with pytest.raises(ValueError):
            draft.submit(MagicMock(), MagicMock())
        assert not draft.is_closed

    def test_persist_failure_keeps_draft_open(self, draft, preview_host):
        draft.add_file(object(), "photo.jpg", "image/jpeg")
        persist = MagicMock(side_effect=RuntimeError("offline"))

        with pytest.raises(RuntimeError, match="offline"):
            draft.submit(MagicMock(return_value="https://cdn.example/p.jpg"), persist)

        assert not draft.is_closed
        assert preview_host.released == []

    def test_closed_draft_rejects_changes(self, draft):
        draft.text = "hello"
        draft.submit(MagicMock(), MagicMock())
        with pytest.raises(DraftClosedError):
            draft.add_tag("late")
        with pytest.raises(DraftClosedError):
            draft.submit(MagicMock(), MagicMock())


class TestPreviewRelease:
    """Each owned preview is released exactly once."""

    def test_remove_then_discard(self, draft, preview_host):
        draft.add_file(object(), "a.jpg", "image/jpeg")
        draft.add_file(object(), "b.jpg", "image/jpeg")
        draft.remove_attachment(0)
        draft.discard()
        draft.discard()
        assert sorted(preview_host.released) == ["blob:preview-0", "blob:preview-1"]

    def test_failed_submit_then_discard(self, draft, preview_host):
        draft.add_file(object(), "a.jpg", "image/jpeg")
        with pytest.raises(RuntimeError):
            draft.submit(MagicMock(side_effect=RuntimeError("upload failed")), MagicMock())
        draft.discard()
        assert preview_host.released == ["blob:preview-0"]

    def test_release_failure_after_save_closes_draft(self, preview_host):
        released = []

        def release(ref):
            released.append(ref)
            if ref == "blob:preview-0":
                raise OSError("preview host gone")

        draft = EntryDraft.for_new_entry(DAY, preview_host.create, release)
        draft.add_file(object(), "a.jpg", "image/jpeg")
        draft.add_file(object(), "b.jpg", "image/jpeg")
        persist = MagicMock()
        upload = MagicMock(return_value="https://cdn.example/x.jpg")

        with pytest.raises(OSError, match="preview host gone"):
            draft.submit(upload, persist)

        assert draft.is_closed
        persist.assert_called_once()
        assert released == ["blob:preview-0", "blob:preview-1"]
        with pytest.raises(DraftClosedError):
            draft.submit(upload, persist)
        draft.discard()
        assert persist.call_count == 1
        assert released == ["blob:preview-0", "blob:preview-1"]

    def test_submit_then_discard(self, draft, preview_host):
        draft.add_file(object(), "a.jpg", "image/jpeg")
        draft.submit(MagicMock(return_value="https://cdn.example/a.jpg"), MagicMock())
        draft.discard()
        assert preview_host.released == ["blob:preview-0"]
