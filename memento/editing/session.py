#!/usr/bin/env python3
"""
session.py
-------------------
Editing session for composing a new entry or editing an existing one.

An ``EntryDraft`` owns everything the composer holds between opening and
submitting: the text, the tag list, the reminder flag and the attachment
list. Files picked in the composer get a *local preview* reference from
the host (an object URL, a temp file, ...). Those previews belong to the
draft and must be released exactly once, at whichever comes first:

- the attachment is removed from the draft
- the draft is submitted successfully
- the draft is discarded

Attachments that came from an already-saved entry point at durable remote
locations; the draft never owns or releases them.

Uploading and saving are delegated to callables supplied by the caller.
Their exceptions propagate unchanged and leave the draft open, so the
user can retry or discard.

Usage:
    draft = EntryDraft.for_new_entry(day, create_preview, release_preview)
    draft.text = "○ buy milk"
    draft.add_file(picked_file, "photo.jpg", "image/jpeg")
    payload = draft.submit(upload=storage.upload, persist=entries.insert)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Optional

# --- Local imports ---
from memento.core.exceptions import DraftClosedError
from memento.core.logging_manager import MementoLogger, safe_logger
from memento.dataclasses.entry import (
    Attachment,
    AttachmentKind,
    Entry,
    LocationRef,
    serialize_attachments,
)

CreatePreview = Callable[[Any], str]
ReleasePreview = Callable[[str], None]
Upload = Callable[[Any], str]
Persist = Callable[[Dict[str, Any]], Any]


@dataclass
class DraftAttachment:
    """
    Attachment as held by the composer.

    Attributes:
        kind: image, video or file
        name: Display name
        location: Durable reference for saved attachments, or the local
            preview of a picked image (None for non-image picks)
        source: The picked file object, None for saved attachments
    """
    kind: AttachmentKind
    name: str
    location: Optional[LocationRef] = None
    source: Any = None

    @property
    def is_existing(self) -> bool:
        return self.source is None

    @property
    def owns_preview(self) -> bool:
        return self.location is not None and self.location.is_local_preview


class EntryDraft:
    """
    Composer state for one entry.

    Attributes:
        entry_date: Day the entry is filed under
        entry_id: Id of the edited entry, None for a new one
        text: Raw entry text
        tags: Tags in the order they were added
        is_pinned: Reminder/pin flag
        attachments: Attachments in display order
    """

    def __init__(
        self,
        entry_date: date,
        create_preview: CreatePreview,
        release_preview: ReleasePreview,
        entry_id: Optional[str] = None,
        text: str = "",
        tags: Optional[List[str]] = None,
        is_pinned: bool = False,
        attachments: Optional[List[DraftAttachment]] = None,
        logger: Optional[MementoLogger] = None,
    ) -> None:
        self.entry_date = entry_date
        self.entry_id = entry_id
        self.text = text
        self.tags: List[str] = list(tags or [])
        self.is_pinned = is_pinned
        self.attachments: List[DraftAttachment] = list(attachments or [])
        self._create_preview = create_preview
        self._release_preview = release_preview
        self._released: set = set()
        self._closed = False
        self.logger = logger

    # ----- Construction -----
    @classmethod
    def for_new_entry(
        cls,
        entry_date: date,
        create_preview: CreatePreview,
        release_preview: ReleasePreview,
        logger: Optional[MementoLogger] = None,
    ) -> "EntryDraft":
        return cls(entry_date, create_preview, release_preview, logger=logger)

    @classmethod
    def for_entry(
        cls,
        entry: Entry,
        create_preview: CreatePreview,
        release_preview: ReleasePreview,
        logger: Optional[MementoLogger] = None,
    ) -> "EntryDraft":
        """Open a draft pre-filled from a saved entry."""
        attachments = [
            DraftAttachment(a.kind, a.display_name, a.location_ref)
            for a in entry.attachments
        ]
        return cls(
            entry.date,
            create_preview,
            release_preview,
            entry_id=entry.id,
            text=entry.raw_text,
            tags=entry.sorted_tags,
            is_pinned=entry.is_pinned,
            attachments=attachments,
            logger=logger,
        )

    # ----- State -----
    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def is_new(self) -> bool:
        return self.entry_id is None

    @property
    def can_submit(self) -> bool:
        """A draft needs text or at least one attachment."""
        return bool(self.text.strip() or self.attachments)

    def _ensure_open(self) -> None:
        if self._closed:
            raise DraftClosedError("Draft was already submitted or discarded")

    def _release(self, attachment: DraftAttachment) -> None:
        if not attachment.owns_preview:
            return
        ref = attachment.location.value
        if ref in self._released:
            return
        self._release_preview(ref)
        self._released.add(ref)

    # ----- Tags -----
    def add_tag(self, tag: str) -> bool:
        """
        Append a tag unless it is blank or already present.

        Returns:
            True if the tag was added
        """
        self._ensure_open()
        tag = tag.strip()
        if not tag or tag in self.tags:
            return False
        self.tags.append(tag)
        return True

    def remove_tag(self, position: int) -> str:
        self._ensure_open()
        return self.tags.pop(position)

    def remove_last_tag(self) -> Optional[str]:
        """Backspace in an empty tag field drops the last tag."""
        self._ensure_open()
        return self.tags.pop() if self.tags else None

    # ----- Attachments -----
    def add_file(self, source: Any, name: str, mime_type: Optional[str] = None) -> DraftAttachment:
        """
        Add a picked file. Images get a local preview reference.
        """
        self._ensure_open()
        kind = AttachmentKind.from_mime_type(mime_type)
        location = None
        if kind is AttachmentKind.IMAGE:
            location = LocationRef.preview(self._create_preview(source))
        attachment = DraftAttachment(kind, name, location, source)
        self.attachments.append(attachment)
        return attachment

    def remove_attachment(self, position: int) -> DraftAttachment:
        """Remove an attachment, releasing its preview if the draft owns one."""
        self._ensure_open()
        attachment = self.attachments.pop(position)
        self._release(attachment)
        return attachment

    # ----- Lifecycle -----
    def build_payload(self, attachments: List[Attachment]) -> Dict[str, Any]:
        """
        Row fields to save for this draft.

        New entries always carry some title text (a single space when the
        entry is attachments only); tags are None when empty.
        """
        text = self.text.strip()
        payload: Dict[str, Any] = {
            "title": text if (text or not self.is_new) else " ",
            "description": serialize_attachments(attachments),
            "tags": list(self.tags) or None,
            "is_reminder": self.is_pinned,
        }
        if self.is_new:
            payload["date"] = self.entry_date.isoformat()
        else:
            payload["id"] = self.entry_id
        return payload

    def submit(self, upload: Upload, persist: Persist) -> Dict[str, Any]:
        """
        Upload new files, save the entry and release owned previews.

        Args:
            upload: Uploads a picked file and returns its durable URL
            persist: Saves the payload (insert or update)

        Returns:
            The payload handed to ``persist``

        Raises:
            DraftClosedError: If the draft is already closed
            ValueError: If the draft has neither text nor attachments
            Exception: Whatever ``upload`` or ``persist`` raise; the
                draft stays open and keeps its previews. Once ``persist``
                returns the draft is closed, and the first error raised
                by ``release_preview`` is re-raised after every preview
                has been tried.
        """
        self._ensure_open()
        if not self.can_submit:
            raise ValueError("Nothing to save: the draft is empty")

        stored: List[Attachment] = []
        for attachment in self.attachments:
            if attachment.is_existing:
                location = attachment.location
            else:
                location = LocationRef.remote(upload(attachment.source))
            stored.append(Attachment(attachment.kind, attachment.name, location))

        payload = self.build_payload(stored)
        persist(payload)
        self._closed = True

        first_error: Optional[Exception] = None
        for attachment in self.attachments:
            try:
                self._release(attachment)
            except Exception as e:
                safe_logger(self.logger).log_warning(
                    f"Failed to release preview of {attachment.name}: {e}",
                    {"entry_id": self.entry_id},
                )
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

        safe_logger(self.logger).log_operation(
            "draft_submitted",
            {
                "entry_id": self.entry_id,
                "date": self.entry_date,
                "attachments": len(stored),
            },
        )
        return payload

    def discard(self) -> None:
        """Abandon the draft, releasing owned previews. Idempotent."""
        if self._closed:
            return
        for attachment in self.attachments:
            self._release(attachment)
        self._closed = True
