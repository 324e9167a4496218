#!/usr/bin/env python3
"""
entry.py
-------------------
Entry and attachment snapshots at the storage boundary.

Entries are owned by the storage collaborator. This module turns the
loosely typed shapes it hands over into frozen, validated snapshots:

- Remote rows (``Entry.from_record``): raw text in ``title``, the
  attachment list serialized as JSON text in ``description``, the pin
  flag in ``is_reminder`` and completed checklist positions as JSON text
  in ``completed_todos``.
- Entry files (``Entry.from_markdown``): Markdown body with a YAML
  frontmatter block, used by the command line.

Key Design:
- Attachments are explicit tagged records, never free-form dicts
- A location is either durable (remote URL) or a local preview; only
  local previews are owned, and released, by an editing session
- Snapshots are immutable; views derived from them are recomputed
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from memento.core.exceptions import (
    AttachmentValidationError,
    EntryParseError,
    EntryValidationError,
    ValidationError,
)
from memento.core.validators import DataValidator
from memento.utils.fs import parse_date_from_filename
from memento.utils.md import split_frontmatter

logger = logging.getLogger(__name__)


class AttachmentKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    FILE = "file"

    @classmethod
    def from_mime_type(cls, mime_type: Optional[str]) -> "AttachmentKind":
        """Classify an uploaded file by its MIME type prefix."""
        mime_type = mime_type or ""
        if mime_type.startswith("image/"):
            return cls.IMAGE
        if mime_type.startswith("video/"):
            return cls.VIDEO
        return cls.FILE


@dataclass(frozen=True)
class LocationRef:
    """
    Where an attachment's bytes can be found.

    Attributes:
        value: URL or preview handle
        is_local_preview: True for transient previews of files that have
            not been uploaded yet; False for durable remote references
    """
    value: str
    is_local_preview: bool = False

    @classmethod
    def remote(cls, url: str) -> "LocationRef":
        return cls(url, is_local_preview=False)

    @classmethod
    def preview(cls, handle: str) -> "LocationRef":
        return cls(handle, is_local_preview=True)


@dataclass(frozen=True)
class Attachment:
    kind: AttachmentKind
    display_name: str
    location_ref: LocationRef

    @property
    def is_image(self) -> bool:
        return self.kind is AttachmentKind.IMAGE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Attachment":
        """
        Validate one serialized attachment ``{type, name, url}``.

        Raises:
            AttachmentValidationError: If the shape is not recognized
        """
        if not isinstance(data, Mapping):
            raise AttachmentValidationError(
                f"Attachment must be an object, got {type(data).__name__}"
            )
        raw_kind = data.get("type")
        try:
            kind = AttachmentKind(raw_kind)
        except ValueError as e:
            raise AttachmentValidationError(
                f"Unknown attachment kind: {raw_kind!r}"
            ) from e

        url = data.get("url")
        if not isinstance(url, str) or not url.strip():
            raise AttachmentValidationError("Attachment is missing its url")

        name = data.get("name")
        if name is not None and not isinstance(name, str):
            raise AttachmentValidationError(f"Attachment name must be text: {name!r}")
        display_name = (name or "").strip() or url.rsplit("/", 1)[-1]

        return cls(kind, display_name, LocationRef.remote(url.strip()))

    def to_dict(self) -> Dict[str, str]:
        """
        Serialize for storage.

        Raises:
            AttachmentValidationError: For local previews, which have no
                durable location to store
        """
        if self.location_ref.is_local_preview:
            raise AttachmentValidationError(
                f"Attachment '{self.display_name}' has not been uploaded"
            )
        return {
            "type": self.kind.value,
            "name": self.display_name,
            "url": self.location_ref.value,
        }


def parse_attachments(items: Any) -> Tuple[Attachment, ...]:
    """
    Validate a list of serialized attachments.

    Malformed items are skipped with a warning so one bad descriptor does
    not hide the rest of an entry.
    """
    if items is None:
        return ()
    if not isinstance(items, list):
        logger.warning("Ignoring attachment payload of type %s", type(items).__name__)
        return ()

    attachments: List[Attachment] = []
    for position, item in enumerate(items):
        try:
            attachments.append(Attachment.from_dict(item))
        except AttachmentValidationError as e:
            logger.warning("Skipping attachment %d: %s", position, e)
    return tuple(attachments)


def parse_description(description: Optional[str]) -> Tuple[Attachment, ...]:
    """
    Read the attachment list stored in a row's ``description`` column.

    Older rows hold free text there; anything that is not a JSON list
    means "no attachments".

    Examples:
        >>> parse_description('[{"type": "file", "name": "a.pdf", "url": "https://x/a.pdf"}]')
        (Attachment(kind=<AttachmentKind.FILE: 'file'>, ...),)
        >>> parse_description("just some words")
        ()
    """
    if not description:
        return ()
    try:
        payload = json.loads(description)
    except (TypeError, json.JSONDecodeError):
        return ()
    if not isinstance(payload, list):
        return ()
    return parse_attachments(payload)


def serialize_attachments(attachments: Tuple[Attachment, ...] | List[Attachment]) -> Optional[str]:
    """Encode attachments for the ``description`` column; None when empty."""
    if not attachments:
        return None
    return json.dumps([attachment.to_dict() for attachment in attachments])


@dataclass(frozen=True)
class Entry:
    """
    Immutable snapshot of one journal entry.

    Attributes:
        id: Storage identifier
        date: Calendar day the entry belongs to (no time zone conversion)
        raw_text: Entry body as typed by the user
        created_at: Creation instant, when known
        tags: Tag set; display order is alphabetical (``sorted_tags``)
        is_pinned: Pinned entries are listed as reminders
        reminder_time: Optional wall-clock time, e.g. "09:30"
        attachments: Ordered attachment records
        completed_indices: Positions of completed checklist items
    """
    id: str
    date: date
    raw_text: str = ""
    created_at: Optional[datetime] = None
    tags: FrozenSet[str] = field(default_factory=frozenset)
    is_pinned: bool = False
    reminder_time: Optional[str] = None
    attachments: Tuple[Attachment, ...] = ()
    completed_indices: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def sorted_tags(self) -> List[str]:
        return sorted(self.tags)

    @property
    def images(self) -> List[Attachment]:
        return [a for a in self.attachments if a.is_image]

    @property
    def files(self) -> List[Attachment]:
        return [a for a in self.attachments if not a.is_image]

    # ----- Remote rows -----
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Entry":
        """
        Build a snapshot from a remote storage row.

        Args:
            record: Row with keys id, date, title, description, tags,
                created_at, is_reminder, reminder_time, completed_todos

        Raises:
            EntryValidationError: If the row is missing id/date or holds
                values that cannot be interpreted
        """
        try:
            DataValidator.validate_required_fields(dict(record), ["id", "date"])
            return cls(
                id=str(record["id"]),
                date=DataValidator.normalize_date(record["date"]),
                raw_text=record.get("title") or "",
                created_at=DataValidator.normalize_datetime(record.get("created_at")),
                tags=frozenset(DataValidator.normalize_tags(record.get("tags"))),
                is_pinned=bool(DataValidator.normalize_bool(record.get("is_reminder"))),
                reminder_time=DataValidator.normalize_string(record.get("reminder_time")),
                attachments=parse_description(record.get("description")),
                completed_indices=DataValidator.normalize_index_set(
                    record.get("completed_todos")
                ),
            )
        except EntryValidationError:
            raise
        except ValidationError as e:
            raise EntryValidationError(
                f"Invalid entry {record.get('id', '?')}: {e}"
            ) from e

    def to_record(self) -> Dict[str, Any]:
        """Emit the remote row shape for this snapshot."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "title": self.raw_text,
            "description": serialize_attachments(self.attachments),
            "tags": self.sorted_tags or None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "is_reminder": self.is_pinned,
            "reminder_time": self.reminder_time,
            "completed_todos": json.dumps(sorted(self.completed_indices)),
        }

    # ----- Entry files -----
    @classmethod
    def from_markdown_text(cls, content: str, source: Optional[Path] = None) -> "Entry":
        """
        Build a snapshot from Markdown text with YAML frontmatter.

        Frontmatter keys: id, date, created_at, tags, pinned,
        reminder_time, attachments, completed. ``id`` and ``date`` fall
        back to the file name (``2024-01-15.md`` or ``2024-01-15-2.md``).

        Raises:
            EntryParseError: If the frontmatter is not valid YAML or holds
                an impossible date
            EntryValidationError: If the metadata is malformed
        """
        frontmatter, body_lines = split_frontmatter(content)
        try:
            metadata = yaml.safe_load(frontmatter) if frontmatter else {}
        except (yaml.YAMLError, ValueError) as e:
            raise EntryParseError(f"Invalid YAML frontmatter in {source or 'entry'}: {e}") from e
        if metadata is None:
            metadata = {}
        if not isinstance(metadata, dict):
            raise EntryParseError(f"Frontmatter of {source or 'entry'} is not a mapping")

        entry_id = metadata.get("id")
        entry_date = metadata.get("date")
        if source is not None:
            entry_id = entry_id or source.stem
            if not entry_date:
                try:
                    entry_date = parse_date_from_filename(Path(source.stem[:10]))
                except ValueError as e:
                    raise EntryValidationError(
                        f"{source.name}: no date in frontmatter or file name"
                    ) from e

        try:
            DataValidator.validate_required_fields(
                {"id": entry_id, "date": entry_date}, ["id", "date"]
            )
            return cls(
                id=str(entry_id),
                date=DataValidator.normalize_date(entry_date),
                raw_text="\n".join(body_lines).strip(),
                created_at=DataValidator.normalize_datetime(metadata.get("created_at")),
                tags=frozenset(DataValidator.normalize_tags(metadata.get("tags"))),
                is_pinned=bool(DataValidator.normalize_bool(metadata.get("pinned"))),
                reminder_time=DataValidator.normalize_string(metadata.get("reminder_time")),
                attachments=parse_attachments(metadata.get("attachments")),
                completed_indices=DataValidator.normalize_index_set(
                    metadata.get("completed")
                ),
            )
        except EntryValidationError:
            raise
        except ValidationError as e:
            raise EntryValidationError(f"{source or 'entry'}: {e}") from e

    @classmethod
    def from_markdown(cls, path: Path) -> "Entry":
        """
        Load an entry file.

        Raises:
            EntryParseError: If the file cannot be read or parsed
            EntryValidationError: If the metadata is malformed
        """
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise EntryParseError(f"Entry file {path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise EntryParseError(f"Cannot read entry file {path}: {e}") from e
        return cls.from_markdown_text(content, source=path)
