#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization at the storage boundary.

Entry rows and frontmatter blocks arrive loosely typed (strings, JSON
text, YAML scalars). DataValidator turns them into the concrete Python
types the entry dataclasses hold, raising ValidationError when a value
cannot be interpreted.
"""
from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from .exceptions import ValidationError


class DataValidator:
    """Centralized data validation for entry snapshots."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str]
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Args:
            data: Data dictionary to validate
            required_fields: List of required field names

        Raises:
            ValidationError: If a field is missing or empty
        """
        for field in required_fields:
            if field not in data or data[field] in (None, ""):
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def normalize_date(date_value: Any) -> Optional[date]:
        """
        Normalize a calendar day without time zone conversion.

        Datetimes keep their own calendar day; ISO strings are read up to
        the day part ("2024-01-15", "2024-01-15T00:00:00").

        Args:
            date_value: Date string, date object, or datetime

        Returns:
            Normalized date object or None

        Raises:
            ValidationError: If a string is not an ISO date
        """
        if date_value is None or date_value == "":
            return None
        if isinstance(date_value, datetime):
            return date_value.date()
        if isinstance(date_value, date):
            return date_value
        if isinstance(date_value, str):
            try:
                return date.fromisoformat(date_value.strip()[:10])
            except ValueError as e:
                raise ValidationError(
                    f"Invalid date format: '{date_value}' (expected YYYY-MM-DD)"
                ) from e
        raise ValidationError(f"Cannot convert {type(date_value).__name__} to date")

    @staticmethod
    def normalize_datetime(value: Any) -> Optional[datetime]:
        """
        Normalize an instant (ISO 8601 string or datetime).

        A trailing 'Z' is accepted as UTC.

        Raises:
            ValidationError: If the value cannot be parsed
        """
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if isinstance(value, str):
            text = value.strip()
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            try:
                return datetime.fromisoformat(text)
            except ValueError as e:
                raise ValidationError(f"Invalid timestamp: '{value}'") from e
        raise ValidationError(f"Cannot convert {type(value).__name__} to datetime")

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """Strip a string value; empty strings become None."""
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def normalize_bool(value: Any) -> Optional[bool]:
        """
        Convert various inputs to boolean.

        Raises:
            ValidationError: If conversion fails
        """
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            if value in (0, 1):
                return bool(value)
            raise ValidationError(f"Cannot convert numeric '{value}' to boolean")
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("true", "1", "yes", "on"):
                return True
            if lowered in ("false", "0", "no", "off", ""):
                return False
            raise ValidationError(f"Cannot convert '{value}' to boolean")
        if value is not None:
            return bool(value)
        return None

    @staticmethod
    def normalize_tags(value: Any) -> Tuple[str, ...]:
        """
        Normalize a tag collection, preserving first-seen order.

        Accepts None, a list/tuple/set of strings, or a comma-separated
        string. Blank tags are dropped, duplicates collapse.

        Raises:
            ValidationError: If an item is not a string
        """
        if value is None:
            return ()
        if isinstance(value, str):
            items: List[Any] = value.split(",")
        elif isinstance(value, (list, tuple, set, frozenset)):
            items = list(value)
        else:
            raise ValidationError(f"Tags must be a list, got {type(value).__name__}")

        seen: Dict[str, None] = {}
        for item in items:
            if not isinstance(item, str):
                raise ValidationError(f"Tag must be a string, got {item!r}")
            tag = item.strip()
            if tag:
                seen.setdefault(tag, None)
        return tuple(seen)

    @staticmethod
    def normalize_index_set(value: Any) -> FrozenSet[int]:
        """
        Normalize checklist completion indices.

        Accepts None, an iterable of ints, or JSON text of a list
        (the remote row stores ``completed_todos`` as JSON).

        Raises:
            ValidationError: If an index is not a non-negative integer
        """
        if value is None or value == "":
            return frozenset()
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                raise ValidationError(f"Invalid completion list: {value!r}") from e
            if value is None:
                return frozenset()
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValidationError(
                f"Completion indices must be a list, got {type(value).__name__}"
            )

        indices = set()
        for item in value:
            if isinstance(item, bool) or not isinstance(item, int) or item < 0:
                raise ValidationError(f"Invalid checklist index: {item!r}")
            indices.add(item)
        return frozenset(indices)
