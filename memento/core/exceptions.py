#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Memento project.

The content model, calendar and activity builders are total functions and
raise nothing. Exceptions only exist at the edges: validating snapshots
coming from the storage collaborator, reading entry files, mutating an
editing session, and rendering output.

Exception Hierarchy:
    Exception (built-in)
    ├── ValidationError - Data validation failures
    │   ├── EntryValidationError - Malformed entry snapshots
    │   └── AttachmentValidationError - Malformed attachment descriptors
    ├── EntryParseError - Entry file reading/frontmatter errors
    ├── DraftClosedError - Mutation of a submitted/discarded draft
    └── RenderError - Template rendering failures

Usage:
    from memento.core.exceptions import EntryValidationError

    try:
        entry = Entry.from_record(row)
    except EntryValidationError as e:
        logger.log_warning(f"Skipping row: {e}")
"""


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Invalid date formats
    - Missing required fields
    - Type mismatches

    Examples:
        >>> raise ValidationError("Invalid date format: expected YYYY-MM-DD")
        >>> raise ValidationError("Cannot convert 'maybe' to boolean")
    """

    pass


class EntryValidationError(ValidationError):
    """
    Exception for entry-specific validation failures.

    Raised when a journal entry snapshot fails validation:
    - Missing id or date
    - Tags that are not a list of strings
    - Completion indices that are not integers

    Examples:
        >>> raise EntryValidationError("Entry missing required date field")
    """

    pass


class AttachmentValidationError(ValidationError):
    """
    Exception for attachment descriptor failures.

    Raised when an attachment record does not match the expected shape:
    - Unknown attachment kind
    - Missing display name or location

    Examples:
        >>> raise AttachmentValidationError("Unknown attachment kind: 'audio'")
    """

    pass


class EntryParseError(Exception):
    """
    Exception for entry file parsing failures.

    Raised when reading journal entries from files fails:
    - YAML frontmatter errors
    - File reading errors

    Examples:
        >>> raise EntryParseError("Invalid YAML frontmatter in 2024-01-15.md")
    """

    pass


class DraftClosedError(Exception):
    """
    Exception for operations on a closed editing draft.

    Raised when a draft that was already submitted or discarded is
    mutated again. Preview references of a closed draft have been
    released and must not be touched.

    Examples:
        >>> raise DraftClosedError("Draft was already submitted")
    """

    pass


class RenderError(Exception):
    """
    Exception for output rendering failures.

    Raised when an HTML export or template render fails:
    - Missing template
    - Template syntax errors
    - Output file writing errors

    Examples:
        >>> raise RenderError("Template not found: journal.jinja2")
    """

    pass
