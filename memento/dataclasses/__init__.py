"""
Dataclasses for Memento records.

- entry: Entry snapshots, attachments and their storage boundary
- segments: Parsed content segments
- calendar: Calendar days, weeks, months and activity cells
"""
