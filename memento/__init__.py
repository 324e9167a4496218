"""
Memento
=======

Entry content model and calendar/activity engine of a personal journal.

Journal entries are free text with inline URLs and "○ " checklist lines,
plus tags, attachments and a pin flag. This package turns entry
snapshots into display segments, edits entry text through pure
transforms, and lays out the year calendar and activity strip.

Main Components:
    - content: Block parser (text, URL and checklist segments)
    - editing: Text transforms and the entry draft session
    - builders: Calendar grids, activity levels, entry views, ASCII charts
    - journal: Search, tag filter, day/month selections, entry loading
    - render: Jinja2 HTML export
    - dataclasses: Entry, attachment, segment and calendar records
    - core: Logging, exceptions, paths, validators, CLI helpers
    - utils: Markdown, filesystem and tag palette utilities

Primary Interfaces:
    - memento.cli: Command-line interface
    - memento.content.blocks.parse: Segment an entry's raw text

Example Usage:
    >>> from memento.content.blocks import parse
    >>> [s.kind for s in parse("Groceries\\n○ milk")]
    ['text', 'checklist']
"""

__version__ = "1.0.0"
