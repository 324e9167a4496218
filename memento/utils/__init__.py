"""
Utilities package for Memento.

- md: Frontmatter splitting and Markdown rendering
- fs: Entry file discovery and date parsing
- tag_colors: Deterministic tag palette

Import commonly-used utilities directly from this package:
    from memento.utils import split_frontmatter, color_class
"""

# Markdown utilities
from .md import split_frontmatter, render_markdown

# Filesystem utilities
from .fs import find_entry_files, parse_date_from_filename, write_if_changed

# Tag palette
from .tag_colors import color_class, color_index, color_value

__all__ = [
    "split_frontmatter",
    "render_markdown",
    "find_entry_files",
    "parse_date_from_filename",
    "write_if_changed",
    "color_class",
    "color_index",
    "color_value",
]
