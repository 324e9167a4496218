#!/usr/bin/env python3
"""
md.py
-------------------
Markdown utilities for the Memento project.

Provides:
- Frontmatter splitting for entry files
- Markdown to HTML rendering of text segments (delegated to markdown-it-py)

Entry text segments are ordinary Markdown. Rendering is not done here by
hand: a shared MarkdownIt instance in CommonMark mode does the work, and
links are post-processed to open in a new tab.
"""
from __future__ import annotations

# --- Standard library imports ---
from functools import lru_cache
from typing import Any, List, Sequence

# --- Third-party imports ---
from markdown_it import MarkdownIt


# ----- YAML Frontmatter Parsing -----
def split_frontmatter(content: str) -> tuple[str, List[str]]:
    """
    Split entry file content into YAML frontmatter and body lines.

    Expected format:
        ---
        date: 2024-01-15
        ---

        Body text...

    Args:
        content: Full entry file content

    Returns:
        Tuple of (frontmatter_text, body_lines). Frontmatter is empty when
        the file has no (closed) frontmatter block.

    Examples:
        >>> split_frontmatter("---\\ndate: 2024-01-15\\n---\\n\\nBody text")
        ('date: 2024-01-15', ['Body text'])
    """
    lines = content.splitlines()

    if not lines or lines[0].strip() != "---":
        return "", lines

    closing = next(
        (i for i, line in enumerate(lines[1:], 1) if line.strip() == "---"),
        None,
    )
    if closing is None:
        return "", lines

    body_lines = lines[closing + 1 :]
    while body_lines and not body_lines[0].strip():
        body_lines.pop(0)

    return "\n".join(lines[1:closing]), body_lines


# ----- Rendering -----
def _link_open_new_tab(
    self: Any, tokens: Sequence[Any], idx: int, options: Any, env: Any
) -> str:
    """Render rule opening entry links outside the journal."""
    tokens[idx].attrSet("target", "_blank")
    tokens[idx].attrSet("rel", "noopener noreferrer")
    return self.renderToken(tokens, idx, options, env)


@lru_cache(maxsize=1)
def markdown_parser() -> MarkdownIt:
    """Shared CommonMark parser with new-tab links; raw HTML is escaped."""
    md = MarkdownIt("commonmark", {"html": False})
    md.add_render_rule("link_open", _link_open_new_tab)
    return md


def render_markdown(text: str) -> str:
    """
    Render a text segment to HTML.

    Examples:
        >>> render_markdown("**bold**")
        '<p><strong>bold</strong></p>\\n'
    """
    if not text:
        return ""
    return markdown_parser().render(text)
