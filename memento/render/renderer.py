#!/usr/bin/env python3
"""
renderer.py
-----------
Jinja2 template engine for the HTML journal export.

Supports filesystem templates (the packaged ``render/templates``) and
dict templates (tests). Output is only written when it differs from the
file on disk.

Usage:
    from memento.render.renderer import JournalRenderer

    renderer = JournalRenderer()
    html = renderer.render("journal.jinja2", context)
    changed = renderer.render_to_file("journal.jinja2", context, path)

    renderer = JournalRenderer(templates={"t.jinja2": "{{ text | markdown }}"})

Dependencies:
    - jinja2>=3.1.0
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third-party imports ---
from jinja2 import (
    BaseLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateError,
    select_autoescape,
)

# --- Local imports ---
from memento.core.exceptions import RenderError
from memento.core.paths import TEMPLATES_DIR
from memento.render import filters as journal_filters
from memento.utils.fs import write_if_changed


class JournalRenderer:
    """
    Jinja2-based HTML renderer.

    Attributes:
        env: Configured Jinja2 Environment instance
    """

    def __init__(
        self,
        templates_dir: Optional[Path] = None,
        templates: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Initialize the renderer.

        Args:
            templates_dir: Path to templates directory (FileSystemLoader)
            templates: Dict of template_name -> template_string (DictLoader)

        Raises:
            ValueError: If both templates_dir and templates are provided
        """
        if templates_dir and templates:
            raise ValueError("Provide either templates_dir or templates, not both")

        loader: BaseLoader
        if templates is not None:
            loader = DictLoader(templates)
        else:
            loader = FileSystemLoader(str(templates_dir or TEMPLATES_DIR))

        self.env = Environment(
            loader=loader,
            autoescape=select_autoescape(
                enabled_extensions=("html", "jinja2"),
                default_for_string=True,
            ),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._register_filters()

    def _register_filters(self) -> None:
        self.env.filters["markdown"] = journal_filters.markdown
        self.env.filters["tag_class"] = journal_filters.tag_class
        self.env.filters["date_long"] = journal_filters.date_long
        self.env.filters["date_short"] = journal_filters.date_short
        self.env.filters["time_short"] = journal_filters.time_short
        self.env.filters["url_host"] = journal_filters.url_host
        self.env.filters["level_char"] = journal_filters.level_char

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Raises:
            RenderError: If the template is missing or fails to render
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except TemplateError as e:
            raise RenderError(f"Cannot render {template_name}: {e}") from e

    def render_to_file(
        self,
        template_name: str,
        context: Dict[str, Any],
        output_path: Path,
    ) -> bool:
        """
        Render a template and write it if the content changed.

        Returns:
            True if the file was written, False if it was already current

        Raises:
            RenderError: If rendering or writing fails
        """
        content = self.render(template_name, context)
        try:
            return write_if_changed(output_path, content)
        except OSError as e:
            raise RenderError(f"Cannot write {output_path}: {e}") from e
