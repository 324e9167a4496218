#!/usr/bin/env python3
"""
entries.py
----------
Entry inspection commands.

Commands:
    - parse: Print the content segments of one entry file
    - tags: List the tag catalog with palette classes

Usage:
    memento parse ~/.memento/entries/2024-01-15.md
    memento tags
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Third-party imports ---
import click

# --- Local imports ---
from memento.builders.entry_view import build_entry_view
from memento.core.cli import LoadStats
from memento.core.logging_manager import handle_cli_error
from memento.dataclasses.entry import Entry
from memento.journal.filters import collect_tags
from memento.journal.loader import load_entries
from memento.utils.tag_colors import color_class


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def parse(ctx: click.Context, file: str) -> None:
    """
    Print the content segments of one entry file.

    Text and URL segments are listed in source order, followed by the
    checklist items with their completion state and index.

    Examples:
        memento parse entries/2024-01-15.md
    """
    try:
        logger = ctx.obj["logger"]
        entry = Entry.from_markdown(Path(file))
        view = build_entry_view(entry)

        header = entry.date.isoformat()
        if view.tags:
            header += "  " + " ".join(f"#{chip.name}" for chip in view.tags)
        click.echo(header)

        for block in view.blocks:
            click.echo(f"{block.kind:<10} {block.content}")
        for item in view.checklist:
            mark = "[x]" if item.completed else "[ ]"
            click.echo(f"{mark} {item.index:<6} {item.content}")
        for attachment in entry.attachments:
            click.echo(f"{attachment.kind.value:<10} {attachment.display_name}")

        logger.log_operation(
            "parse",
            {
                "file": file,
                "blocks": len(view.blocks),
                "checklist": len(view.checklist),
            },
        )

    except Exception as e:
        handle_cli_error(ctx, e, "parse", {"file": file})


@click.command()
@click.pass_context
def tags(ctx: click.Context) -> None:
    """
    List every tag used by the entries, with its palette class.

    Examples:
        memento tags
    """
    try:
        logger = ctx.obj["logger"]
        stats = LoadStats()
        entries = load_entries(ctx.obj["entries_dir"], logger, stats)

        catalog = collect_tags(entries)
        if not catalog:
            click.echo("No tags found")
            return

        for tag in catalog:
            used = sum(1 for entry in entries if tag in entry.tags)
            click.echo(f"#{tag:<24} {color_class(tag):<12} {used}")

        logger.log_operation("tags", {"tags": len(catalog), **stats.to_dict()})

    except Exception as e:
        handle_cli_error(ctx, e, "tags")
