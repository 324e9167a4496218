#!/usr/bin/env python3
"""
Memento CLI
-----------

Command-line interface over a directory of entry files.

Commands:
    - parse: Print the content segments of one entry file
    - calendar: ASCII year calendar with activity levels
    - activity: Compact activity strip of the recent weeks
    - tags: Tag catalog with palette classes
    - export: Static HTML journal of one year

Usage:
    memento parse ~/.memento/entries/2024-01-15.md
    memento calendar --year 2024
    memento activity --weeks 12
    memento tags
    memento export --year 2024 -o ./site
"""
from __future__ import annotations

import click
from pathlib import Path

from memento.core.cli import setup_logger
from memento.core.cli_options import entries_dir_option, log_dir_option, verbose_option


@click.group()
@log_dir_option
@entries_dir_option
@verbose_option
@click.pass_context
def cli(ctx: click.Context, log_dir: str, entries_dir: str, verbose: bool) -> None:
    """Memento journal tools"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["entries_dir"] = Path(entries_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "cli")


# Import and register commands from submodules
from .entries import parse, tags
from .calendar import activity, calendar
from .export import export

cli.add_command(parse)
cli.add_command(tags)
cli.add_command(calendar)
cli.add_command(activity)
cli.add_command(export)

__all__ = ["cli"]
