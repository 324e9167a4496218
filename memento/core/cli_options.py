#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click options for the Memento command line.

Usage:
    from memento.core.cli_options import year_option, today_option

    @cli.command()
    @year_option
    @today_option
    def calendar(year, today):
        pass
"""
import click

from memento.core.paths import ENTRIES_DIR, EXPORT_DIR, LOG_DIR


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose logging and tracebacks on error"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    show_default=True,
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# DATA OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

entries_dir_option = click.option(
    "--entries-dir",
    type=click.Path(file_okay=False),
    default=str(ENTRIES_DIR),
    show_default=True,
    help="Directory of entry files (Markdown with YAML frontmatter)"
)

year_option = click.option(
    "--year",
    type=int,
    default=None,
    help="Calendar year (default: the year of --today)"
)

today_option = click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Reference day as YYYY-MM-DD (default: the system date)"
)

weeks_option = click.option(
    "--weeks",
    type=click.IntRange(min=1),
    default=17,
    show_default=True,
    help="Number of weeks in the activity strip"
)


def output_option(default=str(EXPORT_DIR), help_text="Output directory"):
    """
    Factory for the output path option.

    Output paths are not validated for existence; they are created.

    Args:
        default: Default path value
        help_text: Custom help text

    Returns:
        Click option decorator
    """
    return click.option(
        "-o", "--output",
        type=click.Path(file_okay=False),
        default=default,
        show_default=True,
        help=help_text
    )
