#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the Memento project.

User data lives under a single home directory, taken from the
``MEMENTO_HOME`` environment variable and defaulting to ``~/.memento``:

    MEMENTO_HOME/
    ├── entries/       # Entry snapshots (Markdown + YAML frontmatter)
    ├── exports/       # Rendered HTML journals
    └── logs/          # Application logs

Templates ship inside the package and are resolved relative to this file.
Nothing is created at import time; commands create directories on demand.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path

HOME_ENV_VAR = "MEMENTO_HOME"


def _get_data_root() -> Path:
    """
    Determine the user data root.

    Returns:
        Expanded, absolute path of MEMENTO_HOME or ~/.memento
    """
    configured = os.environ.get(HOME_ENV_VAR)
    if configured:
        return Path(configured).expanduser().resolve()
    return Path.home() / ".memento"


# ----- Package -----
PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "render" / "templates"

# ----- User data -----
DATA_DIR: Path = _get_data_root()
ENTRIES_DIR = DATA_DIR / "entries"
EXPORT_DIR = DATA_DIR / "exports"
LOG_DIR = DATA_DIR / "logs"
