#!/usr/bin/env python3
"""
tag_colors.py
-------------------
Deterministic tag -> palette color mapping.

Every tag chip in the journal is colored from a fixed palette of twelve
pastel tones. The color is a pure function of the tag text: the same tag,
in any letter case, always lands on the same palette slot. Distinct tags
may share a slot; no collision avoidance is attempted.

Usage:
    from memento.utils.tag_colors import color_class, color_index

    color_index("Work") == color_index("work")   # True
    color_class("work")                          # e.g. 'lilac'
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Tuple

COLOR_CLASSES: Tuple[str, ...] = (
    "blue",
    "periwinkle",
    "lavender",
    "pink",
    "rose",
    "peach",
    "yellow",
    "mint",
    "coral",
    "sky",
    "lilac",
    "lime",
)
TAG_COLORS: Tuple[str, ...] = tuple(f"var(--tag-{name})" for name in COLOR_CLASSES)
PALETTE_SIZE = len(COLOR_CLASSES)

_HASH_MULTIPLIER = 169
_HASH_MODULUS = 2 ** 32


def _normalize(tag: str) -> str:
    return tag.lower()


def tag_hash(tag: str) -> int:
    """
    Polynomial hash of the lowercased tag text, kept to 32 bits.

    Examples:
        >>> tag_hash("a")
        97
        >>> tag_hash("ab") == 97 * 169 + 98
        True
    """
    value = 0
    for char in _normalize(tag):
        value = (value * _HASH_MULTIPLIER + ord(char)) % _HASH_MODULUS
    return value


def color_index(tag: str) -> int:
    """Palette slot of a tag, in ``range(PALETTE_SIZE)``."""
    return tag_hash(tag) % PALETTE_SIZE


def color_class(tag: str) -> str:
    """CSS class suffix of a tag chip (``tag-<class>``)."""
    return COLOR_CLASSES[color_index(tag)]


def color_value(tag: str) -> str:
    """CSS custom property holding the tag color."""
    return TAG_COLORS[color_index(tag)]
