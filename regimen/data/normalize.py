"""
Field splitting and name normalization for raw schedule rows.
"""
from __future__ import annotations

from typing import Any

from regimen.data.schemas import Category, RawEntry


# ---------------------------------------------------------------------------
# Delimited item fields
# ---------------------------------------------------------------------------

def split_items(field_value: Any) -> list[str]:
    """Split a comma-separated item field into trimmed, non-empty names.

    Absent, empty, or whitespace-only input gives an empty list. Stray
    commas just produce fewer items. Casing is left untouched.
    """
    if field_value is None:
        return []
    text = str(field_value)
    if not text.strip():
        return []
    return [piece.strip() for piece in text.split(",") if piece.strip()]


def normalize_name(name: str) -> str:
    """Registry key for an item name: trimmed and lowercased."""
    return name.strip().lower()


# ---------------------------------------------------------------------------
# Per-row extraction
# ---------------------------------------------------------------------------

def items_by_category(entry: RawEntry) -> list[tuple[Category, list[str]]]:
    """Return (category, item names) for every category, in enum order."""
    return [(category, split_items(entry.field_value(category))) for category in Category]
