"""
FastAPI dependencies — DataStore singleton, filter parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Query

from regimen.config import ALL_FILTER
from regimen.data.store import DataStore

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DataStore | None = None


def set_store(store: DataStore) -> None:
    global _store
    _store = store


def get_store() -> DataStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Regimen plan not loaded yet")
    return _store


def get_store_or_empty() -> DataStore:
    """Return the store even if no plan has loaded (for health/reload endpoints)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Item filters from query params
# ---------------------------------------------------------------------------

def parse_item_filters(
    type: Optional[str] = Query(None, description="all|supplement|hair|skin"),
    time: Optional[str] = Query(None, description="all|daily|morning|midday|night"),
) -> tuple[str, str]:
    """Missing or blank filters mean ``all``. Unknown values are passed through and match nothing."""
    type_filter = (type or "").strip().lower() or ALL_FILTER
    time_filter = (time or "").strip().lower() or ALL_FILTER
    return type_filter, time_filter
