"""
Meta endpoints: health, summary, reload.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from regimen.config import PLAN_FILE
from regimen.data.loader import SourceUnavailable
from regimen.data.store import DataStore
from regimen.api.dependencies import get_store, get_store_or_empty
from regimen.api.response_models import HealthResponse

router = APIRouter(prefix="/api", tags=["meta"])

logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store_or_empty)):
    snap = store.snapshot
    return HealthResponse(
        status="ok" if store.is_loaded else "no data",
        loaded=store.is_loaded,
        rows=len(snap.rows),
        dates=len(snap.days),
        items=len(snap.items),
    )


@router.get("/summary")
def summary(store: DataStore = Depends(get_store)):
    return store.summary()


@router.post("/reload")
def reload_data(store: DataStore = Depends(get_store_or_empty)):
    """Re-read the plan file and swap in the rebuilt schedule.

    If the file can't be read, the previous plan stays live.
    """
    try:
        store.load(PLAN_FILE)
    except SourceUnavailable as exc:
        logger.warning("Reload failed, keeping previous plan: %s", exc)
        raise HTTPException(503, f"Plan source unavailable: {exc}")
    snap = store.snapshot
    return {"status": "reloaded", "rows": len(snap.rows), "items": len(snap.items)}
