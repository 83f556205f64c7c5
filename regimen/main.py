"""
Regimen Plan — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from regimen.data.loader import SourceUnavailable
from regimen.data.store import DataStore
from regimen.api.dependencies import set_store
from regimen.api.router_meta import router as meta_router
from regimen.api.router_items import router as items_router
from regimen.api.router_schedule import router as schedule_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the plan at startup. A missing plan leaves the store empty."""
    from regimen.config import PLAN_FILE

    print(f"  PLAN_FILE = {PLAN_FILE}")
    store = DataStore()
    try:
        store.load(PLAN_FILE)
    except SourceUnavailable as exc:
        print(f"  Plan not loaded: {exc}")
    set_store(store)

    if store.is_loaded:
        print(f"\nRegimen Plan ready — {store.row_count():,} rows, "
              f"{len(store.dates())} dates, {len(store.get_item_list())} items\n")
    else:
        print("\nRegimen Plan ready — no plan yet. Add master_plan.json and POST /api/reload.\n")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Regimen Plan API",
        description="Daily supplement, hair care and skin care schedule",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(items_router)
    app.include_router(schedule_router)

    return app


app = create_app()
