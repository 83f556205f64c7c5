"""
Schedule endpoints — day buckets, day details, month calendar, full table, Excel export.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import FileResponse

from regimen.config import EXPORTS_FOLDER
from regimen.data.store import DataStore
from regimen.api.dependencies import get_store
from regimen.api.response_models import (
    CalendarResponse, DayDetailsResponse, DayScheduleResponse, ScheduleResponse,
)
from regimen.reports import schedule_report

router = APIRouter(prefix="/api", tags=["schedule"])


def _output_path(name: str) -> Path:
    EXPORTS_FOLDER.mkdir(parents=True, exist_ok=True)
    return EXPORTS_FOLDER / name


@router.get("/days/{date}", response_model=DayScheduleResponse)
def day_schedule(date: str, store: DataStore = Depends(get_store)):
    day = store.get_day_schedule(date)
    if day is None:
        raise HTTPException(404, f"No entries for {date}")
    return DayScheduleResponse(
        date=date,
        periods={period: slot.to_dict() for period, slot in day.items()},
    )


@router.get("/days/{date}/details", response_model=DayDetailsResponse)
def day_details(date: str, store: DataStore = Depends(get_store)):
    details = store.day_details(date)
    if details is None:
        raise HTTPException(404, f"No entries for {date}")
    return details


@router.get("/calendar", response_model=CalendarResponse)
def month_calendar(
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    store: DataStore = Depends(get_store),
):
    """Per-day period activity for one month (defaults to the current month)."""
    today = dt.date.today()
    year = year or today.year
    month = month or today.month
    return CalendarResponse(
        year=year,
        month=month,
        label=f"{dt.date(year, month, 1):%B %Y}",
        days=store.month_calendar(year, month),
    )


@router.get("/schedule", response_model=ScheduleResponse)
def schedule_table(
    search: Optional[str] = Query(None, description="Case-insensitive text filter"),
    store: DataStore = Depends(get_store),
):
    df = store.schedule_table(search)
    return ScheduleResponse(rows=df.to_dict("records"), count=len(df), search=search)


@router.get("/schedule/excel")
def schedule_excel(store: DataStore = Depends(get_store)):
    path = schedule_report.generate_excel(store, _output_path("Regimen_Plan.xlsx"))
    return FileResponse(path=str(path), filename=path.name,
                        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet")
