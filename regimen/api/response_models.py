"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    rows: int
    dates: int
    items: int


class SlotResponse(BaseModel):
    sup: list[str]
    hair: list[str]
    skin: list[str]


class DayScheduleResponse(BaseModel):
    date: str
    periods: dict[str, SlotResponse]


class DaySlotDetail(BaseModel):
    period: str
    label: str
    has_entries: bool
    items: list[str]


class DayDetailsResponse(BaseModel):
    date: str
    slots: list[DaySlotDetail]


class ItemResponse(BaseModel):
    name: str
    category: str
    periods: list[str]
    occurrences: int


class ItemsResponse(BaseModel):
    items: list[ItemResponse]
    count: int
    type: str
    time: str


class OccurrenceResponse(BaseModel):
    date: str
    time: str


class OccurrencesResponse(BaseModel):
    name: str
    count: int
    occurrences: list[OccurrenceResponse]


class CalendarDay(BaseModel):
    date: str
    day: int
    weekday: int
    periods: list[str]


class CalendarResponse(BaseModel):
    year: int
    month: int
    label: str
    days: list[CalendarDay]


class ScheduleRow(BaseModel):
    Date: str
    Time: str
    Category: str
    Item: str


class ScheduleResponse(BaseModel):
    rows: list[ScheduleRow]
    count: int
    search: Optional[str] = None
