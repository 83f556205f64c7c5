"""
Schedule indexer — date → period → category buckets.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from regimen.data.normalize import items_by_category
from regimen.data.schemas import (
    CATEGORY_BUCKETS, PERIODS, Category, DaySchedule, RawEntry, SlotBuckets, period_sort_key,
)

logger = logging.getLogger(__name__)

# Mutable working shape: date → period → bucket name → names
WorkingSchedule = dict[str, dict[str, dict[str, list[str]]]]


def _empty_slot() -> dict[str, list[str]]:
    return {bucket: [] for bucket in CATEGORY_BUCKETS.values()}


def _empty_day() -> dict[str, dict[str, list[str]]]:
    return {period: _empty_slot() for period in PERIODS}


def fold_row(
    working: WorkingSchedule,
    entry: RawEntry,
    extracted: list[tuple[Category, list[str]]],
) -> None:
    """Append one row's items into its (date, period) slot.

    The date gets all three periods with empty buckets before anything is
    appended. A period outside the known three gets its own slot under the
    literal value.
    """
    day = working.get(entry.date)
    if day is None:
        day = working[entry.date] = _empty_day()
    slot = day.get(entry.period)
    if slot is None:
        logger.debug("Unrecognized period %r on %s, bucketing as-is", entry.period, entry.date)
        slot = day[entry.period] = _empty_slot()
    for category, names in extracted:
        slot[CATEGORY_BUCKETS[category]].extend(names)


def freeze(working: WorkingSchedule) -> Mapping[str, DaySchedule]:
    """Turn the working dicts into read-only mappings of SlotBuckets."""
    frozen = {}
    for date, day in working.items():
        slots = {
            period: SlotBuckets(**{bucket: tuple(names) for bucket, names in day[period].items()})
            for period in sorted(day, key=period_sort_key)
        }
        frozen[date] = MappingProxyType(slots)
    return MappingProxyType(frozen)


def index_by_date(rows: Iterable[RawEntry]) -> Mapping[str, DaySchedule]:
    """Build the date-bucketed schedule for a full set of rows."""
    working: WorkingSchedule = {}
    for entry in rows:
        fold_row(working, entry, items_by_category(entry))
    return freeze(working)


def has_entries(day: DaySchedule, period: str) -> bool:
    """True when any category bucket of ``period`` on this day has items."""
    slot = day.get(period)
    if slot is None:
        return False
    return not slot.is_empty
