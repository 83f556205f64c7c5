"""
DataStore — in-memory regimen engine.

Loaded once at startup, queried on every request. A reload builds a complete
new snapshot off to the side and then swaps it in, so readers always see
either the previous plan or the new one in full.
"""
from __future__ import annotations

import calendar
import datetime as dt
import logging
import threading
from pathlib import Path
from typing import Any, Iterable, Optional

import pandas as pd

from regimen.config import ALL_FILTER, DAILY_FILTER, CATEGORY_LABELS, PERIOD_LABELS, PLAN_FILE, TABLE_COLUMNS
from regimen.data import registry as _registry
from regimen.data.filters import filter_items
from regimen.data.loader import load_plan, rows_from_records
from regimen.data.normalize import items_by_category
from regimen.data.schedule import has_entries
from regimen.data.schemas import PERIODS, DaySchedule, ItemRecord, ItemView, Occurrence
from regimen.data.snapshot import RegimenSnapshot, build_snapshot

logger = logging.getLogger(__name__)


class DataStore:
    """Latest regimen snapshot with read-only accessors."""

    def __init__(self) -> None:
        self._snapshot = RegimenSnapshot.empty()
        self._load_lock = threading.Lock()
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, path: Path | str = PLAN_FILE) -> "DataStore":
        """Read the plan file and publish a fresh snapshot.

        On SourceUnavailable the current snapshot is left in place and the
        error propagates.
        """
        with self._load_lock:
            rows = load_plan(path)
            self._publish(build_snapshot(rows))
        return self

    def load_records(self, records: Iterable[Any]) -> "DataStore":
        """Publish a snapshot built from already-decoded row objects."""
        with self._load_lock:
            self._publish(build_snapshot(rows_from_records(records)))
        return self

    def _publish(self, snapshot: RegimenSnapshot) -> None:
        self._snapshot = snapshot
        self._loaded = True

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def snapshot(self) -> RegimenSnapshot:
        return self._snapshot

    # ------------------------------------------------------------------
    # Core accessors
    # ------------------------------------------------------------------

    def get_day_schedule(self, date: str) -> Optional[DaySchedule]:
        return self._snapshot.days.get(date)

    def get_item_list(self) -> tuple[ItemView, ...]:
        return self._snapshot.items

    def get_item(self, name: str) -> Optional[ItemRecord]:
        return _registry.lookup(self._snapshot.registry, name)

    def occurrences_of(self, name: str) -> tuple[Occurrence, ...]:
        return _registry.occurrences_of(self._snapshot.registry, name)

    def occurrence_count_of(self, name: str) -> int:
        return _registry.occurrence_count_of(self._snapshot.registry, name)

    def filtered_items(self, type_filter: str = ALL_FILTER, time_filter: str = ALL_FILTER) -> list[ItemView]:
        return filter_items(self._snapshot.items, type_filter, time_filter)

    def items_with_counts(
        self,
        type_filter: str = ALL_FILTER,
        time_filter: str = ALL_FILTER,
        snapshot: Optional[RegimenSnapshot] = None,
    ) -> list[tuple[ItemView, int]]:
        """Filtered items paired with their occurrence counts from one snapshot."""
        snap = self._snapshot if snapshot is None else snapshot
        return [
            (item, _registry.occurrence_count_of(snap.registry, item.name))
            for item in filter_items(snap.items, type_filter, time_filter)
        ]

    # ------------------------------------------------------------------
    # Calendar & day views
    # ------------------------------------------------------------------

    def dates(self) -> list[str]:
        """Dates with a schedule entry, sorted."""
        return sorted(self._snapshot.days)

    def month_calendar(self, year: int, month: int) -> list[dict]:
        """One cell per day of the month with the periods that have items.

        ``weekday`` counts from Sunday = 0, matching the grid layout.
        """
        days = self._snapshot.days
        _, days_in_month = calendar.monthrange(year, month)
        cells = []
        for d in range(1, days_in_month + 1):
            date = dt.date(year, month, d)
            key = date.isoformat()
            day = days.get(key)
            active = [p for p in PERIODS if day is not None and has_entries(day, p)]
            cells.append({
                "date": key,
                "day": d,
                "weekday": (date.weekday() + 1) % 7,
                "periods": active,
            })
        return cells

    def day_details(self, date: str) -> Optional[dict]:
        """Per-period item lists for a single day, or None if the date has no rows."""
        day = self.get_day_schedule(date)
        if day is None:
            return None
        slots = []
        for period in PERIODS:
            slot = day[period]
            slots.append({
                "period": period,
                "label": PERIOD_LABELS[period],
                "has_entries": has_entries(day, period),
                "items": slot.all_items(),
            })
        return {"date": date, "slots": slots}

    # ------------------------------------------------------------------
    # Full schedule table
    # ------------------------------------------------------------------

    def schedule_table(self, search: str | None = None, snapshot: Optional[RegimenSnapshot] = None) -> pd.DataFrame:
        """One row per scheduled item in plan order: Date, Time, Category, Item.

        ``search`` keeps rows where any single cell contains it, ignoring case.
        Cells are matched one at a time, so a query spanning two cells (say
        ``"08:00Supplement"``) matches nothing; a browser search over the
        row's joined text would match it.
        """
        snap = self._snapshot if snapshot is None else snapshot
        records = []
        for entry in snap.rows:
            for category, names in items_by_category(entry):
                label = CATEGORY_LABELS[category.value]
                for name in names:
                    records.append((entry.date, entry.time, label, name))
        df = pd.DataFrame.from_records(records, columns=TABLE_COLUMNS)

        if search and search.strip() and not df.empty:
            needle = search.strip().lower()
            mask = pd.Series(False, index=df.index)
            for col in TABLE_COLUMNS:
                mask |= df[col].str.lower().str.contains(needle, regex=False)
            df = df[mask].reset_index(drop=True)
        return df

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self._snapshot.rows)

    def summary(self, snapshot: Optional[RegimenSnapshot] = None) -> dict:
        # every figure comes from the same snapshot, even across a reload
        snap = self._snapshot if snapshot is None else snapshot
        by_category = {cat: 0 for cat in CATEGORY_LABELS}
        for item in snap.items:
            by_category[item.category.value] += 1
        dates = sorted(snap.days)
        return {
            "rows": len(snap.rows),
            "dates": len(dates),
            "first_date": dates[0] if dates else None,
            "last_date": dates[-1] if dates else None,
            "items": len(snap.items),
            "by_category": by_category,
            "daily_items": len(filter_items(snap.items, ALL_FILTER, DAILY_FILTER)),
        }
