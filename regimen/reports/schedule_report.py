"""
Regimen Report — overview KPIs, item catalog, and the full dated schedule.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from regimen.config import CATEGORY_LABELS, DAILY_FILTER
from regimen.data.filters import matches
from regimen.data.store import DataStore
from regimen.excel.writer import PlanWorkbook, period_label


def _collect(store: DataStore):
    """Summary, counted items and schedule table, all from one snapshot."""
    snap = store.snapshot
    return (
        store.summary(snapshot=snap),
        store.items_with_counts(snapshot=snap),
        store.schedule_table(snapshot=snap),
    )


def generate_json(store: DataStore) -> dict:
    summary, counted, table = _collect(store)
    items = [
        {
            "name": item.name,
            "category": CATEGORY_LABELS[item.category.value],
            "periods": ", ".join(period_label(p) for p in item.periods),
            "occurrences": count,
            "daily": matches(item, time_filter=DAILY_FILTER),
        }
        for item, count in counted
    ]
    return {"summary": summary, "items": items, "schedule": table.to_dict("records")}


def generate_excel(store: DataStore, output_path: str | Path) -> Path:
    s, counted, table = _collect(store)
    book = PlanWorkbook()

    ws = book.add_sheet("Overview")
    date_range = f"{s['first_date']} to {s['last_date']}" if s["first_date"] else "No dates"
    book.write_title(ws, "REGIMEN PLAN",
                     f"{date_range}  |  Generated {pd.Timestamp.now():%B %d, %Y}")

    row = book.write_section(ws, 5, "PLAN OVERVIEW")
    row = book.write_kpis(ws, row, [
        (s["dates"], "DAYS PLANNED"),
        (s["rows"], "SCHEDULE SLOTS"),
        (s["items"], "UNIQUE ITEMS"),
        (s["daily_items"], "EVERY PERIOD"),
    ])

    row = book.write_section(ws, row, "ITEMS BY CATEGORY")
    book.write_kpis(ws, row, [
        (count, CATEGORY_LABELS[cat].upper()) for cat, count in s["by_category"].items()
    ])

    book.write_item_catalog(book.add_sheet("Items"), 1, counted)
    book.write_schedule(book.add_sheet("Full Schedule"), 1, table)

    return book.save(output_path)
