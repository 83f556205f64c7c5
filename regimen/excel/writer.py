"""
PlanWorkbook — builds the styled regimen workbook sheet by sheet.

Items are laid out one row each with a coloured mark per period; the dated
schedule is banded by day and tinted by category.
"""
from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from regimen.config import CATEGORY_LABELS, DAILY_FILTER, PERIOD_LABELS, TABLE_COLUMNS
from regimen.data.filters import matches
from regimen.data.schemas import PERIODS, ItemView, period_sort_key
from regimen.excel.styles import DAILY_FONT, DATA_FONT, DATE_BAND_FILL, SECTION_FONT, SUBTITLE_FONT, TITLE_FONT
from regimen.excel.formatters import (
    category_fill,
    fit_columns,
    write_cell,
    write_header,
    write_kpi,
    write_period_mark,
)

_CATEGORY_BY_LABEL = {label: key for key, label in CATEGORY_LABELS.items()}


def period_label(period: str) -> str:
    return PERIOD_LABELS.get(period, period or "(none)")


class PlanWorkbook:
    """Thin wrapper over an openpyxl Workbook with regimen-shaped sheets."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._fresh = True

    def add_sheet(self, title: str) -> Worksheet:
        # openpyxl starts with one empty sheet; use it for the first title
        if self._fresh:
            self._fresh = False
            ws = self.wb.active
            ws.title = title
            return ws
        return self.wb.create_sheet(title=title)

    # ------------------------------------------------------------------
    # Overview blocks
    # ------------------------------------------------------------------

    def write_title(self, ws: Worksheet, title: str, subtitle: str, span: int = 8) -> int:
        """Title and subtitle across ``span`` columns; returns the next free row."""
        for row, (text, font) in enumerate(((title, TITLE_FONT), (subtitle, SUBTITLE_FONT)), 1):
            ws.cell(row=row, column=1, value=text).font = font
            ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=span)
        return 4

    def write_section(self, ws: Worksheet, row: int, title: str) -> int:
        ws.cell(row=row, column=1, value=title).font = SECTION_FONT
        return row + 2

    def write_kpis(self, ws: Worksheet, row: int, cards: Sequence[tuple[int, str]], gap: int = 2) -> int:
        """One (count, caption) card every ``gap`` columns; returns the next free row."""
        for i, (value, caption) in enumerate(cards):
            write_kpi(ws, row, 1 + i * gap, value, caption)
        return row + 3

    # ------------------------------------------------------------------
    # Item catalog
    # ------------------------------------------------------------------

    def write_item_catalog(
        self,
        ws: Worksheet,
        start_row: int,
        items: Sequence[tuple[ItemView, int]],
    ) -> int:
        """Item, Category, one mark column per period, Occurrences.

        Periods outside morning/midday/night get their own trailing columns.
        Items taken in every period are set in bold.
        """
        extra = sorted({p for item, _ in items for p in item.periods if p not in PERIODS}, key=period_sort_key)
        periods = [*PERIODS, *extra]
        labels = ["Item", "Category", *(period_label(p) for p in periods), "Occurrences"]
        width = write_header(ws, start_row, labels)

        row = start_row + 1
        for item, count in items:
            daily = matches(item, time_filter=DAILY_FILTER)
            category = item.category.value
            write_cell(ws, row, 1, item.name, font=DAILY_FONT if daily else DATA_FONT)
            write_cell(ws, row, 2, CATEGORY_LABELS[category], fill=category_fill(category))
            for col, period in enumerate(periods, 3):
                write_period_mark(ws, row, col, period, period in item.periods)
            write_cell(ws, row, width, count, count=True)
            row += 1

        fit_columns(ws)
        ws.freeze_panes = ws.cell(row=start_row + 1, column=2)
        return row

    # ------------------------------------------------------------------
    # Dated schedule
    # ------------------------------------------------------------------

    def write_schedule(self, ws: Worksheet, start_row: int, table: pd.DataFrame) -> int:
        """Date, Time, Category, Item rows; consecutive days alternate shading."""
        write_header(ws, start_row, TABLE_COLUMNS)

        row = start_row + 1
        banded, last_date = True, None
        for date, time, category_label, name in table[TABLE_COLUMNS].itertuples(index=False):
            if date != last_date:
                banded, last_date = not banded, date
            band = DATE_BAND_FILL if banded else None
            write_cell(ws, row, 1, date, fill=band)
            write_cell(ws, row, 2, time, fill=band)
            write_cell(ws, row, 3, category_label, fill=category_fill(_CATEGORY_BY_LABEL.get(category_label, "")))
            write_cell(ws, row, 4, name, fill=band)
            row += 1

        fit_columns(ws)
        ws.freeze_panes = f"A{start_row + 1}"
        return row

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path
