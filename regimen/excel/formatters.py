"""
Cell-level helpers for regimen sheets.
"""
from __future__ import annotations

from typing import Iterable

from openpyxl.cell.cell import Cell
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from regimen.excel.styles import (
    CATEGORY_FILLS, OTHER_PERIOD_FILL, PERIOD_FILLS,
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, MARK_FONT, CELL_BORDER,
    KPI_VALUE_FONT, KPI_LABEL_FONT,
    CENTER, LEFT, RIGHT,
)

PERIOD_MARK = "●"


def period_fill(period: str) -> PatternFill:
    """Known periods get their own colour; literal periods share a gray."""
    return PERIOD_FILLS.get(period, OTHER_PERIOD_FILL)


def category_fill(category: str) -> PatternFill | None:
    return CATEGORY_FILLS.get(category)


def write_header(ws: Worksheet, row: int, labels: Iterable[str]) -> int:
    """Write a styled header row; returns the number of columns."""
    col = 0
    for col, label in enumerate(labels, 1):
        cell = ws.cell(row=row, column=col, value=label)
        cell.font, cell.fill = HEADER_FONT, HEADER_FILL
        cell.alignment, cell.border = CENTER, HEADER_BORDER
    return col


def write_cell(
    ws: Worksheet,
    row: int,
    col: int,
    value,
    fill: PatternFill | None = None,
    font: Font = DATA_FONT,
    count: bool = False,
) -> Cell:
    """Plain data cell. ``count`` right-aligns with a thousands separator."""
    cell = ws.cell(row=row, column=col, value=value)
    cell.font = font
    cell.border = CELL_BORDER
    if count:
        cell.alignment = RIGHT
        cell.number_format = "#,##0"
    else:
        cell.alignment = LEFT
    if fill is not None:
        cell.fill = fill
    return cell


def write_period_mark(ws: Worksheet, row: int, col: int, period: str, present: bool) -> Cell:
    """A coloured dot when the item is taken in ``period``, blank otherwise."""
    cell = ws.cell(row=row, column=col, value=PERIOD_MARK if present else None)
    cell.border = CELL_BORDER
    cell.alignment = CENTER
    if present:
        cell.font = MARK_FONT
        cell.fill = period_fill(period)
    return cell


def fit_columns(ws: Worksheet, floor: int = 8, ceiling: int = 48) -> None:
    for column in ws.iter_cols():
        longest = max((len(str(c.value)) for c in column if c.value is not None), default=0)
        ws.column_dimensions[get_column_letter(column[0].column)].width = min(max(longest + 2, floor), ceiling)


def write_kpi(ws: Worksheet, row: int, col: int, value: int, label: str) -> None:
    """Large count with a caption underneath."""
    top = ws.cell(row=row, column=col, value=value)
    top.font, top.alignment, top.number_format = KPI_VALUE_FONT, CENTER, "#,##0"
    caption = ws.cell(row=row + 1, column=col, value=label)
    caption.font, caption.alignment = KPI_LABEL_FONT, CENTER
