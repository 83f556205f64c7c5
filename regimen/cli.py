#!/usr/bin/env python3
"""
Regimen Plan CLI — inspect the plan, export it, or run the API server.

USAGE:
  python -m regimen.cli items                               # All unique items
  python -m regimen.cli items --type supplement --time daily
  python -m regimen.cli items --occurrences "Vitamin D"     # Every date/time for one item

  python -m regimen.cli day 2024-01-03                      # One day's schedule
  python -m regimen.cli calendar --year 2024 --month 1      # Month activity grid

  python -m regimen.cli table                               # Full schedule
  python -m regimen.cli table --search omega

  python -m regimen.cli export                              # Excel workbook to exports/
  python -m regimen.cli serve --port 8000                   # Start API server
"""
from __future__ import annotations

import argparse
import datetime as dt
import logging
import os
import sys
from pathlib import Path

from regimen.config import (
    ALL_FILTER, CATEGORY_LABELS, DAILY_FILTER, EXPORTS_FOLDER, PERIOD_LABELS, PLAN_FILE, WEEKDAY_LABELS,
)
from regimen.data.loader import SourceUnavailable
from regimen.data.schemas import PERIODS, Category
from regimen.data.store import DataStore


def _year(value: str) -> int:
    year = int(value)
    if not dt.MINYEAR <= year <= dt.MAXYEAR:
        raise argparse.ArgumentTypeError(f"year must be {dt.MINYEAR}-{dt.MAXYEAR}, got {year}")
    return year


def _load(args) -> DataStore:
    """Load the plan or exit with the loader's message."""
    try:
        return DataStore().load(args.plan)
    except SourceUnavailable as exc:
        print(f"  Could not load plan: {exc}", file=sys.stderr)
        sys.exit(1)


def _header(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  REGIMEN PLAN — {title}")
    print("=" * 70)


def cmd_items(args):
    """List unique items, optionally filtered, or one item's occurrences."""
    store = _load(args)

    if args.occurrences:
        record = store.get_item(args.occurrences)
        if record is None:
            print(f"  Item not found: '{args.occurrences}'")
            return
        _header(record.display_name.upper())
        print(f"\n  {CATEGORY_LABELS[record.category.value]}  |  {record.occurrence_count} occasions\n")
        for occ in record.occurrences:
            print(f"    {occ.date}  {occ.time}")
        print()
        return

    _header("ITEMS")
    items = store.filtered_items(args.type, args.time)
    print(f"\n  {len(items)} item(s)  |  type: {args.type}  |  time: {args.time}\n")
    for item in items:
        periods = ", ".join(PERIOD_LABELS.get(p, p or "?") for p in item.periods)
        count = store.occurrence_count_of(item.name)
        print(f"  {item.name[:36]:<38}{CATEGORY_LABELS[item.category.value]:<12}{periods:<28}{count:>5}")
    print()


def cmd_day(args):
    """Show every period of one day."""
    store = _load(args)
    details = store.day_details(args.date)
    _header(args.date)
    if details is None:
        print("\n  No entries.\n")
        return
    for slot in details["slots"]:
        print(f"\n  {slot['label']}")
        if not slot["has_entries"]:
            print("    —")
            continue
        for item in slot["items"]:
            print(f"    - {item}")
    print()


def cmd_calendar(args):
    """Print a month grid with M/D/N marks for periods that have items."""
    store = _load(args)
    today = dt.date.today()
    year = args.year or today.year
    month = args.month or today.month
    cells = store.month_calendar(year, month)

    _header(f"{dt.date(year, month, 1):%B %Y}".upper())
    print("\n  " + "".join(f"{d:<8}" for d in WEEKDAY_LABELS))
    line = "  " + " " * 8 * cells[0]["weekday"]
    for cell in cells:
        marks = "".join(p[0].upper() for p in cell["periods"])
        line += f"{cell['day']:>2} {marks:<5}"
        if cell["weekday"] == 6:
            print(line)
            line = "  "
    if line.strip():
        print(line)
    print()


def cmd_table(args):
    """Print the full schedule table, optionally searched."""
    store = _load(args)
    df = store.schedule_table(args.search)
    _header("FULL SCHEDULE")
    if df.empty:
        print("\n  No matching rows.\n")
        return
    print()
    print(df.to_string(index=False))
    print(f"\n  {len(df):,} row(s)\n")


def cmd_export(args):
    """Write the Excel workbook."""
    from regimen.reports.schedule_report import generate_excel

    store = _load(args)
    out = Path(args.output) if args.output else EXPORTS_FOLDER / "Regimen_Plan.xlsx"
    path = generate_excel(store, out)
    print(f"\nWorkbook saved to: {path}\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Regimen Plan API on port {args.port}...")
    uvicorn.run("regimen.main:app", host="0.0.0.0", port=args.port, reload=args.reload)


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Regimen Plan — daily supplement, hair and skin care schedule",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--plan", default=str(PLAN_FILE), help="Plan file (.json or .csv)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine details")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    items_parser = subparsers.add_parser("items", help="List unique items")
    items_parser.add_argument("--type", default=ALL_FILTER,
                              choices=[ALL_FILTER] + [c.value for c in Category], help="Category filter")
    items_parser.add_argument("--time", default=ALL_FILTER,
                              choices=[ALL_FILTER, DAILY_FILTER, *PERIODS], help="Time filter")
    items_parser.add_argument("--occurrences", metavar="NAME", help="Show every occurrence of one item")
    items_parser.set_defaults(func=cmd_items)

    day_parser = subparsers.add_parser("day", help="Show one day")
    day_parser.add_argument("date", help="YYYY-MM-DD")
    day_parser.set_defaults(func=cmd_day)

    cal_parser = subparsers.add_parser("calendar", help="Month activity grid")
    cal_parser.add_argument("--year", type=_year, help="Year (1-9999)")
    cal_parser.add_argument("--month", type=int, choices=range(1, 13), metavar="MONTH", help="Month (1-12)")
    cal_parser.set_defaults(func=cmd_calendar)

    table_parser = subparsers.add_parser("table", help="Full schedule table")
    table_parser.add_argument("--search", help="Case-insensitive text filter")
    table_parser.set_defaults(func=cmd_table)

    export_parser = subparsers.add_parser("export", help="Export Excel workbook")
    export_parser.add_argument("--output", help="Output .xlsx path")
    export_parser.set_defaults(func=cmd_export)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
