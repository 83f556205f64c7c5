"""
Plan file loading: JSON (the normal source) or CSV exports of the same rows.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from regimen.config import PLAN_FILE
from regimen.data.schemas import CATEGORY_FIELDS, RawEntry

logger = logging.getLogger(__name__)

PLAN_COLUMNS = ["date", "time", "period", *CATEGORY_FIELDS.values()]


class SourceUnavailable(Exception):
    """The plan file could not be read or decoded. Nothing was loaded."""


# ---------------------------------------------------------------------------
# Record conversion
# ---------------------------------------------------------------------------

def rows_from_records(records: Iterable[Any]) -> list[RawEntry]:
    """Convert decoded records to RawEntry, skipping anything that isn't a mapping."""
    rows: list[RawEntry] = []
    skipped = 0
    for idx, record in enumerate(records):
        if not isinstance(record, dict):
            skipped += 1
            logger.warning("Skipping plan record %d: expected an object, got %s", idx, type(record).__name__)
            continue
        rows.append(RawEntry.from_mapping(record))
    if skipped:
        logger.warning("Skipped %d malformed plan records", skipped)
    return rows


# ---------------------------------------------------------------------------
# File readers
# ---------------------------------------------------------------------------

def _read_json(filepath: Path) -> list:
    try:
        data = json.loads(filepath.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailable(f"Cannot read {filepath}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SourceUnavailable(f"{filepath.name} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise SourceUnavailable(f"{filepath.name} must contain a JSON array of rows")
    return data


def _read_csv(filepath: Path) -> list:
    """Read a spreadsheet export of the plan; every column as text."""
    try:
        df = pd.read_csv(filepath, dtype=str, keep_default_na=False)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
        raise SourceUnavailable(f"Cannot read {filepath}: {exc}") from exc
    except pd.errors.EmptyDataError:
        return []
    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in ("date", "period") if c not in df.columns]
    if missing:
        raise SourceUnavailable(f"{filepath.name} is missing column(s): {', '.join(missing)}")
    usecols = [c for c in PLAN_COLUMNS if c in df.columns]
    return df[usecols].to_dict("records")


def load_plan(path: Path | str = PLAN_FILE) -> list[RawEntry]:
    """Load every row of a plan file.

    Raises SourceUnavailable when the file is missing or cannot be decoded.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise SourceUnavailable(f"Plan file not found: {filepath}")

    if filepath.suffix.lower() == ".csv":
        records = _read_csv(filepath)
    else:
        records = _read_json(filepath)

    rows = rows_from_records(records)
    logger.info("Loaded %d rows from %s", len(rows), filepath.name)
    return rows
