"""
Shared pytest fixtures for the regimen test suite.
"""
import json

import pytest

from regimen.data.loader import rows_from_records
from regimen.data.store import DataStore


PLAN_RECORDS = [
    {"date": "2024-01-03", "time": "08:00", "period": "morning",
     "supplements": "Vitamin D, Omega-3", "hair_care": "", "skin_care": "Sunscreen"},
    {"date": "2024-01-03", "time": "13:00", "period": "midday",
     "supplements": "Vitamin D", "hair_care": "", "skin_care": ""},
    {"date": "2024-01-03", "time": "21:00", "period": "night",
     "supplements": "Magnesium, vitamin d ", "hair_care": "Rosemary Oil", "skin_care": "Retinol"},
    {"date": "2024-01-04", "time": "08:00", "period": "morning",
     "supplements": "Omega-3", "hair_care": "", "skin_care": "Sunscreen"},
    {"date": "2024-01-04", "time": "21:00", "period": "night",
     "supplements": "", "hair_care": "Rosemary Oil", "skin_care": ""},
]


@pytest.fixture
def plan_records():
    """Return a fresh copy of the sample plan rows."""
    return [dict(r) for r in PLAN_RECORDS]


@pytest.fixture
def plan_rows(plan_records):
    return rows_from_records(plan_records)


@pytest.fixture
def make_rows():
    """
    Return a function that builds RawEntry rows from partial dicts.

    Example:
        rows = make_rows({"supplements": "Zinc"}, {"period": "night"})
    """

    def _make_rows(*partials):
        defaults = {
            "date": "2024-02-01",
            "time": "08:00",
            "period": "morning",
            "supplements": "",
            "hair_care": "",
            "skin_care": "",
        }
        return rows_from_records([{**defaults, **p} for p in partials])

    return _make_rows


@pytest.fixture
def store(plan_records):
    return DataStore().load_records(plan_records)


@pytest.fixture
def plan_file(tmp_path, plan_records):
    path = tmp_path / "master_plan.json"
    path.write_text(json.dumps(plan_records))
    return path
