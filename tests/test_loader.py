"""
Unit tests for plan file loading.
"""
import json

import pytest

from regimen.data.loader import SourceUnavailable, load_plan, rows_from_records
from regimen.data.schemas import RawEntry


class TestRowsFromRecords:

    def test_converts_mappings(self, plan_records):
        rows = rows_from_records(plan_records)
        assert len(rows) == len(plan_records)
        assert rows[0] == RawEntry(
            date="2024-01-03", time="08:00", period="morning",
            supplements="Vitamin D, Omega-3", hair_care="", skin_care="Sunscreen",
        )

    def test_skips_non_mappings(self, plan_records, caplog):
        rows = rows_from_records([plan_records[0], "oops", None, 42, plan_records[1]])
        assert [r.time for r in rows] == ["08:00", "13:00"]
        assert "Skipped 3 malformed plan records" in caplog.text

    def test_missing_keys_become_empty(self):
        (row,) = rows_from_records([{"supplements": "Zinc"}])
        assert row.date == ""
        assert row.period == ""
        assert row.hair_care is None


class TestLoadPlan:

    def test_loads_json(self, plan_file, plan_records):
        rows = load_plan(plan_file)
        assert len(rows) == len(plan_records)
        assert rows[2].supplements == "Magnesium, vitamin d "

    def test_loads_csv(self, tmp_path):
        path = tmp_path / "plan.csv"
        path.write_text(
            "date,time,period,supplements,hair_care,skin_care\n"
            '2024-01-03,08:00,morning,"Vitamin D, Omega-3",,Sunscreen\n'
        )
        (row,) = load_plan(path)
        assert row.date == "2024-01-03"
        assert row.supplements == "Vitamin D, Omega-3"
        assert row.hair_care == ""

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceUnavailable, match="not found"):
            load_plan(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "master_plan.json"
        path.write_text("[{not json")
        with pytest.raises(SourceUnavailable, match="not valid JSON"):
            load_plan(path)

    def test_top_level_must_be_a_list(self, tmp_path):
        path = tmp_path / "master_plan.json"
        path.write_text(json.dumps({"date": "2024-01-03"}))
        with pytest.raises(SourceUnavailable, match="JSON array"):
            load_plan(path)

    def test_csv_without_required_columns(self, tmp_path):
        path = tmp_path / "plan.csv"
        path.write_text("when,what\n2024-01-03,Zinc\n")
        with pytest.raises(SourceUnavailable, match="missing column"):
            load_plan(path)
