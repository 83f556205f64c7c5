"""
Tests for the regimen workbook report.
"""
from openpyxl import load_workbook

import regimen.data.store as store_module
from regimen.data.store import DataStore
from regimen.excel.styles import MIDDAY_SKY, SKIN_PEACH, SUPPLEMENT_GREEN
from regimen.reports import schedule_report


def test_generate_json(store):
    data = schedule_report.generate_json(store)
    assert data["summary"]["items"] == 6
    vit_d = data["items"][0]
    assert vit_d == {
        "name": "Vitamin D",
        "category": "Supplement",
        "periods": "Morning, Midday, Night",
        "occurrences": 3,
        "daily": True,
    }
    assert len(data["schedule"]) == 11


def test_generate_json_survives_reload_mid_report(store, monkeypatch):
    real = store_module.filter_items
    fired = []

    def reload_then_filter(*args, **kwargs):
        if not fired:
            fired.append(True)
            store.load_records([{"date": "2024-03-01", "period": "night", "skin_care": "Aloe"}])
        return real(*args, **kwargs)

    monkeypatch.setattr(store_module, "filter_items", reload_then_filter)

    data = schedule_report.generate_json(store)
    assert data["summary"]["items"] == len(data["items"]) == 6
    assert sum(i["occurrences"] for i in data["items"]) == len(data["schedule"]) == 11
    assert store.row_count() == 1


class TestWorkbook:

    def test_sheets(self, store, tmp_path):
        path = schedule_report.generate_excel(store, tmp_path / "out" / "plan.xlsx")
        assert path.exists()
        assert load_workbook(path).sheetnames == ["Overview", "Items", "Full Schedule"]

    def test_item_catalog_marks_periods(self, store, tmp_path):
        wb = load_workbook(schedule_report.generate_excel(store, tmp_path / "plan.xlsx"))
        items = wb["Items"]
        assert [c.value for c in items[1]] == ["Item", "Category", "Morning", "Midday", "Night", "Occurrences"]
        assert [c.value for c in items[2]] == ["Vitamin D", "Supplement", "●", "●", "●", 3]
        assert items["A2"].font.b
        assert items["B2"].fill.fgColor.rgb.endswith(SUPPLEMENT_GREEN)
        assert items["D2"].fill.fgColor.rgb.endswith(MIDDAY_SKY)

        sunscreen = [c.value for c in items[4]]
        assert sunscreen == ["Sunscreen", "Skin", "●", None, None, 2]
        assert not items["A4"].font.b
        assert items["B4"].fill.fgColor.rgb.endswith(SKIN_PEACH)

    def test_literal_period_gets_own_column(self, tmp_path):
        store = DataStore().load_records([
            {"date": "2024-02-01", "period": "morning", "supplements": "Zinc"},
            {"date": "2024-02-01", "period": "bedtime", "supplements": "Zinc"},
        ])
        wb = load_workbook(schedule_report.generate_excel(store, tmp_path / "plan.xlsx"))
        items = wb["Items"]
        assert [c.value for c in items[1]] == [
            "Item", "Category", "Morning", "Midday", "Night", "bedtime", "Occurrences",
        ]
        assert [c.value for c in items[2]] == ["Zinc", "Supplement", "●", None, None, "●", 2]

    def test_full_schedule(self, store, tmp_path):
        wb = load_workbook(schedule_report.generate_excel(store, tmp_path / "plan.xlsx"))
        sched = wb["Full Schedule"]
        assert sched.max_row == 12
        assert [c.value for c in sched[1]] == ["Date", "Time", "Category", "Item"]
        assert [c.value for c in sched[2]] == ["2024-01-03", "08:00", "Supplement", "Vitamin D"]
        assert sched["C4"].fill.fgColor.rgb.endswith(SKIN_PEACH)
