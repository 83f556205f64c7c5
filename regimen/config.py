"""
Regimen Plan — Configuration: paths, filter names, display labels.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with REGIMEN_DATA_DIR / REGIMEN_PLAN_FILE env vars
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("REGIMEN_DATA_DIR", str(Path.home() / "Regimen Plan")))
BASE_FOLDER = _data_dir
EXPORTS_FOLDER = _data_dir / "exports"
PLAN_FILE = Path(os.environ.get("REGIMEN_PLAN_FILE", str(_data_dir / "master_plan.json")))

# ---------------------------------------------------------------------------
# Filter values accepted alongside categories and periods
# ---------------------------------------------------------------------------
ALL_FILTER = "all"
DAILY_FILTER = "daily"

# ---------------------------------------------------------------------------
# Display labels (single display locale)
# ---------------------------------------------------------------------------
PERIOD_LABELS = {
    "morning": "Morning",
    "midday": "Midday",
    "night": "Night",
}

CATEGORY_LABELS = {
    "supplement": "Supplement",
    "hair": "Hair",
    "skin": "Skin",
}

TABLE_COLUMNS = ["Date", "Time", "Category", "Item"]

# Sunday-first week, as the calendar grid renders it
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
