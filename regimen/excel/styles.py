"""
Workbook palette: one fill per period and per category, plus the chrome.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------
PLAN_TEAL = "00796B"
DARK_TEAL = "004D40"
GRAY_666 = "666666"
RULE_GRAY = "CCCCCC"

MORNING_AMBER = "FFE0B2"
MIDDAY_SKY = "B3E5FC"
NIGHT_LAVENDER = "D1C4E9"
OTHER_PERIOD_GRAY = "E0E0E0"

SUPPLEMENT_GREEN = "DCEDC8"
HAIR_ROSE = "F8BBD0"
SKIN_PEACH = "FFCCBC"

DATE_BAND = "F1F8F7"


def _solid(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=22, bold=True, color=DARK_TEAL)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=GRAY_666)
SECTION_FONT = Font(name="Calibri", size=13, bold=True, color=DARK_TEAL)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color="FFFFFF")
DATA_FONT = Font(name="Calibri", size=10)
DAILY_FONT = Font(name="Calibri", size=10, bold=True, color=DARK_TEAL)
MARK_FONT = Font(name="Calibri", size=12, color=DARK_TEAL)
KPI_VALUE_FONT = Font(name="Calibri", size=26, bold=True, color=PLAN_TEAL)
KPI_LABEL_FONT = Font(name="Calibri", size=9, color=GRAY_666)

# ---------------------------------------------------------------------------
# Fills: period marks, category cells, alternating date bands
# ---------------------------------------------------------------------------
HEADER_FILL = _solid(DARK_TEAL)
DATE_BAND_FILL = _solid(DATE_BAND)

PERIOD_FILLS = {
    "morning": _solid(MORNING_AMBER),
    "midday": _solid(MIDDAY_SKY),
    "night": _solid(NIGHT_LAVENDER),
}
OTHER_PERIOD_FILL = _solid(OTHER_PERIOD_GRAY)

CATEGORY_FILLS = {
    "supplement": _solid(SUPPLEMENT_GREEN),
    "hair": _solid(HAIR_ROSE),
    "skin": _solid(SKIN_PEACH),
}

# ---------------------------------------------------------------------------
# Borders & alignment
# ---------------------------------------------------------------------------
_rule = Side(style="thin", color=RULE_GRAY)
CELL_BORDER = Border(left=_rule, right=_rule, top=_rule, bottom=_rule)
HEADER_BORDER = Border(bottom=Side(style="medium", color=PLAN_TEAL))

CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")
