"""Excel styling and workbook building for the regimen export."""
from .formatters import write_header, write_cell, write_period_mark, fit_columns, write_kpi
from .writer import PlanWorkbook
