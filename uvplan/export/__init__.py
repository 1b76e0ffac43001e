from uvplan.export.errors import ExportError
from uvplan.export.text_report import build_calculation_report, write_calculation_report
from uvplan.export.tech_sheet import tech_sheet_text, write_tech_sheet
from uvplan.export.csv_export import calculations_csv, write_calculations_csv

__all__ = [
    "ExportError",
    "build_calculation_report",
    "write_calculation_report",
    "tech_sheet_text",
    "write_tech_sheet",
    "calculations_csv",
    "write_calculations_csv",
]
