"""Core constants used across report builder modules.

This module centralizes format, layout, and rendering constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_OUTPUT_DIR = Path(".")
DEFAULT_MAX_UPLOAD_BYTES = 16 * 1024 * 1024
DEFAULT_CSV_ENCODING = "utf-8-sig"

STANDARD_FORMAT_NAME = "standard"
LAYOUT_FIELD_NAMES = (
    "goal_number",
    "indicator",
    "target_value",
    "current_value",
    "progress_status",
)
CSV_EXTENSION = "csv"
SPREADSHEET_EXTENSIONS = ("xls", "xlsx")
SUPPORTED_FILE_EXTENSIONS = (CSV_EXTENSION, *SPREADSHEET_EXTENSIONS)
MIN_ROW_CELL_COUNT = 5

DEFAULT_TEMPLATE_NAME = "basic"
SUPPORTED_TEMPLATE_NAMES = ("basic", "detailed", "executive")

REPORT_TITLE = "SDG Progress Report"
REPORT_AUTHOR = "SDGs report builder"
REPORT_FILE_NAME = "sdg_report.pdf"
REPORT_CONTENT_TYPE = "application/pdf"
REPORT_DATE_FORMAT = "%Y-%m-%d"

HIGH_BAND_THRESHOLD = 75.0
MEDIUM_BAND_THRESHOLD = 50.0
MAX_PROGRESS_PERCENT = 100.0

HIGH_BAND_COLOR = (76, 175, 80)
MEDIUM_BAND_COLOR = (255, 152, 0)
LOW_BAND_COLOR = (244, 67, 54)
PROGRESS_BAR_BACKGROUND = (240, 240, 240)

# Page geometry in millimetres, measured from the top-left corner.
PAGE_MARGIN_MM = 15.0
PROGRESS_BAR_WIDTH_MM = 180.0
PROGRESS_BAR_HEIGHT_MM = 10.0
LABEL_COLUMN_WIDTH_MM = 60.0
COVER_TITLE_HEIGHT_MM = 20.0
COVER_DATE_HEIGHT_MM = 10.0
GOAL_HEADER_HEIGHT_MM = 15.0
BODY_LINE_HEIGHT_MM = 10.0
SECTION_GAP_MM = 5.0
PROGRESS_BAR_GAP_MM = 10.0
PROGRESS_LABEL_OFFSET_MM = 15.0

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
COVER_TITLE_FONT_SIZE = 24
COVER_DATE_FONT_SIZE = 14
GOAL_HEADER_FONT_SIZE = 16
BODY_FONT_SIZE = 12
