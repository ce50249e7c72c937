"""
Workbook colors, fonts, fills, borders and alignments in one place.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Color constants (dashboard palette)
# ---------------------------------------------------------------------------
SLATE_900 = "0F172A"
SLATE_500 = "64748B"
SLATE_100 = "F1F5F9"
BLUE = "3B82F6"
LIGHT_BLUE = "DBEAFE"
WHITE = "FFFFFF"
BLACK = "000000"
RED = "EF4444"
LIGHT_RED = "FEE2E2"
YELLOW = "EAB308"
LIGHT_YELLOW = "FEF9C3"
GREEN = "10B981"
LIGHT_GREEN = "D1FAE5"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=22, bold=True, color=SLATE_900)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=SLATE_500)
SECTION_FONT = Font(name="Calibri", size=13, bold=True, color=BLUE)
HEADER_FONT = Font(name="Calibri", size=10, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
TOTAL_FONT = Font(name="Calibri", size=10, bold=True, color=BLACK)
KPI_VALUE_FONT = Font(name="Calibri", size=22, bold=True, color=SLATE_900)
KPI_LABEL_FONT = Font(name="Calibri", size=9, color=SLATE_500)
EMPTY_FONT = Font(name="Calibri", size=10, italic=True, color=SLATE_500)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=SLATE_900, end_color=SLATE_900, fill_type="solid")
ALTERNATE_FILL = PatternFill(start_color=SLATE_100, end_color=SLATE_100, fill_type="solid")
TOTAL_FILL = PatternFill(start_color=LIGHT_BLUE, end_color=LIGHT_BLUE, fill_type="solid")
HIGH_RISK_FILL = PatternFill(start_color=LIGHT_RED, end_color=LIGHT_RED, fill_type="solid")
WARNING_FILL = PatternFill(start_color=LIGHT_YELLOW, end_color=LIGHT_YELLOW, fill_type="solid")
OK_FILL = PatternFill(start_color=LIGHT_GREEN, end_color=LIGHT_GREEN, fill_type="solid")

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
THIN_BORDER = Border(
    left=Side(style="thin", color="CBD5E1"),
    right=Side(style="thin", color="CBD5E1"),
    top=Side(style="thin", color="CBD5E1"),
    bottom=Side(style="thin", color="CBD5E1"),
)
HEADER_BORDER = Border(
    left=Side(style="thin", color=SLATE_900),
    right=Side(style="thin", color=SLATE_900),
    top=Side(style="thin", color=SLATE_900),
    bottom=Side(style="medium", color=BLUE),
)
TOTAL_BORDER = Border(
    left=Side(style="thin", color="94A3B8"),
    right=Side(style="thin", color="94A3B8"),
    top=Side(style="medium", color="94A3B8"),
    bottom=Side(style="medium", color="94A3B8"),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")

# ---------------------------------------------------------------------------
# Highlight name → fill (chargeback risk labels)
# ---------------------------------------------------------------------------
HIGHLIGHT_FILLS = {
    "high": HIGH_RISK_FILL,
    "warning": WARNING_FILL,
    "ok": OK_FILL,
}

# Excel number formats per column type
NUMBER_FORMATS = {
    "currency": '"€"#,##0.00',
    "number": "#,##0",
    "decimal": "0.0",
    "decimal2": "0.00",
    "percent": '0"%"',
    "ratio": "0.000",
}

NUMERIC_TYPES = set(NUMBER_FORMATS)
