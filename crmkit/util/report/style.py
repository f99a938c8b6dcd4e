"""Default style/layout constants for Excel reports.

Keep everything related to look-and-feel here so future formatting changes are localized.
"""

from __future__ import annotations

from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

# Reddish orange accent used by the CRM frontend theme.
COLOR_BRAND_ACCENT = "E4572E"

FONT_HEADER = Font(name="Arial", color="FFFFFF", bold=True, size=11)
FONT_BODY = Font(name="Arial", color="333333", size=11)

ALIGN_CENTER_WRAP = Alignment(horizontal="center", vertical="center", wrap_text=True)
ALIGN_LEFT_WRAP = Alignment(horizontal="left", vertical="top", wrap_text=True)

BORDER_THIN = Border(
    left=Side(style="thin", color="8A8A8A"),
    right=Side(style="thin", color="8A8A8A"),
    top=Side(style="thin", color="8A8A8A"),
    bottom=Side(style="thin", color="8A8A8A"),
)

MIN_COLUMN_WIDTH = 8.0
MAX_COLUMN_WIDTH = 80.0
ROW_HEIGHT_HEADER = 20.0


def style_header_row(ws: Worksheet, *, row: int = 1) -> None:
    """Apply the brand header look to every populated cell in ``row``."""

    fill = PatternFill("solid", fgColor=COLOR_BRAND_ACCENT)
    for cell in ws[row]:
        if cell.value is None:
            continue
        cell.font = FONT_HEADER
        cell.alignment = ALIGN_CENTER_WRAP
        cell.fill = fill
        cell.border = BORDER_THIN
    ws.row_dimensions[row].height = ROW_HEIGHT_HEADER


def style_body(ws: Worksheet, *, first_row: int = 2) -> None:
    for row in ws.iter_rows(min_row=first_row, max_row=ws.max_row):
        for cell in row:
            cell.font = FONT_BODY
            cell.alignment = ALIGN_LEFT_WRAP
            cell.border = BORDER_THIN


def autosize_columns(ws: Worksheet) -> None:
    """Size each column to its longest text, clamped to a readable range."""

    for index, column in enumerate(ws.iter_cols(min_row=1, max_row=ws.max_row), start=1):
        longest = max((len(str(cell.value)) for cell in column if cell.value is not None), default=0)
        width = min(MAX_COLUMN_WIDTH, max(MIN_COLUMN_WIDTH, longest + 2))
        ws.column_dimensions[get_column_letter(index)].width = width


def apply_table_style(ws: Worksheet) -> None:
    """Header + body styling, frozen header pane and column widths."""

    if ws.max_row < 1 or ws.cell(row=1, column=1).value is None:
        return
    style_header_row(ws)
    style_body(ws)
    autosize_columns(ws)
    ws.freeze_panes = "A2"
