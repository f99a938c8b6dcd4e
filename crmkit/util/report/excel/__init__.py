"""Excel-focused utilities for ticket and employee workbooks."""

from .common import list_sheet_names
from .records import (
    read_employees,
    read_tickets,
    write_employee_template,
    write_employees,
    write_tickets,
)
from .schemas import EMPLOYEE_COLS, MAX_EXCEL_CELL_TEXT_LEN, TICKET_COLS

__all__ = [
    "EMPLOYEE_COLS",
    "MAX_EXCEL_CELL_TEXT_LEN",
    "TICKET_COLS",
    "list_sheet_names",
    "read_employees",
    "read_tickets",
    "write_employee_template",
    "write_employees",
    "write_tickets",
]
