"""Schemas and constants for Excel-based import/export.

Centralize sheet/column names so callers don't re-encode strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Tuple


MAX_EXCEL_CELL_TEXT_LEN: Final[int] = 32767

TICKETS_SHEET: Final[str] = "Tenders"
EMPLOYEES_SHEET: Final[str] = "Employees"
EMPLOYEES_TEMPLATE_SHEET: Final[str] = "EmployeesTemplate"


@dataclass(frozen=True)
class TicketColumns:
    """Display headers used by exported ticket workbooks."""

    DATE_OF_SERVICE: str = "Date of Service"
    SERIAL_TOKEN: str = "Serial Token / RFP Number"
    ALLOTTED_TO: str = "Whom it's allotted to"
    SOURCE: str = "Source"
    PRIORITY: str = "Priority"
    STATUS: str = "Status"
    CUSTOMER_ID: str = "Customer ID"
    CUSTOMER_NAME: str = "Customer Name"
    EMPLOYEE_ID: str = "Employee ID"
    EMPLOYEE_NAME: str = "Employee Name"
    LEAD_TITLE: str = "Lead Title"
    LEAD_DESCRIPTION: str = "Lead Description"
    ESTIMATED_VALUE: str = "Estimated Value (INR)"
    FOLLOW_UP_DATE: str = "Follow-up Date"


@dataclass(frozen=True)
class EmployeeColumns:
    EMPLOYEE_ID: str = "Employee ID"
    EMPLOYEE_NAME: str = "Employee Name"
    DESIGNATION: str = "Designation"
    EMAIL: str = "Email"
    MOBILE: str = "Mobile"
    DEPARTMENT: str = "Department"


TICKET_COLS: Final[TicketColumns] = TicketColumns()
EMPLOYEE_COLS: Final[EmployeeColumns] = EmployeeColumns()

# (record field, display header) in export order.
TICKET_EXPORT_COLUMNS: Final[Tuple[Tuple[str, str], ...]] = (
    ("date_of_service", TICKET_COLS.DATE_OF_SERVICE),
    ("serial_token", TICKET_COLS.SERIAL_TOKEN),
    ("allotted_to", TICKET_COLS.ALLOTTED_TO),
    ("source", TICKET_COLS.SOURCE),
    ("priority", TICKET_COLS.PRIORITY),
    ("status", TICKET_COLS.STATUS),
    ("customer_id", TICKET_COLS.CUSTOMER_ID),
    ("customer_name", TICKET_COLS.CUSTOMER_NAME),
    ("employee_id", TICKET_COLS.EMPLOYEE_ID),
    ("employee_name", TICKET_COLS.EMPLOYEE_NAME),
    ("lead_title", TICKET_COLS.LEAD_TITLE),
    ("lead_description", TICKET_COLS.LEAD_DESCRIPTION),
    ("estimated_value", TICKET_COLS.ESTIMATED_VALUE),
    ("follow_up_date", TICKET_COLS.FOLLOW_UP_DATE),
)

EMPLOYEE_EXPORT_COLUMNS: Final[Tuple[Tuple[str, str], ...]] = (
    ("employee_id", EMPLOYEE_COLS.EMPLOYEE_ID),
    ("employee_name", EMPLOYEE_COLS.EMPLOYEE_NAME),
    ("designation", EMPLOYEE_COLS.DESIGNATION),
    ("email", EMPLOYEE_COLS.EMAIL),
    ("mobile", EMPLOYEE_COLS.MOBILE),
    ("department", EMPLOYEE_COLS.DEPARTMENT),
)
