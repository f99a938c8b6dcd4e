"""Ticket and employee workbook import/export.

Imports accept loosely named headers (``Serial No``, ``RFP``, ``Assignee`` ...)
and coerce priority/status/date values; exports always use the canonical
display headers from :mod:`crmkit.util.report.excel.schemas`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence

from crmkit.tools.tickets.model import Employee, Ticket, coerce_priority, coerce_status
from crmkit.util.report.builder import write_workbook
from crmkit.util.report.excel.common import cell_text, read_sheet_rows, records_from_rows, to_iso_date
from crmkit.util.report.excel.schemas import (
    EMPLOYEE_EXPORT_COLUMNS,
    EMPLOYEES_SHEET,
    EMPLOYEES_TEMPLATE_SHEET,
    MAX_EXCEL_CELL_TEXT_LEN,
    TICKET_EXPORT_COLUMNS,
    TICKETS_SHEET,
)
from crmkit.util.report.model import SheetSpec, WorkbookSpec

LOGGER = logging.getLogger(__name__)

_TICKET_DATE_FIELDS = frozenset({"date_of_service", "follow_up_date"})


def normalize_ticket_header(header: str) -> Optional[str]:
    s = header.strip().lower()
    if not s:
        return None
    if "follow-up" in s or "follow up" in s or "followup" in s:
        return "follow_up_date"
    if "date" in s:
        return "date_of_service"
    if "serial" in s or "rfp" in s:
        return "serial_token"
    if any(token in s for token in ("alloted", "allotted", "assignee", "whom")):
        return "allotted_to"
    if "source" in s:
        return "source"
    if "priority" in s:
        return "priority"
    if "status" in s:
        return "status"
    if "customer id" in s:
        return "customer_id"
    if "customer name" in s:
        return "customer_name"
    if "employee id" in s:
        return "employee_id"
    if "employee name" in s:
        return "employee_name"
    if "lead title" in s or s == "title":
        return "lead_title"
    if "lead description" in s or s == "description":
        return "lead_description"
    if "estimated value" in s or "value" in s:
        return "estimated_value"
    return None


def normalize_employee_header(header: str) -> Optional[str]:
    s = header.strip().lower()
    if not s:
        return None
    if "employee id" in s or s == "id":
        return "employee_id"
    if "employee name" in s or s == "name":
        return "employee_name"
    if "designation" in s or "title" in s or "role" in s:
        return "designation"
    if "email" in s or "e-mail" in s:
        return "email"
    if "mobile" in s or "phone" in s or "contact" in s:
        return "mobile"
    if "department" in s or "dept" in s:
        return "department"
    return None


def _convert_ticket_cell(field_name: str, cell: Any) -> str:
    if field_name in _TICKET_DATE_FIELDS:
        return to_iso_date(cell)
    if field_name == "priority":
        return coerce_priority(cell)
    if field_name == "status":
        return coerce_status(cell)
    return cell_text(cell)


def _convert_employee_cell(_field_name: str, cell: Any) -> str:
    return cell_text(cell).strip()


def read_tickets(path: str | Path) -> List[Ticket]:
    """Parse every non-blank data row of the first sheet into a :class:`Ticket`."""
    rows = read_sheet_rows(path)
    tickets = [Ticket.from_mapping(draft) for draft in records_from_rows(rows, normalize_ticket_header, _convert_ticket_cell)]
    LOGGER.info("Read %d ticket(s) from %s", len(tickets), path)
    return tickets


def read_employees(path: str | Path, sheet_name: str | None = None) -> List[Employee]:
    """Parse employees; rows without both an ID and a name are dropped."""
    rows = read_sheet_rows(path, sheet_name)
    employees = [
        Employee.from_mapping(draft)
        for draft in records_from_rows(rows, normalize_employee_header, _convert_employee_cell)
        if draft.get("employee_id") or draft.get("employee_name")
    ]
    LOGGER.info("Read %d employee(s) from %s", len(employees), path)
    return employees


def _export_rows(records: Sequence[Any], columns) -> tuple:
    rows = []
    for record in records:
        data = record.to_dict()
        rows.append({header: (data.get(field) or "")[:MAX_EXCEL_CELL_TEXT_LEN] for field, header in columns})
    return tuple(rows)


def _export_sheet(name: str, records: Sequence[Any], columns) -> SheetSpec:
    return SheetSpec(
        name=name,
        rows=_export_rows(records, columns),
        columns=tuple(header for _, header in columns),
    )


def write_tickets(tickets: Sequence[Ticket], path: str | Path) -> Path:
    spec = WorkbookSpec(sheets=(_export_sheet(TICKETS_SHEET, tickets, TICKET_EXPORT_COLUMNS),))
    return write_workbook(spec, path)


def write_employees(employees: Sequence[Employee], path: str | Path) -> Path:
    spec = WorkbookSpec(sheets=(_export_sheet(EMPLOYEES_SHEET, employees, EMPLOYEE_EXPORT_COLUMNS),))
    return write_workbook(spec, path)


def write_employee_template(path: str | Path) -> Path:
    """Write an employee workbook holding only the header row."""
    spec = WorkbookSpec(sheets=(_export_sheet(EMPLOYEES_TEMPLATE_SHEET, (), EMPLOYEE_EXPORT_COLUMNS),))
    return write_workbook(spec, path)
