from __future__ import annotations

from datetime import datetime
from pathlib import Path
import sys

import pytest

pytest.importorskip("pandas")
openpyxl = pytest.importorskip("openpyxl")
Workbook = openpyxl.Workbook

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from crmkit.tools.tickets import Employee, Ticket  # noqa: E402
from crmkit.util.report.excel import (  # noqa: E402
    list_sheet_names,
    read_employees,
    read_tickets,
    write_employee_template,
    write_employees,
    write_tickets,
)
from crmkit.util.report.excel.common import to_iso_date  # noqa: E402
from crmkit.util.report.excel.records import normalize_ticket_header  # noqa: E402


def _save(tmp_path: Path, rows: list[list], *, title: str = "Sheet1", extra_first: bool = False) -> Path:
    wb = Workbook()
    ws = wb.active
    if extra_first:
        ws.title = "Notes"
        ws = wb.create_sheet(title)
    else:
        ws.title = title
    for row in rows:
        ws.append(row)
    path = tmp_path / "input.xlsx"
    wb.save(path)
    return path


def test_ticket_import_with_loose_headers(tmp_path):
    path = _save(
        tmp_path,
        [
            ["Date", "Serial No", "Assignee", "Source", "Priority", "Status", "Title", "Follow up", "Value"],
            [datetime(2024, 3, 5), "RFP-001", "Asha", "Email", "h", "wip", "Fleet renewal", "2024/04/01", 250000],
            [None, None, None, None, None, None, None, None, None],
            ["2024-03-06", "RFP-002", "Ravi", "Web", "whatever", "done", "", None, None],
        ],
    )
    tickets = read_tickets(path)
    assert len(tickets) == 2
    first, second = tickets
    assert first.date_of_service == "2024-03-05"
    assert first.serial_token == "RFP-001"
    assert first.allotted_to == "Asha"
    assert first.priority == "High"
    assert first.status == "In Progress"
    assert first.lead_title == "Fleet renewal"
    assert first.follow_up_date == "2024-04-01"
    assert first.estimated_value == "250000"
    assert second.priority == "Medium"
    assert second.status == "Closed"
    assert second.follow_up_date == ""


def test_ticket_import_needs_data_rows(tmp_path):
    path = _save(tmp_path, [["Date", "Serial"]])
    assert read_tickets(path) == []


def test_ticket_round_trip(tmp_path):
    tickets = [
        Ticket(
            date_of_service="2024-01-15",
            serial_token="RFP-9",
            allotted_to="Meera",
            source="Referral",
            priority="Urgent",
            status="On Hold",
            customer_id="C-1",
            customer_name="Acme Logistics",
            lead_title="Warehouse CRM",
            estimated_value="1200",
            follow_up_date="2024-02-01",
        )
    ]
    path = write_tickets(tickets, tmp_path / "out" / "tenders.xlsx")
    assert list_sheet_names(path) == ["Tenders"]
    assert read_tickets(path) == tickets


@pytest.mark.parametrize(
    "header, expected",
    [
        ("Follow-up Date", "follow_up_date"),
        ("Date of Service", "date_of_service"),
        ("Serial Token / RFP Number", "serial_token"),
        ("Whom it's allotted to", "allotted_to"),
        ("Estimated Value (INR)", "estimated_value"),
        ("Customer Name", "customer_name"),
        ("Description", "lead_description"),
        ("Remarks", None),
    ],
)
def test_normalize_ticket_header(header, expected):
    assert normalize_ticket_header(header) == expected


@pytest.mark.parametrize(
    "cell, expected",
    [
        (45356, "2024-03-05"),
        (datetime(2023, 12, 31, 18, 30), "2023-12-31"),
        ("2024-07-09", "2024-07-09"),
        ("TBD", "TBD"),
        ("Mar 5", "Mar 5"),
        ("2024", "2024"),
        (None, ""),
    ],
)
def test_to_iso_date(cell, expected):
    assert to_iso_date(cell) == expected


def test_employee_import_uses_named_sheet(tmp_path):
    path = _save(
        tmp_path,
        [
            ["ID", "Name", "Role", "E-mail", "Phone", "Dept"],
            ["E1", "Asha", "Engineer", "asha@example.com", "999", "R&D"],
            ["", "", "Intern", "", "", ""],
            ["E2", "", "", "", "", ""],
        ],
        title="Staff",
        extra_first=True,
    )
    employees = read_employees(path, sheet_name="Staff")
    assert employees == [
        Employee("E1", "Asha", "Engineer", "asha@example.com", "999", "R&D"),
        Employee(employee_id="E2"),
    ]


def test_employee_export_and_template(tmp_path):
    path = write_employees([Employee("E1", "Asha", department="Sales")], tmp_path / "employees.xlsx")
    assert read_employees(path) == [Employee("E1", "Asha", department="Sales")]

    template = write_employee_template(tmp_path / "template.xlsx")
    wb = openpyxl.load_workbook(template)
    ws = wb["EmployeesTemplate"]
    assert [c.value for c in ws[1]] == ["Employee ID", "Employee Name", "Designation", "Email", "Mobile", "Department"]
    assert ws.max_row == 1
    wb.close()
