import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from crmkit.tools.tickets import (
    Employee,
    Ticket,
    coerce_priority,
    coerce_status,
    merge_records,
    validate_field,
    validate_ticket,
)


def _ticket(serial, **overrides):
    base = dict(date_of_service="2024-05-01", serial_token=serial, allotted_to="Asha", source="Email")
    base.update(overrides)
    return Ticket(**base)


def test_valid_ticket_has_no_errors():
    assert validate_ticket(_ticket("RFP-1", estimated_value="1,20,000", follow_up_date="2024-06-01")) == {}


def test_required_fields_reported():
    errors = validate_ticket(Ticket())
    assert errors == {
        "date_of_service": "Date is required.",
        "serial_token": "Serial Token / RFP is required.",
        "allotted_to": "Assignee is required.",
    }


@pytest.mark.parametrize(
    "name, value, message",
    [
        ("date_of_service", "05/01/2024", "Use YYYY-MM-DD."),
        ("serial_token", "x" * 101, "Max 100 characters."),
        ("customer_name", "x" * 121, "Max 120 characters."),
        ("lead_title", "x" * 201, "Max 200 characters."),
        ("lead_description", "x" * 1001, "Max 1000 characters."),
        ("estimated_value", "abc", "Must be a number."),
        ("estimated_value", "-5", "Must be >= 0."),
        ("estimated_value", "1_000", "Must be a number."),
        ("estimated_value", "inf", "Must be a number."),
        ("estimated_value", "infinity", "Must be a number."),
        ("follow_up_date", "soon", "Use YYYY-MM-DD."),
        ("priority", "Whenever", "Invalid priority."),
        ("status", "Archived", "Invalid status."),
    ],
)
def test_field_rules(name, value, message):
    assert validate_field(name, value) == message


def test_source_enforcement_is_optional():
    assert validate_field("source", "Carrier pigeon") == ""
    assert validate_field("source", "Carrier pigeon", enforce_sources=True).startswith("Must be one of")
    assert validate_field("source", "walk-in", enforce_sources=True) == ""


@pytest.mark.parametrize("raw, expected", [("L", "Low"), ("critical", "Urgent"), ("", "Medium"), (None, "Medium")])
def test_coerce_priority(raw, expected):
    assert coerce_priority(raw) == expected


@pytest.mark.parametrize("raw, expected", [("NEW", "Open"), ("pending", "On Hold"), ("resolved", "Closed"), ("?", "Open")])
def test_coerce_status(raw, expected):
    assert coerce_status(raw) == expected


def test_merge_skip_is_case_insensitive():
    existing = [_ticket("RFP-1"), _ticket("RFP-2")]
    incoming = [_ticket("rfp-1", allotted_to="Ravi"), _ticket("RFP-3")]
    result = merge_records(existing, incoming, key="serial_token", mode="skip")
    assert [t.serial_token for t in result.records] == ["RFP-3", "RFP-1", "RFP-2"]
    assert (result.added, result.updated, result.skipped) == (1, 0, 1)
    assert result.duplicates == [incoming[0]]
    assert result.records[1].allotted_to == "Asha"


def test_merge_update_replaces_in_place():
    existing = [_ticket("RFP-1"), _ticket("RFP-2")]
    incoming = [_ticket("RFP-2", status="Closed")]
    result = merge_records(existing, incoming, key="serial_token", mode="update")
    assert [t.serial_token for t in result.records] == ["RFP-1", "RFP-2"]
    assert result.records[1].status == "Closed"
    assert result.updated == 1


def test_merge_append_keeps_both():
    existing = [Employee("E1", "Asha")]
    incoming = [Employee("e1", "Asha B"), Employee("E2", "Ravi")]
    result = merge_records(existing, incoming, key="employee_id", mode="append")
    assert [e.employee_name for e in result.records] == ["Asha B", "Ravi", "Asha"]
    assert result.added == 2


def test_merge_detects_duplicates_within_import():
    incoming = [Employee("E1", "Asha"), Employee("E1", "Asha again"), Employee("", "No id"), Employee("", "Also none")]
    result = merge_records([], incoming, key="employee_id")
    assert [e.employee_name for e in result.records] == ["Asha", "No id", "Also none"]
    assert result.skipped == 1


def test_merge_rejects_unknown_mode():
    with pytest.raises(ValueError, match="Unknown duplicate mode"):
        merge_records([], [], key="serial_token", mode="overwrite")


def test_from_mapping_ignores_unknown_keys():
    ticket = Ticket.from_mapping({"serial_token": "RFP-7", "estimated_value": 10, "colour": "red"})
    assert ticket.serial_token == "RFP-7"
    assert ticket.estimated_value == "10"
    assert ticket.priority == "Medium"
