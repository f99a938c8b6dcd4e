"""Field validation for ticket records.

Every rule returns a user-facing message, or an empty string when the value
is acceptable.
"""

from __future__ import annotations

import math
import re
from dataclasses import fields
from typing import Final, Tuple

from crmkit.tools.tickets.model import PRIORITIES, STATUSES, Ticket

ALLOWED_SOURCES: Final[Tuple[str, ...]] = ("Email", "Phone", "Web", "Walk-in", "Referral", "Other")
ENFORCE_ALLOWED_SOURCES: Final[bool] = False

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_NUMBER_NOISE_RE = re.compile(r"[,\s]")
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

# Optional text fields and their maximum lengths.
_MAX_LENGTHS: Final[dict[str, int]] = {
    "customer_id": 100,
    "customer_name": 120,
    "employee_id": 100,
    "employee_name": 120,
    "lead_title": 200,
    "lead_description": 1000,
}


def _validate_estimated_value(value: str) -> str:
    if not value:
        return ""
    cleaned = _NUMBER_NOISE_RE.sub("", value)
    # float() alone also accepts "1_000", "inf" and "nan".
    if not _DECIMAL_RE.match(cleaned):
        return "Must be a number."
    number = float(cleaned)
    if not math.isfinite(number):
        return "Must be a number."
    if number < 0:
        return "Must be >= 0."
    return ""


def validate_field(name: str, value: str | None, *, enforce_sources: bool = ENFORCE_ALLOWED_SOURCES) -> str:
    v = (value or "").strip()
    if name == "date_of_service":
        if not v:
            return "Date is required."
        return "" if _ISO_DATE_RE.match(v) else "Use YYYY-MM-DD."
    if name == "serial_token":
        if not v:
            return "Serial Token / RFP is required."
        return "Max 100 characters." if len(v) > 100 else ""
    if name == "allotted_to":
        if not v:
            return "Assignee is required."
        return "Max 100 characters." if len(v) > 100 else ""
    if name == "source":
        if len(v) > 100:
            return "Max 100 characters."
        if enforce_sources and v.lower() not in {s.lower() for s in ALLOWED_SOURCES}:
            return f"Must be one of: {', '.join(ALLOWED_SOURCES)}"
        return ""
    if name in _MAX_LENGTHS:
        limit = _MAX_LENGTHS[name]
        return f"Max {limit} characters." if len(v) > limit else ""
    if name == "estimated_value":
        return _validate_estimated_value(v)
    if name == "follow_up_date":
        if not v:
            return ""
        return "" if _ISO_DATE_RE.match(v) else "Use YYYY-MM-DD."
    if name == "priority":
        return "" if v in PRIORITIES else "Invalid priority."
    if name == "status":
        return "" if v in STATUSES else "Invalid status."
    return ""


def validate_ticket(ticket: Ticket, *, enforce_sources: bool = ENFORCE_ALLOWED_SOURCES) -> dict[str, str]:
    errors: dict[str, str] = {}
    for f in fields(ticket):
        message = validate_field(f.name, getattr(ticket, f.name), enforce_sources=enforce_sources)
        if message:
            errors[f.name] = message
    return errors
