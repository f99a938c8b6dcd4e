"""Ticket and employee records for the CRM ticket-entry form."""

from .model import (
    DUPLICATE_MODES,
    PRIORITIES,
    STATUSES,
    Employee,
    MergeResult,
    Ticket,
    coerce_priority,
    coerce_status,
    merge_records,
)
from .validation import ALLOWED_SOURCES, validate_field, validate_ticket

__all__ = [
    "ALLOWED_SOURCES",
    "DUPLICATE_MODES",
    "PRIORITIES",
    "STATUSES",
    "Employee",
    "MergeResult",
    "Ticket",
    "coerce_priority",
    "coerce_status",
    "merge_records",
    "validate_field",
    "validate_ticket",
]
