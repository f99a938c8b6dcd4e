from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Final, Generic, List, Mapping, Sequence, Tuple, TypeVar

LOGGER = logging.getLogger(__name__)

PRIORITIES: Final[Tuple[str, ...]] = ("Low", "Medium", "High", "Urgent")
STATUSES: Final[Tuple[str, ...]] = ("Open", "In Progress", "On Hold", "Closed")
DEFAULT_PRIORITY: Final[str] = "Medium"
DEFAULT_STATUS: Final[str] = "Open"

_PRIORITY_ALIASES: Final[dict[str, str]] = {
    "low": "Low",
    "l": "Low",
    "medium": "Medium",
    "med": "Medium",
    "m": "Medium",
    "high": "High",
    "h": "High",
    "urgent": "Urgent",
    "u": "Urgent",
    "critical": "Urgent",
}

_STATUS_ALIASES: Final[dict[str, str]] = {
    "open": "Open",
    "new": "Open",
    "in progress": "In Progress",
    "wip": "In Progress",
    "progress": "In Progress",
    "on hold": "On Hold",
    "hold": "On Hold",
    "pending": "On Hold",
    "closed": "Closed",
    "done": "Closed",
    "resolved": "Closed",
}

DUPLICATE_MODES: Final[Tuple[str, ...]] = ("skip", "update", "append")


def coerce_priority(value: Any) -> str:
    key = ("" if value is None else str(value)).strip().lower()
    return _PRIORITY_ALIASES.get(key, DEFAULT_PRIORITY)


def coerce_status(value: Any) -> str:
    key = ("" if value is None else str(value)).strip().lower()
    return _STATUS_ALIASES.get(key, DEFAULT_STATUS)


class _Record:
    """Shared mapping helpers for flat string records."""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]):
        names = {f.name for f in fields(cls)}
        values = {k: "" if v is None else str(v) for k, v in data.items() if k in names}
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class Ticket(_Record):
    """A CRM lead ("tender") keyed by its serial token / RFP number."""

    date_of_service: str = ""
    serial_token: str = ""
    allotted_to: str = ""
    source: str = ""
    priority: str = DEFAULT_PRIORITY
    status: str = DEFAULT_STATUS
    customer_id: str = ""
    customer_name: str = ""
    employee_id: str = ""
    employee_name: str = ""
    lead_title: str = ""
    lead_description: str = ""
    estimated_value: str = ""
    follow_up_date: str = ""


@dataclass
class Employee(_Record):
    employee_id: str = ""
    employee_name: str = ""
    designation: str = ""
    email: str = ""
    mobile: str = ""
    department: str = ""


R = TypeVar("R")


@dataclass
class MergeResult(Generic[R]):
    records: List[R] = field(default_factory=list)
    added: int = 0
    updated: int = 0
    skipped: int = 0
    duplicates: List[R] = field(default_factory=list)


def _key_of(record: Any, key: str) -> str:
    return str(getattr(record, key, "") or "").strip().lower()


def merge_records(
    existing: Sequence[R],
    incoming: Sequence[R],
    *,
    key: str,
    mode: str = "skip",
) -> MergeResult[R]:
    """Merge ``incoming`` into ``existing`` using a case-insensitive ``key``.

    ``skip`` keeps the existing record, ``update`` replaces the first existing
    match in place, ``append`` keeps both. New records are placed ahead of the
    existing ones in import order. Records with an empty key never match.
    """
    if mode not in DUPLICATE_MODES:
        raise ValueError(f"Unknown duplicate mode {mode!r}; expected one of {', '.join(DUPLICATE_MODES)}")

    kept = list(existing)
    index: dict[str, int] = {}
    for position, record in enumerate(kept):
        index.setdefault(_key_of(record, key), position)

    result: MergeResult[R] = MergeResult()
    new_records: List[R] = []
    seen_new: set[str] = set()
    for record in incoming:
        record_key = _key_of(record, key)
        is_dup = bool(record_key) and (record_key in index or record_key in seen_new)
        if not is_dup:
            new_records.append(record)
            if record_key:
                seen_new.add(record_key)
            result.added += 1
            continue
        result.duplicates.append(record)
        if mode == "update" and record_key in index:
            kept[index[record_key]] = record
            result.updated += 1
        elif mode == "append":
            new_records.append(record)
            result.added += 1
        else:
            result.skipped += 1

    result.records = new_records + kept
    LOGGER.info(
        "Merged %d record(s) by %s (mode=%s): added=%d updated=%d skipped=%d",
        len(incoming),
        key,
        mode,
        result.added,
        result.updated,
        result.skipped,
    )
    return result
