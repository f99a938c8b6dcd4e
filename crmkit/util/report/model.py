"""Data model for tabular Excel reports.

A workbook is an ordered list of :class:`SheetSpec`; each sheet holds rows of a
single shape (same keys, same order).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

ReportRow = Mapping[str, Any]

MAX_SHEET_NAME_LEN = 31
INVALID_SHEET_NAME_CHARS = frozenset("[]:*?/\\")


@dataclass(frozen=True)
class SheetSpec:
    name: str
    rows: Tuple[ReportRow, ...] = ()
    columns: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))
        if self.columns is not None:
            object.__setattr__(self, "columns", tuple(self.columns))

    @property
    def headers(self) -> Tuple[str, ...]:
        if self.columns is not None:
            return self.columns
        if not self.rows:
            return ()
        return tuple(self.rows[0].keys())

    def validate(self) -> None:
        name = self.name or ""
        if not name.strip():
            raise ValueError("Sheet name must not be empty")
        if len(name) > MAX_SHEET_NAME_LEN:
            raise ValueError(f"Sheet name {name!r} exceeds {MAX_SHEET_NAME_LEN} characters")
        bad = sorted(set(name) & INVALID_SHEET_NAME_CHARS)
        if bad:
            raise ValueError(f"Sheet name {name!r} contains invalid characters: {''.join(bad)}")
        expected = set(self.headers)
        for index, row in enumerate(self.rows):
            if set(row.keys()) != expected:
                raise ValueError(
                    f"Row {index} of sheet {name!r} has columns {sorted(row.keys())}; "
                    f"expected {sorted(expected)}"
                )


@dataclass(frozen=True)
class WorkbookSpec:
    sheets: Tuple[SheetSpec, ...] = field(default_factory=tuple)

    @property
    def sheet_names(self) -> List[str]:
        return [sheet.name for sheet in self.sheets]

    def validate(self) -> None:
        if not self.sheets:
            raise ValueError("Workbook must contain at least one sheet")
        seen: set[str] = set()
        for sheet in self.sheets:
            sheet.validate()
            # Excel compares sheet names case-insensitively.
            key = sheet.name.lower()
            if key in seen:
                raise ValueError(f"Duplicate sheet name {sheet.name!r}")
            seen.add(key)
