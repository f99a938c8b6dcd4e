"""Common Excel helpers (openpyxl).

Reading is header-driven: the first row names the columns and a normalizer
maps each header to a record field.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.datetime import from_excel
from openpyxl.worksheet.worksheet import Worksheet

LOGGER = logging.getLogger(__name__)

_DATE_TOKEN_RE = re.compile(r"[^0-9A-Za-z]+")
_MIN_DATE_PARTS = 3
_YEAR_RANGE = (1900, 2200)

HeaderNormalizer = Callable[[str], Optional[str]]


def open_workbook(path: str | Path):
    return load_workbook(Path(path), data_only=True)


def list_sheet_names(path: str | Path) -> List[str]:
    workbook = open_workbook(path)
    try:
        return list(workbook.sheetnames)
    finally:
        workbook.close()


def resolve_sheet(workbook, sheet_name: str | None = None) -> Worksheet:
    """Return ``sheet_name`` when present, otherwise the first sheet."""
    if sheet_name and sheet_name in workbook.sheetnames:
        return workbook[sheet_name]
    if sheet_name:
        LOGGER.warning("Sheet %r not found; using %r", sheet_name, workbook.sheetnames[0])
    return workbook[workbook.sheetnames[0]]


def read_sheet_rows(path: str | Path, sheet_name: str | None = None) -> List[Tuple[Any, ...]]:
    workbook = open_workbook(path)
    try:
        ws = resolve_sheet(workbook, sheet_name)
        return [tuple(row) for row in ws.iter_rows(values_only=True)]
    finally:
        workbook.close()


def as_str(value: Any) -> str:
    return "" if value is None else str(value)


def cell_text(value: Any) -> str:
    """Text form of a cell; integral floats drop their ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    return as_str(value)


def is_blank_row(row: Iterable[Any]) -> bool:
    return all(as_str(cell).strip() == "" for cell in row)


def map_headers(header_row: Sequence[Any], normalize: HeaderNormalizer) -> Dict[int, str]:
    """Return ``{column index: field}`` for the headers ``normalize`` recognises."""
    mapping: Dict[int, str] = {}
    for idx, header in enumerate(header_row):
        key = normalize(as_str(header))
        if key:
            mapping[idx] = key
    return mapping


def to_iso_date(cell: Any) -> str:
    """Normalise an Excel date cell to ``YYYY-MM-DD``; unparseable text is kept."""
    if cell is None:
        return ""
    if isinstance(cell, datetime):
        return cell.date().isoformat()
    if isinstance(cell, date):
        return cell.isoformat()
    if isinstance(cell, (int, float)) and not isinstance(cell, bool):
        try:
            return from_excel(cell).date().isoformat()
        except (ValueError, OverflowError, TypeError):
            return as_str(cell)
    text = as_str(cell).strip()
    if not text:
        return ""
    # Partial dates such as "Mar 5" or "2024" are kept as typed.
    if len([part for part in _DATE_TOKEN_RE.split(text) if part]) < _MIN_DATE_PARTS:
        return text
    parsed = pd.to_datetime(text, errors="coerce")
    if pd.isna(parsed) or not _YEAR_RANGE[0] <= parsed.year <= _YEAR_RANGE[1]:
        return text
    return parsed.date().isoformat()


def records_from_rows(
    rows: Sequence[Sequence[Any]],
    normalize: HeaderNormalizer,
    convert: Callable[[str, Any], str],
) -> List[Dict[str, str]]:
    """Convert header + data rows into field dictionaries.

    Fully blank rows are skipped; fewer than two rows yields nothing.
    """
    if len(rows) < 2:
        return []
    headers = map_headers(rows[0], normalize)
    if not headers:
        LOGGER.warning("No recognised headers in %s", list(rows[0]))
    records: List[Dict[str, str]] = []
    for row in rows[1:]:
        if not row or is_blank_row(row):
            continue
        draft: Dict[str, str] = {}
        for idx, cell in enumerate(row):
            key = headers.get(idx)
            if key:
                draft[key] = convert(key, cell)
        records.append(draft)
    return records
