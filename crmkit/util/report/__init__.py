"""Centralized report/Excel helpers.

This package is the canonical home for all reporting utilities, including:
- Workbook model (sheets of uniformly shaped rows)
- The shared xlsx writer and its styling
- Ticket/employee import and export helpers (``excel`` subpackage)
"""

from .builder import write_workbook
from .model import ReportRow, SheetSpec, WorkbookSpec

__all__ = ["ReportRow", "SheetSpec", "WorkbookSpec", "write_workbook"]
