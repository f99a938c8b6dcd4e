"""Table -> sheet -> workbook writer shared by all xlsx outputs."""

from __future__ import annotations

import logging
from pathlib import Path
import pandas as pd

from crmkit.util.report.model import SheetSpec, WorkbookSpec
from crmkit.util.report.style import apply_table_style

LOGGER = logging.getLogger(__name__)


def sheet_frame(sheet: SheetSpec) -> pd.DataFrame:
    """Return ``sheet`` as a DataFrame whose column order matches its headers."""
    headers = list(sheet.headers)
    if not sheet.rows:
        return pd.DataFrame(columns=headers)
    return pd.DataFrame([dict(row) for row in sheet.rows], columns=headers)


def write_workbook(spec: WorkbookSpec, output: str | Path, *, styled: bool = True) -> Path:
    """Write ``spec`` to ``output``, replacing any existing file.

    Missing parent directories are created. Filesystem errors propagate.
    """
    spec.validate()
    path = Path(output).resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for sheet in spec.sheets:
            frame = sheet_frame(sheet)
            frame.to_excel(writer, sheet_name=sheet.name, index=False)
            if styled:
                apply_table_style(writer.sheets[sheet.name])
            LOGGER.debug("Sheet %s: %d row(s), columns=%s", sheet.name, len(frame), list(frame.columns))
    LOGGER.info("Wrote %s", path)
    return path
