from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Tuple

from crmkit.tools.reporting.status_data import STATUS_TABLES
from crmkit.util.constants import Paths, SUMMARY_FILENAME, SUMMARY_LEVELS_UP, ReportSettings, _read_yaml_dict
from crmkit.util.report.builder import write_workbook
from crmkit.util.report.model import ReportRow, SheetSpec, WorkbookSpec

LOGGER = logging.getLogger(__name__)

StatusTable = Tuple[str, Tuple[str, ...], Tuple[ReportRow, ...]]


def resolve_output_path(
    anchor: str | Path,
    *,
    levels_up: int = SUMMARY_LEVELS_UP,
    filename: str = SUMMARY_FILENAME,
) -> Path:
    """Return ``anchor`` walked up ``levels_up`` directories, joined with ``filename``."""
    base = Path(anchor).resolve()
    for _ in range(levels_up):
        base = base.parent
    return base / filename


def build_status_workbook(tables: Sequence[StatusTable] = STATUS_TABLES) -> WorkbookSpec:
    return WorkbookSpec(
        sheets=tuple(SheetSpec(name=name, rows=rows, columns=columns) for name, columns, rows in tables)
    )


def load_status_tables(path: str | Path) -> Tuple[StatusTable, ...]:
    """Read replacement status tables from a YAML file.

    The file maps each sheet name (``Frontend``, ``Backend``, ``Next Steps``) to
    a list of row mappings. Column order follows the first row of each table.
    """
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"Status data file {source} does not exist")
    data: Mapping[str, Any] = _read_yaml_dict(source)
    tables = []
    for name, default_columns, _ in STATUS_TABLES:
        raw_rows = data.get(name)
        if raw_rows is None:
            raise ValueError(f"Status data file {source} is missing table {name!r}")
        if not isinstance(raw_rows, list) or not all(isinstance(r, Mapping) for r in raw_rows):
            raise ValueError(f"Table {name!r} in {source} must be a list of mappings")
        rows = tuple({str(k): "" if v is None else str(v) for k, v in row.items()} for row in raw_rows)
        columns = tuple(rows[0].keys()) if rows else default_columns
        tables.append((name, columns, rows))
    extra = sorted(set(data) - {name for name, _, _ in STATUS_TABLES})
    if extra:
        LOGGER.warning("Ignoring unknown tables in %s: %s", source, extra)
    return tuple(tables)


def generate_project_summary(
    output: Optional[str | Path] = None,
    *,
    anchor: Optional[str | Path] = None,
    settings: ReportSettings | None = None,
    tables: Sequence[StatusTable] = STATUS_TABLES,
) -> Path:
    """Write the project summary workbook and return its absolute path.

    Without ``output`` the path is resolved from ``anchor`` (the repository's
    ``scripts`` directory when omitted) using ``settings``. An existing file is replaced.
    """
    settings = settings or ReportSettings()
    if output is None:
        anchor_dir = Path(anchor) if anchor is not None else Path(Paths.SCRIPTS_DIR)
        output = resolve_output_path(anchor_dir, levels_up=settings.levels_up, filename=settings.filename)
    spec = build_status_workbook(tables)
    LOGGER.info("Generating project summary with sheets %s", spec.sheet_names)
    return write_workbook(spec, output)
