from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from crmkit.build import define_config
from crmkit.tools.reporting import generate_project_summary, load_status_tables
from crmkit.tools.reporting.status_data import STATUS_TABLES
from crmkit.tools.tickets import DUPLICATE_MODES, merge_records, validate_ticket
from crmkit.util.constants import get_dev_server_settings, get_report_settings, load_config
from crmkit.util.report.excel import (
    read_employees,
    read_tickets,
    write_employee_template,
    write_employees,
    write_tickets,
)

LOGGER = logging.getLogger("crmkit")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crmkit",
        description="Build configuration, status reports and ticket spreadsheets for the CRM frontend.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file (default: config/crmkit.yaml).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("base-path", help="Print the asset base path for the current environment.")
    sub.add_parser("build-config", help="Print the frontend build configuration as JSON.")

    summary = sub.add_parser("summary", help="Write the Project-Summary.xlsx status workbook.")
    summary.add_argument("--output", type=Path, help="Explicit output file; overrides path resolution.")
    summary.add_argument(
        "--anchor",
        type=Path,
        help="Directory the output path is resolved from (default: the scripts directory).",
    )
    summary.add_argument("--data", type=Path, help="YAML file replacing the built-in status tables.")

    template = sub.add_parser("export-template", help="Write an empty employee import template.")
    template.add_argument("path", type=Path)

    for name, label in (("import-tickets", "tickets"), ("import-employees", "employees")):
        importer = sub.add_parser(name, help=f"Validate {label} from a workbook and merge them into another.")
        importer.add_argument("source", type=Path, help="Workbook to import.")
        importer.add_argument("--into", type=Path, help="Workbook to merge into and rewrite; omit for a dry run.")
        importer.add_argument(
            "--duplicates",
            choices=DUPLICATE_MODES,
            default="skip",
            help="How to handle records whose key already exists (default: skip).",
        )
        if label == "tickets":
            importer.add_argument(
                "--enforce-sources",
                action="store_true",
                help="Reject sources outside the allowed list.",
            )
        else:
            importer.add_argument("--sheet", help="Sheet to read (default: first sheet).")
    return parser


def _cmd_summary(args, config) -> int:
    tables = load_status_tables(args.data) if args.data else STATUS_TABLES
    try:
        path = generate_project_summary(
            args.output,
            anchor=args.anchor,
            settings=get_report_settings(config=config),
            tables=tables,
        )
    except OSError as exc:
        LOGGER.error("Failed to write project summary: %s", exc)
        return 1
    print("Wrote", path)
    return 0


def _cmd_import_tickets(args) -> int:
    incoming = read_tickets(args.source)
    if not incoming:
        LOGGER.error("No rows found in %s", args.source)
        return 2
    invalid = 0
    for row_number, ticket in enumerate(incoming, start=2):
        errors = validate_ticket(ticket, enforce_sources=args.enforce_sources)
        for field_name, message in errors.items():
            print(f"row {row_number}: {field_name}: {message}")
        invalid += bool(errors)
    if invalid:
        LOGGER.error("%d of %d row(s) failed validation; nothing written", invalid, len(incoming))
        return 2
    if args.into is None:
        print(f"Validated {len(incoming)} ticket(s).")
        return 0
    existing = read_tickets(args.into) if args.into.exists() else []
    result = merge_records(existing, incoming, key="serial_token", mode=args.duplicates)
    try:
        write_tickets(result.records, args.into)
    except OSError as exc:
        LOGGER.error("Failed to write tickets to %s: %s", args.into, exc)
        return 1
    message = f"Imported {result.added} ticket(s)."
    if result.updated:
        message += f" Replaced {result.updated} duplicate(s)."
    if result.skipped:
        message += f" Skipped {result.skipped} duplicate(s)."
    print(message)
    return 0


def _cmd_import_employees(args) -> int:
    incoming = read_employees(args.source, args.sheet)
    if not incoming:
        LOGGER.error("No employees found in %s", args.source)
        return 2
    missing_ids = [n for n, e in enumerate(incoming, start=2) if not e.employee_id.strip()]
    if missing_ids:
        LOGGER.error("Employee ID missing on row(s) %s; nothing written", missing_ids)
        return 2
    if args.into is None:
        print(f"Validated {len(incoming)} employee(s).")
        return 0
    existing = read_employees(args.into) if args.into.exists() else []
    result = merge_records(existing, incoming, key="employee_id", mode=args.duplicates)
    try:
        write_employees(result.records, args.into)
    except OSError as exc:
        LOGGER.error("Failed to write employees to %s: %s", args.into, exc)
        return 1
    print(f"Added {result.added}, updated {result.updated}, skipped {result.skipped} employee(s).")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_level = getattr(logging, str(args.log_level).upper(), logging.INFO)
    logging.basicConfig(level=log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    config = load_config(path=args.config)

    if args.command == "base-path":
        print(define_config(os.environ).base)
        return 0
    if args.command == "build-config":
        server = get_dev_server_settings(config=config)
        build = define_config(os.environ, port=server.port, open_browser=server.open)
        print(json.dumps(build.to_dict(), indent=2))
        return 0
    if args.command == "summary":
        return _cmd_summary(args, config)
    if args.command == "export-template":
        try:
            path = write_employee_template(args.path)
        except OSError as exc:
            LOGGER.error("Failed to write employee template: %s", exc)
            return 1
        print("Wrote", path)
        return 0
    if args.command == "import-tickets":
        return _cmd_import_tickets(args)
    if args.command == "import-employees":
        return _cmd_import_employees(args)
    parser.error(f"Unknown command {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
