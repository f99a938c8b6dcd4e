from .project_summary import (
    build_status_workbook,
    generate_project_summary,
    load_status_tables,
    resolve_output_path,
)

__all__ = [
    "build_status_workbook",
    "generate_project_summary",
    "load_status_tables",
    "resolve_output_path",
]
