"""Export infrastructure for todopanel."""

from todopanel.infrastructure.export.csv_export import (
    CSV_HEADER,
    DEFAULT_EXPORT_FILENAME,
    export_csv,
    format_row,
    tasks_to_csv,
)

__all__ = [
    "CSV_HEADER",
    "DEFAULT_EXPORT_FILENAME",
    "export_csv",
    "format_row",
    "tasks_to_csv",
]
