from __future__ import annotations

from enum import Enum

FILE_NAME_HEADER = "File Name"
MISSING_VALUE = "N/A"
SHEET_NAME = "ExtractedData"
DEFAULT_EXPORT_NAME = "extracted_data.xlsx"
CONTENT_TYPE = "application/octet-stream"
PATH_SEPARATOR = "."
PREVIEW_LIMIT = 3
MAX_CELL_LENGTH = 32767


class ExportFormat(str, Enum):
    XLSX = "XLSX"
    CSV = "CSV"

    @property
    def file_name(self) -> str:
        stem = DEFAULT_EXPORT_NAME.rsplit(".", 1)[0]
        return f"{stem}.{self.value.lower()}"
