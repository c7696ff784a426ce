from __future__ import annotations

import csv
import io
import logging
import os
import tempfile
from typing import Any, List

from openpyxl import Workbook, load_workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from .config import DEFAULT_EXPORT_NAME, MAX_CELL_LENGTH, SHEET_NAME, ExportFormat
from .errors import CellTooLongError
from .flattening import format_cell
from .models import Table

logger = logging.getLogger(__name__)


def _cell_text(val: Any, file_name: Any, column: Any) -> Any:
    """Make a string safe for a worksheet cell.

    Control characters that XML cannot carry are dropped; text longer than
    a cell can hold is an error rather than being cut short.
    """
    if not isinstance(val, str):
        return val
    cleaned = ILLEGAL_CHARACTERS_RE.sub('', val)
    if cleaned != val:
        logger.warning("Dropped control characters from column %s of %s", column, file_name)
    if len(cleaned) > MAX_CELL_LENGTH:
        raise CellTooLongError(str(file_name), str(column), len(cleaned), MAX_CELL_LENGTH)
    return cleaned


def serialize(table: Table) -> bytes:
    """Write the table to a single-sheet .xlsx workbook and return its bytes."""
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_NAME

    for r, row in enumerate(table.grid(), start=1):
        for c, val in enumerate(row, start=1):
            value = _cell_text(format_cell(val), row[0], table.header[c - 1])
            cell = ws.cell(row=r, column=c, value=value)
            # Text starting with '=' stays literal text, not a formula.
            if cell.data_type == 'f':
                cell.data_type = 's'

    buffer = io.BytesIO()
    wb.save(buffer)
    logger.info("Serialized %d rows to sheet %s", len(table.rows), SHEET_NAME)
    return buffer.getvalue()


def serialize_csv(table: Table) -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    for row in table.grid():
        writer.writerow(["" if val is None else format_cell(val) for val in row])
    return buffer.getvalue().encode('utf-8')


def serialize_as(table: Table, export_format: ExportFormat) -> bytes:
    if ExportFormat(export_format) is ExportFormat.CSV:
        return serialize_csv(table)
    return serialize(table)


def read_grid(data: bytes) -> List[List[Any]]:
    """Read the ExtractedData sheet of a serialized workbook back into rows."""
    wb = load_workbook(io.BytesIO(data), read_only=True)
    try:
        ws = wb[SHEET_NAME]
        return [list(row) for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()


def write_export(data: bytes, file_name: str = DEFAULT_EXPORT_NAME) -> str:
    """Write export bytes to a fresh temp directory under `file_name`.

    Each export gets its own directory so the download keeps the fixed name.
    """
    temp_dir = tempfile.mkdtemp(prefix="json_excel_")
    path = os.path.join(temp_dir, file_name)
    with open(path, 'wb') as f:
        f.write(data)
    return path
