from __future__ import annotations

import logging
from typing import Any, List

from .config import PREVIEW_LIMIT, ExportFormat
from .errors import ExtractionError
from .export import write_export
from .flattening import preview_rows
from .models import FieldSpec
from .pipeline import extract
from .validation import validate_request

logger = logging.getLogger(__name__)

FIELD_HEADERS = ["JSON Path", "Column Alias"]


def upload_message(files) -> str:
    if not files:
        return ""
    return f"{len(files)} file(s) uploaded successfully."


def _cell_text(cell: Any) -> str:
    if cell is None:
        return ""
    # Empty numeric cells come back from the grid as NaN.
    if isinstance(cell, float) and cell != cell:
        return ""
    return str(cell)


def field_specs_from_table(mapping_df) -> List[FieldSpec]:
    """Turn the field grid into FieldSpecs, skipping rows left completely blank."""
    if mapping_df is None:
        return []

    try:
        rows = mapping_df.values.tolist()
    except AttributeError:
        rows = list(mapping_df)

    specs: List[FieldSpec] = []
    for row in rows:
        cells = [_cell_text(c) for c in list(row)[:2]]
        cells += [""] * (2 - len(cells))
        path, alias = cells
        if not path.strip() and not alias.strip():
            continue
        specs.append(FieldSpec(path=path, alias=alias))
    return specs


async def extract_handler(files, mapping_df, output_format=ExportFormat.XLSX.value):
    files = [f for f in files or [] if f is not None]
    field_specs = field_specs_from_table(mapping_df)

    try:
        validate_request(files, field_specs)
        result = await extract(files, field_specs, ExportFormat(output_format or ExportFormat.XLSX.value))
    except ExtractionError as exc:
        return None, str(exc), None
    except OSError as exc:
        logger.error("Error reading uploaded files: %s", exc)
        return None, f"Error reading uploaded files: {str(exc)}", None

    try:
        path = write_export(result.data, result.file_name)
    except OSError as exc:
        logger.error("Error writing export: %s", exc)
        return None, f"Error during export: {str(exc)}", None

    preview = preview_rows(result.table, limit=PREVIEW_LIMIT)
    return path, f"Extraction successful! {len(result.table.rows)} row(s) exported.", preview
