from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List, Sequence

from .accessors import resolve
from .config import MISSING_VALUE, PREVIEW_LIMIT
from .errors import EmptyResultError
from .io_utils import parse_document
from .models import NOT_FOUND, Document, ExtractionRow, FieldSpec, SourceFile, Table

logger = logging.getLogger(__name__)


def build_row(document: Document, field_specs: Sequence[FieldSpec]) -> ExtractionRow:
    """Resolve every field against one document.

    Unresolved paths are stored as the "N/A" placeholder; everything else is
    kept exactly as found in the document.
    """
    values: Dict[str, Any] = {}
    for spec in field_specs:
        val = resolve(document.content, spec.segments)
        if val is NOT_FOUND:
            logger.debug("Path %s not found in %s", spec.path, document.name)
            val = MISSING_VALUE
        values[spec.alias] = val
    return ExtractionRow(file_name=document.name, values=values)


def assemble_table(rows: Sequence[ExtractionRow], field_specs: Sequence[FieldSpec]) -> Table:
    if not rows:
        raise EmptyResultError()
    return Table(
        header=Table.header_for(field_specs),
        rows=[row.cells(field_specs) for row in rows],
    )


def build_table(sources: Iterable[SourceFile], field_specs: Sequence[FieldSpec]) -> Table:
    """Parse each source in order and build the export table.

    The first document that fails to parse aborts the whole batch.
    """
    rows: List[ExtractionRow] = []
    for source in sources:
        rows.append(build_row(parse_document(source), field_specs))
    return assemble_table(rows, field_specs)


def format_cell(val: Any) -> Any:
    """Flatten a value into something a spreadsheet cell can hold."""
    if val is None or isinstance(val, (str, int, float, bool)):
        return val
    if isinstance(val, list) and all(isinstance(v, (str, int, float, bool)) or v is None for v in val):
        return ", ".join(["" if v is None else str(v) for v in val])
    try:
        return json.dumps(val, ensure_ascii=False)
    except TypeError:
        return str(val)


def preview_rows(table: Table, limit: int = PREVIEW_LIMIT) -> List[Dict[str, Any]]:
    if table is None:
        return []
    rows: List[Dict[str, Any]] = []
    for row in table.rows[:max(1, int(limit))]:
        rows.append(dict(zip(table.header, row)))
    return rows
