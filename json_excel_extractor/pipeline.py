"""Ordered read -> parse -> extract pipeline behind the Extract button.

Files are read one at a time and each is fully processed before the next
one starts, so the table rows always follow the upload order.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, AsyncGenerator, List, Sequence

from .config import CONTENT_TYPE, ExportFormat
from .errors import ExtractionError
from .export import serialize_as
from .flattening import assemble_table, build_row
from .io_utils import parse_document, read_source
from .models import Document, ExtractionRow, FieldSpec, Table
from .validation import validate_field_specs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    table: Table
    data: bytes
    file_name: str
    content_type: str = CONTENT_TYPE


async def iter_documents(files: Sequence[Any]) -> AsyncGenerator[Document, None]:
    for file_obj in files:
        source = await asyncio.to_thread(read_source, file_obj)
        yield parse_document(source)


async def extract_table(files: Sequence[Any], field_specs: Sequence[FieldSpec]) -> Table:
    rows: List[ExtractionRow] = []
    async for document in iter_documents(files):
        rows.append(build_row(document, field_specs))
        logger.debug("Extracted %d fields from %s", len(field_specs), document.name)
    return assemble_table(rows, field_specs)


async def extract(
    files: Sequence[Any],
    field_specs: Sequence[FieldSpec],
    export_format: ExportFormat = ExportFormat.XLSX,
) -> ExtractionResult:
    export_format = ExportFormat(export_format)
    field_specs = validate_field_specs(field_specs)
    logger.info("Extracting %d fields from %d files", len(field_specs), len(files))

    try:
        table = await extract_table(files, field_specs)
    except ExtractionError as exc:
        logger.warning("Extraction aborted: %s", exc)
        raise

    data = serialize_as(table, export_format)
    logger.info("Extraction finished: %d rows", len(table.rows))
    return ExtractionResult(table=table, data=data, file_name=export_format.file_name)


def extract_sync(
    files: Sequence[Any],
    field_specs: Sequence[FieldSpec],
    export_format: ExportFormat = ExportFormat.XLSX,
) -> ExtractionResult:
    return asyncio.run(extract(files, field_specs, export_format))
