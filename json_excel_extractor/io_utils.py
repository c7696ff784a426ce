from __future__ import annotations

import json
import os
from typing import Any

from .errors import ParseError
from .models import Document, SourceFile


def read_source(file_obj: Any) -> SourceFile:
    """Read an uploaded file, file-like object or path into a SourceFile."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if isinstance(file_obj, SourceFile):
        return file_obj

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        name = os.path.basename(getattr(file_obj, 'name', '') or 'document.json')
        return SourceFile(name=name, raw=file_obj.read())

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'rb') as f:
        return SourceFile(name=os.path.basename(path), raw=f.read())


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_document(source: SourceFile) -> Document:
    """Parse the raw JSON text of `source`; raises ParseError on bad input."""
    content = source.raw
    if isinstance(content, bytes):
        try:
            content = content.decode('utf-8-sig')
        except UnicodeDecodeError as exc:
            raise ParseError(source.name, f"not UTF-8 text ({exc.reason})") from exc
    elif content.startswith('\ufeff'):
        content = content[1:]

    try:
        return Document(name=source.name, content=json.loads(content, parse_constant=_reject_constant))
    except ValueError as exc:
        raise ParseError(source.name, str(exc)) from exc
