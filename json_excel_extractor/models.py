from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union

from .config import FILE_NAME_HEADER, MISSING_VALUE
from .paths import split_path


class _NotFoundType:
    """Marker for a path that did not resolve inside a document."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = _NotFoundType()


@dataclass(frozen=True)
class SourceFile:
    """One uploaded blob before parsing."""

    name: str
    raw: Union[str, bytes]


@dataclass(frozen=True)
class Document:
    """A parsed JSON document paired with the name of the file it came from."""

    name: str
    content: Any


@dataclass(frozen=True)
class FieldSpec:
    """A user-declared (path, alias) pair. The alias is the column label."""

    path: str
    alias: str

    @property
    def segments(self) -> List[str]:
        return split_path(self.path)


@dataclass(frozen=True)
class ExtractionRow:
    file_name: str
    values: Dict[str, Any] = field(default_factory=dict)

    def cells(self, field_specs: Sequence[FieldSpec]) -> List[Any]:
        """Render the row in header order."""
        return [self.file_name] + [self.values.get(spec.alias, MISSING_VALUE) for spec in field_specs]


@dataclass(frozen=True)
class Table:
    """Header plus data rows, every row as wide as the header."""

    header: List[str]
    rows: List[List[Any]]

    @classmethod
    def header_for(cls, field_specs: Sequence[FieldSpec]) -> List[str]:
        return [FILE_NAME_HEADER] + [spec.alias for spec in field_specs]

    @property
    def width(self) -> int:
        return len(self.header)

    def grid(self) -> List[List[Any]]:
        return [list(self.header)] + [list(row) for row in self.rows]
