from __future__ import annotations


class ExtractionError(Exception):
    """Base exception for all extraction errors."""


class ValidationError(ExtractionError):
    """Raised when the uploaded files or field specs are unusable."""


class ParseError(ExtractionError):
    """Raised when a document is not valid JSON."""

    def __init__(self, file_name: str, reason: str):
        super().__init__(f"Error parsing JSON in {file_name}: {reason}")
        self.file_name = file_name
        self.reason = reason


class EmptyResultError(ExtractionError):
    """Raised when extraction produced no rows."""

    def __init__(self, message: str = "No data extracted. Check the field paths."):
        super().__init__(message)


class CellTooLongError(ExtractionError):
    """Raised when a value does not fit in a single spreadsheet cell."""

    def __init__(self, file_name: str, column: str, length: int, limit: int):
        super().__init__(
            f"Value of column '{column}' in {file_name} is {length} characters long; "
            f"Excel cells hold at most {limit}."
        )
        self.file_name = file_name
        self.column = column
