"""
Ingestion exceptions.
Failure kinds raised by the CSV pipeline and the upload guard.
"""


class CSVIngestionError(Exception):
    """Base exception for CSV ingestion failures."""

    kind = "ingestion_error"

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MalformedInputError(CSVIngestionError):
    """Raised when the file has no header row or no data rows."""

    kind = "malformed_input"

    def __init__(self, line_count: int):
        self.line_count = line_count
        super().__init__(
            "CSV must contain at least a header row and one data row",
            {"non_blank_lines": line_count},
        )


class SchemaError(CSVIngestionError):
    """Raised when no header column maps to the supplier name."""

    kind = "schema_error"

    def __init__(self, headers: list):
        self.headers = headers
        super().__init__(
            "CSV must contain a name/company_name column",
            {"headers": headers},
        )


class EmptyResultError(CSVIngestionError):
    """Raised when parsing finished but every data row was dropped."""

    kind = "empty_result"

    def __init__(self, total_rows: int):
        self.total_rows = total_rows
        super().__init__(
            "No valid supplier data found in CSV",
            {"data_rows": total_rows},
        )


class UploadRejectedError(CSVIngestionError):
    """Raised by the upload guard before parsing is attempted."""

    def __init__(self, message: str, kind: str, details: dict = None):
        self.kind = kind
        super().__init__(message, details)
