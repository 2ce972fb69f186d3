"""
Data Ingestion Package
Parses and validates supplier CSV uploads.
"""

from .csv_processor import CSVIngestionPipeline, IngestionReport, parse_supplier_csv
from .exceptions import (
    CSVIngestionError,
    EmptyResultError,
    MalformedInputError,
    SchemaError,
    UploadRejectedError,
)
from .upload import decode_csv_bytes, validate_upload

__all__ = [
    "CSVIngestionPipeline",
    "IngestionReport",
    "parse_supplier_csv",
    "CSVIngestionError",
    "MalformedInputError",
    "SchemaError",
    "EmptyResultError",
    "UploadRejectedError",
    "decode_csv_bytes",
    "validate_upload",
]
