"""
Upload Guard
Checks applied to an uploaded file before it reaches the CSV pipeline.
"""

import logging
from typing import Optional

import chardet

from .exceptions import UploadRejectedError

logger = logging.getLogger(__name__)

CSV_MEDIA_TYPE = "text/csv"
MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def is_csv_file(filename: Optional[str], content_type: Optional[str]) -> bool:
    """Accept files declared as text/csv or named *.csv."""
    if content_type and content_type.split(";")[0].strip().lower() == CSV_MEDIA_TYPE:
        return True
    return bool(filename) and filename.lower().endswith(".csv")


def validate_upload(
    filename: Optional[str],
    content_type: Optional[str],
    size: int,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> None:
    """
    Validate an uploaded file's type and size.

    Args:
        filename: Client-supplied file name
        content_type: Client-supplied media type
        size: File size in bytes
        max_bytes: Size limit (inclusive)

    Raises:
        UploadRejectedError: if the file is not a CSV or is too large
    """
    if not is_csv_file(filename, content_type):
        raise UploadRejectedError(
            "Please upload a CSV file",
            kind="invalid_file_type",
            details={"filename": filename, "content_type": content_type},
        )

    if size > max_bytes:
        limit_mb = max_bytes / (1024 * 1024)
        raise UploadRejectedError(
            f"File size must be less than {limit_mb:g}MB",
            kind="file_too_large",
            details={"size": size, "max_bytes": max_bytes},
        )


def decode_csv_bytes(raw: bytes) -> str:
    """
    Decode uploaded bytes to text.

    UTF-8 (with or without BOM) is expected; anything else falls back to
    chardet detection.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    result = chardet.detect(raw[:10000])
    encoding = result["encoding"] or "latin-1"
    logger.info(f"Upload is not UTF-8, detected {encoding} (confidence: {result['confidence']:.2%})")

    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        raise UploadRejectedError(
            "Could not decode file with any supported encoding",
            kind="undecodable",
            details={"detected_encoding": encoding},
        )
