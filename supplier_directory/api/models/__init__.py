"""
Pydantic Models
Request/response models for API endpoints.
"""

from .auth import LoginRequest, LoginResponse
from .common import ErrorResponse, PaginationInfo
from .inquiry import CatalogueRequest, ContactRequest, InquiryResponse, InquiryType
from .supplier import (
    FacetsResponse,
    ImportDiagnostics,
    ImportPreviewResponse,
    ImportResponse,
    ParsedRecord,
    SupplierListResponse,
)

__all__ = [
    "ErrorResponse",
    "PaginationInfo",
    "LoginRequest",
    "LoginResponse",
    "CatalogueRequest",
    "ContactRequest",
    "InquiryResponse",
    "InquiryType",
    "FacetsResponse",
    "ImportDiagnostics",
    "ImportPreviewResponse",
    "ImportResponse",
    "ParsedRecord",
    "SupplierListResponse",
]
