"""
Supplier Models
Request/response models for supplier endpoints.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...models.supplier import Supplier, SupplierRecord
from .common import PaginationInfo


class SupplierListResponse(BaseModel):
    """Paginated catalogue listing."""

    results: List[Supplier] = Field(..., description="Suppliers on this page")
    pagination: PaginationInfo
    sort: str = Field(..., description="Applied sort option")
    sort_label: str = Field(..., description="Display label for the sort option")
    filters_applied: bool = Field(default=False, description="Whether any filter was active")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "results": [],
                "pagination": {
                    "page": 1,
                    "limit": 20,
                    "total": 6,
                    "total_pages": 1,
                    "start_item": 1,
                    "end_item": 6,
                    "pages": [1],
                },
                "sort": "name-asc",
                "sort_label": "Alphabetically, A-Z",
                "filters_applied": False,
            }
        }
    )


class FacetsResponse(BaseModel):
    """Values available for the catalogue filters."""

    categories: List[str] = Field(default_factory=list)
    cities: List[str] = Field(default_factory=list)


class ParsedRecord(BaseModel):
    """A CSV row as parsed, with only the fields the file provided."""

    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    city: Optional[str] = None
    categories: Optional[str] = None

    @classmethod
    def from_record(cls, record: SupplierRecord) -> "ParsedRecord":
        return cls(**record.model_dump(exclude_unset=True))


class ImportDiagnostics(BaseModel):
    """Row-level counts from a CSV parse."""

    total_rows: int
    accepted: int
    skipped_short_rows: int
    skipped_missing_name: int
    unmapped_fields: List[str] = Field(default_factory=list)
    column_map: Dict[str, int] = Field(default_factory=dict)


class ImportPreviewResponse(BaseModel):
    """Parsed records from an uploaded file, not yet stored."""

    filename: Optional[str] = None
    records: List[ParsedRecord]
    diagnostics: ImportDiagnostics


class ImportResponse(BaseModel):
    """Suppliers created by a bulk import."""

    filename: Optional[str] = None
    imported: int = Field(..., description="Number of suppliers created")
    suppliers: List[Supplier]
    diagnostics: ImportDiagnostics
