"""
Supplier models.
Ingestion records parsed from CSV uploads and the stored directory entity.
"""

from datetime import datetime
from typing import Any, List, Optional
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_NON_ALPHANUMERIC_RUN = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """
    Derive a URL-safe slug from a supplier name.

    Lowercases the name and replaces every run of non-alphanumeric
    characters with a single hyphen. Leading/trailing hyphens are kept,
    so "  Acme & Co. " becomes "-acme-co-".
    """
    return _NON_ALPHANUMERIC_RUN.sub("-", name.lower())


def split_categories(raw: Optional[str]) -> List[str]:
    """Expand a comma-separated categories string into a list of trimmed, non-empty names."""
    if not raw:
        return []
    return [piece.strip() for piece in raw.split(",") if piece.strip()]


def _coerce_categories(v: Any) -> List[str]:
    if v is None:
        return []
    if isinstance(v, str):
        return split_categories(v)
    return [str(item).strip() for item in v if item is not None and str(item).strip()]


class SupplierRecord(BaseModel):
    """
    A supplier row parsed from an uploaded CSV file.

    Only `name` is required. Optional fields distinguish "column present but
    cell empty" (empty string) from "column never resolved" (unset, None);
    use `is_resolved()` to tell them apart.
    """

    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    city: Optional[str] = None

    # Raw comma-separated text; expanded by the store on insert
    categories: Optional[str] = None

    def is_resolved(self, field_name: str) -> bool:
        """Whether the field was populated from a CSV column."""
        return field_name in self.model_fields_set

    def category_list(self) -> List[str]:
        return split_categories(self.categories)


class Supplier(BaseModel):
    """Stored supplier directory entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Unique supplier identifier")
    name: str = Field(..., description="Business name")
    email: Optional[str] = Field(None, description="Contact email")
    phone: Optional[str] = Field(None, description="Contact phone")
    website: Optional[str] = Field(None, description="Website URL")
    description: Optional[str] = Field(None, description="About the business")
    city: Optional[str] = Field(None, description="City or location")
    categories: List[str] = Field(default_factory=list, description="Category names")
    logo_url: Optional[str] = Field(None, description="Logo image URL")
    slug: str = Field(..., description="URL-safe identifier derived from the name")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (UTC)")


class SupplierCreate(BaseModel):
    """
    Payload for creating a supplier from the admin console.

    `categories` accepts either a list or a comma-separated string.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200, description="Business name")
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    city: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    logo_url: Optional[str] = None

    @field_validator("categories", mode="before")
    @classmethod
    def parse_categories(cls, v):
        """Accept a list of names or a comma-separated string."""
        return _coerce_categories(v)


class SupplierUpdate(BaseModel):
    """Partial update; only fields present in the payload are applied."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    city: Optional[str] = None
    categories: Optional[List[str]] = None
    logo_url: Optional[str] = None

    @field_validator("categories", mode="before")
    @classmethod
    def parse_categories(cls, v):
        """Explicit null clears the list."""
        return _coerce_categories(v)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v):
        if v is None:
            raise ValueError("name cannot be cleared")
        return v
