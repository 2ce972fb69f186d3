"""
Inquiry Models
Contact and catalogue requests submitted from a supplier's detail page.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class InquiryType(str, Enum):
    """Kinds of visitor request."""

    CONTACT = "contact"
    CATALOGUE = "catalogue"


class CatalogueRequest(BaseModel):
    """Request for a supplier's catalogue."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200, description="Requester name")
    email: EmailStr = Field(..., description="Where to send the catalogue")
    company: str = Field(..., min_length=1, max_length=200, description="Requester company")
    phone: Optional[str] = Field(None, max_length=50, description="Requester phone")


class ContactRequest(CatalogueRequest):
    """Request to be put in touch with a supplier."""

    company: Optional[str] = Field(None, max_length=200, description="Requester company")
    message: Optional[str] = Field(None, max_length=2000, description="Message for the supplier")


class InquiryResponse(BaseModel):
    """Acknowledgement of a recorded inquiry."""

    inquiry_id: str
    inquiry_type: InquiryType
    supplier_slug: str
    supplier_name: str
    message: str
    received_at: datetime
