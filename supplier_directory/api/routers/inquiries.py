"""
Inquiry Endpoints
POST /suppliers/{slug}/contact-requests - Ask to be put in touch with a supplier
POST /suppliers/{slug}/catalogue-requests - Ask for a supplier's catalogue
"""

import logging

from fastapi import APIRouter, Depends, status

from ...db import SupplierStore
from ..dependencies import get_inquiries, get_supplier_store
from ..models.inquiry import CatalogueRequest, ContactRequest, InquiryResponse, InquiryType
from ..services.inquiry_service import Inquiry, InquiryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/suppliers", tags=["inquiries"])


def _acknowledge(inquiry: Inquiry, supplier_name: str, message: str) -> InquiryResponse:
    return InquiryResponse(
        inquiry_id=inquiry.inquiry_id,
        inquiry_type=inquiry.inquiry_type,
        supplier_slug=inquiry.supplier_slug,
        supplier_name=supplier_name,
        message=message,
        received_at=inquiry.received_at,
    )


@router.post(
    "/{slug}/contact-requests",
    response_model=InquiryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def request_contact(
    slug: str,
    request: ContactRequest,
    store: SupplierStore = Depends(get_supplier_store),
    inquiries: InquiryService = Depends(get_inquiries),
) -> InquiryResponse:
    """Record a request for a supplier's contact details."""
    supplier = store.get_by_slug(slug)
    inquiry = inquiries.record(InquiryType.CONTACT, supplier, request.model_dump())

    return _acknowledge(
        inquiry,
        supplier.name,
        f"Thanks {request.name}, we will connect you with {supplier.name} shortly.",
    )


@router.post(
    "/{slug}/catalogue-requests",
    response_model=InquiryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def request_catalogue(
    slug: str,
    request: CatalogueRequest,
    store: SupplierStore = Depends(get_supplier_store),
    inquiries: InquiryService = Depends(get_inquiries),
) -> InquiryResponse:
    """Record a catalogue download request."""
    supplier = store.get_by_slug(slug)
    inquiry = inquiries.record(InquiryType.CATALOGUE, supplier, request.model_dump())

    return _acknowledge(
        inquiry,
        supplier.name,
        f"The catalogue from {supplier.name} has been sent to your email address.",
    )
