"""
Inquiry Service
Records contact and catalogue requests made against supplier pages.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ...models.supplier import Supplier
from ..models.inquiry import InquiryType

logger = logging.getLogger(__name__)


@dataclass
class Inquiry:
    """A recorded visitor request."""

    inquiry_id: str
    inquiry_type: InquiryType
    supplier_id: str
    supplier_slug: str
    requester: Dict[str, Any]
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class InquiryService:
    """
    Keeps submitted inquiries in memory.

    Nothing is sent to the supplier; the record is logged and kept so the
    admin console can review it.
    """

    def __init__(self):
        self._inquiries: List[Inquiry] = []
        self._lock = Lock()

    def record(self, inquiry_type: InquiryType, supplier: Supplier, requester: Dict[str, Any]) -> Inquiry:
        inquiry = Inquiry(
            inquiry_id=uuid4().hex,
            inquiry_type=inquiry_type,
            supplier_id=supplier.id,
            supplier_slug=supplier.slug,
            requester=requester,
        )
        with self._lock:
            self._inquiries.append(inquiry)

        logger.info(
            f"{inquiry_type.value.title()} request for {supplier.slug} recorded",
            extra={"inquiry_id": inquiry.inquiry_id, "supplier_id": supplier.id},
        )
        return inquiry

    def list(self, supplier_id: Optional[str] = None) -> List[Inquiry]:
        with self._lock:
            inquiries = list(self._inquiries)
        if supplier_id is not None:
            inquiries = [i for i in inquiries if i.supplier_id == supplier_id]
        return inquiries

    def count(self) -> int:
        return len(self._inquiries)


_inquiry_service: Optional[InquiryService] = None


def get_inquiry_service() -> InquiryService:
    """Get global inquiry service (singleton)."""
    global _inquiry_service
    if _inquiry_service is None:
        _inquiry_service = InquiryService()
    return _inquiry_service


def reset_inquiry_service() -> None:
    """Reset inquiry service (useful for testing)."""
    global _inquiry_service
    _inquiry_service = None
