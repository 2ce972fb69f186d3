"""
API Services
Business logic services for API endpoints.
"""

from .inquiry_service import Inquiry, InquiryService, get_inquiry_service, reset_inquiry_service

__all__ = [
    "Inquiry",
    "InquiryService",
    "get_inquiry_service",
    "reset_inquiry_service",
]
