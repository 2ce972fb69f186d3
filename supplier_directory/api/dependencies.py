"""
Dependency Injection
FastAPI dependencies for the store, services, and admin access.
"""

import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from ..db import SupplierStore, get_store
from ..ingestion import CSVIngestionPipeline
from .config import APISettings, get_settings
from .services.inquiry_service import InquiryService, get_inquiry_service

logger = logging.getLogger(__name__)

_basic_auth = HTTPBasic(auto_error=False)
_pipeline = CSVIngestionPipeline()


def get_supplier_store() -> SupplierStore:
    """
    Get the supplier store.

    Use as FastAPI dependency:
        @app.get("/endpoint")
        def endpoint(store: SupplierStore = Depends(get_supplier_store)):
            ...
    """
    return get_store()


def get_ingestion_pipeline() -> CSVIngestionPipeline:
    """Get the shared (stateless) CSV ingestion pipeline."""
    return _pipeline


def get_inquiries() -> InquiryService:
    """Get the inquiry service."""
    return get_inquiry_service()


def get_request_id(request: Request) -> str:
    """Request ID assigned by RequestLoggingMiddleware, for tagging log lines."""
    return getattr(request.state, "request_id", "-")


def check_admin_credentials(username: str, password: str, settings: APISettings) -> bool:
    """Compare a username/password pair with the configured admin credential."""
    expected_user = settings.admin_username.encode("utf-8")
    expected_password = settings.admin_password.get_secret_value().encode("utf-8")

    user_ok = secrets.compare_digest(username.encode("utf-8"), expected_user)
    password_ok = secrets.compare_digest(password.encode("utf-8"), expected_password)
    return user_ok and password_ok


def require_admin(
    credentials: Optional[HTTPBasicCredentials] = Depends(_basic_auth),
    settings: APISettings = Depends(get_settings),
) -> str:
    """
    Require the admin credential via HTTP Basic auth.

    Use as FastAPI dependency:
        @router.get("/endpoint")
        def endpoint(admin: str = Depends(require_admin)):
            ...

    Raises:
        HTTPException: 401 if credentials are missing or wrong
    """
    if credentials is None or not check_admin_credentials(
        credentials.username, credentials.password, settings
    ):
        logger.warning("Rejected admin request: invalid or missing credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    return credentials.username
