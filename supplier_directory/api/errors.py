"""
Error Handlers
Every failure leaves the API in the same envelope:

    {"error": {"message": ..., "type": ..., "details": ...}}
"""

import logging
from typing import Any, Dict, Optional, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..db.store import SupplierNotFoundError
from ..ingestion.exceptions import CSVIngestionError, UploadRejectedError

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    message: str,
    error_type: str,
    details: Optional[Union[Dict[str, Any], list]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body = {"message": message, "type": error_type}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body}, headers=headers)


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict = None,
        error_type: str = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_type = error_type or self.__class__.__name__
        super().__init__(self.message)


class ResourceNotFoundError(APIError):
    """Exception raised when resource is not found."""

    def __init__(self, resource: str, resource_id: Union[int, str]):
        super().__init__(
            message=f"{resource} not found: {resource_id}",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": resource, "id": resource_id},
        )


class IngestionFailedError(APIError):
    """
    An uploaded CSV could not be turned into suppliers.

    Reported with the pipeline's own failure class as the error type
    (MalformedInputError, SchemaError, EmptyResultError) so the admin
    console can tell the three apart.
    """

    def __init__(self, exc: CSVIngestionError):
        super().__init__(
            message=exc.message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"kind": exc.kind, **exc.details},
            error_type=exc.__class__.__name__,
        )


class UploadError(APIError):
    """An upload was turned away before parsing."""

    STATUS_BY_KIND = {
        "invalid_file_type": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        "file_too_large": status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    }

    def __init__(self, exc: UploadRejectedError):
        super().__init__(
            message=exc.message,
            status_code=self.STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST),
            details={"kind": exc.kind, **exc.details},
        )


def as_api_error(exc: Exception) -> APIError:
    """Translate a domain exception into the matching API error."""
    if isinstance(exc, UploadRejectedError):
        return UploadError(exc)
    if isinstance(exc, CSVIngestionError):
        return IngestionFailedError(exc)
    if isinstance(exc, SupplierNotFoundError):
        return ResourceNotFoundError("Supplier", exc.value)
    raise TypeError(f"No API error mapping for {type(exc).__name__}")


def setup_error_handlers(app: FastAPI) -> None:
    """
    Set up custom error handlers for the FastAPI app.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{exc.error_type} on {request.url.path}: {exc.message}",
            extra={"status_code": exc.status_code, "details": exc.details},
        )
        return error_response(exc.status_code, exc.message, exc.error_type, exc.details)

    @app.exception_handler(CSVIngestionError)
    async def ingestion_error_handler(request: Request, exc: CSVIngestionError):
        return await api_error_handler(request, as_api_error(exc))

    @app.exception_handler(SupplierNotFoundError)
    async def not_found_handler(request: Request, exc: SupplierNotFoundError):
        return await api_error_handler(request, as_api_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Wrap framework HTTP errors (401, 404 route, 405) in the envelope."""
        return error_response(
            exc.status_code,
            str(exc.detail),
            "HTTPException",
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")

        errors = [
            {
                "loc": list(error.get("loc", [])),
                "msg": str(error.get("msg", "")),
                "type": error.get("type", ""),
            }
            for error in exc.errors()
        ]
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY, "Request validation failed", "ValidationError", errors
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logger.warning(f"Value error on {request.url.path}: {exc}")
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc), "ValueError")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unexpected error on {request.url.path}: {exc}", exc_info=True)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred", "InternalServerError"
        )
