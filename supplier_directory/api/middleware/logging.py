"""
Request Logging Middleware
One access-log line per request, tagged with a request ID.
"""

import logging
import time
import uuid
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _describe(request: Request) -> str:
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return f"{request.method} {target}"


def _client_host(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Access logging for the directory API.

    The caller's X-Request-ID is reused when present, otherwise one is
    generated. Either way it is stored on `request.state` and returned in
    the response headers so a visitor's report can be matched to the logs.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        context = {"request_id": request_id, "client": _client_host(request)}

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"{_describe(request)} raised after {(time.perf_counter() - started) * 1000:.1f}ms",
                extra=context,
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"{_describe(request)} -> {response.status_code} ({elapsed_ms:.1f}ms)",
            extra={**context, "status_code": response.status_code},
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
