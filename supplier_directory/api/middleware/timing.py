"""
Request Timing Middleware
Per-route-group latency for the status endpoint.
"""

import logging
import time
from collections import deque
from threading import Lock
from typing import Callable, Dict, List, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# Longest prefix first: import uploads are tracked apart from other admin calls
ROUTE_GROUPS = (
    ("/api/v1/admin/suppliers/import", "import"),
    ("/api/v1/admin", "admin"),
    ("/api/v1/suppliers", "catalogue"),
    ("/api/v1/auth", "auth"),
)
OTHER_GROUP = "other"


def route_group(path: str) -> str:
    """Map a request path onto the group its latency is reported under."""
    for prefix, group in ROUTE_GROUPS:
        if path.startswith(prefix):
            if group == "catalogue" and path.endswith("-requests"):
                return "inquiries"
            return group
    return OTHER_GROUP


class LatencyTracker:
    """Rolling window of request latencies, overall and per route group."""

    def __init__(self, window_size: int = 1000):
        self.window_size = window_size
        self._overall: deque = deque(maxlen=window_size)
        self._groups: Dict[str, deque] = {}
        self._lock = Lock()

    def record(self, latency_ms: float, group: str = OTHER_GROUP) -> None:
        with self._lock:
            self._overall.append(latency_ms)
            self._groups.setdefault(group, deque(maxlen=self.window_size)).append(latency_ms)

    def get_stats(self, group: Optional[str] = None) -> Dict[str, float]:
        """
        Latency summary in milliseconds.

        Args:
            group: Route group to summarise; all requests when omitted

        Returns:
            Dict with count, p50, p95, p99, mean and max
        """
        with self._lock:
            window = self._overall if group is None else self._groups.get(group, ())
            values = sorted(window)
        return _summarise(values)

    def groups(self) -> List[str]:
        with self._lock:
            return sorted(self._groups)


def _summarise(values: List[float]) -> Dict[str, float]:
    if not values:
        return {"count": 0, "p50": 0.0, "p95": 0.0, "p99": 0.0, "mean": 0.0, "max": 0.0}

    def pick(percentile: int) -> float:
        return values[min(int(percentile / 100.0 * len(values)), len(values) - 1)]

    return {
        "count": len(values),
        "p50": pick(50),
        "p95": pick(95),
        "p99": pick(99),
        "mean": sum(values) / len(values),
        "max": values[-1],
    }


_latency_tracker = LatencyTracker()


def get_latency_tracker() -> LatencyTracker:
    """Get global latency tracker."""
    return _latency_tracker


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """
    Time each request, set X-Response-Time and flag slow ones.

    CSV imports parse the whole upload in the request, so they are the
    usual source of slow-request warnings.
    """

    def __init__(self, app, slow_request_ms: int = 300, tracker: LatencyTracker = None):
        super().__init__(app)
        self.slow_request_ms = slow_request_ms
        self.tracker = tracker or get_latency_tracker()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        group = route_group(request.url.path)
        self.tracker.record(elapsed_ms, group)
        response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"

        if elapsed_ms > self.slow_request_ms:
            logger.warning(
                f"Slow {group} request: {request.method} {request.url.path} took {elapsed_ms:.0f}ms "
                f"(threshold {self.slow_request_ms}ms)",
                extra={"group": group, "duration_ms": elapsed_ms},
            )

        return response
