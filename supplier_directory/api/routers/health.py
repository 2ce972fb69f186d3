"""
Health Check Endpoints
GET /health - Liveness
GET /status - Directory size, recorded inquiries and latency by route group
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from ...db import SupplierStore
from ..config import APISettings, get_settings
from ..dependencies import get_inquiries, get_supplier_store
from ..middleware.timing import get_latency_tracker
from ..services.inquiry_service import InquiryService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _latency_block(stats: Dict[str, float]) -> Dict[str, float]:
    return {
        "requests": stats["count"],
        "p50_ms": round(stats["p50"], 2),
        "p95_ms": round(stats["p95"], 2),
        "p99_ms": round(stats["p99"], 2),
    }


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/status", status_code=status.HTTP_200_OK)
async def status_check(
    settings: APISettings = Depends(get_settings),
    store: SupplierStore = Depends(get_supplier_store),
    inquiries: InquiryService = Depends(get_inquiries),
) -> Dict[str, Any]:
    """
    Detailed status check.

    Everything is held in memory, so the only health signal is that the
    store answers; the rest is reporting.
    """
    tracker = get_latency_tracker()
    supplier_count = len(store)

    if supplier_count == 0:
        logger.info("Status check: supplier directory is empty")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.version,
        "directory": {
            "suppliers": supplier_count,
            "categories": len(store.all_categories()),
            "cities": len(store.all_cities()),
            "inquiries_recorded": inquiries.count(),
        },
        "latency": {
            "overall": _latency_block(tracker.get_stats()),
            "by_group": {group: _latency_block(tracker.get_stats(group)) for group in tracker.groups()},
        },
    }
