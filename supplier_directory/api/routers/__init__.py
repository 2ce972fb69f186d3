"""
API Routers
FastAPI route handlers for different endpoints.
"""

from .admin import router as admin_router
from .auth import router as auth_router
from .health import router as health_router
from .inquiries import router as inquiries_router
from .suppliers import router as suppliers_router

__all__ = [
    "health_router",
    "auth_router",
    "suppliers_router",
    "inquiries_router",
    "admin_router",
]
