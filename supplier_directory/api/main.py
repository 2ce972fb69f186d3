"""
FastAPI Main Application
Entry point for the Supplier Directory API.

Run locally with:
    python -m supplier_directory.api.main
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from ..db import get_store
from .config import get_settings
from .errors import setup_error_handlers
from .middleware import RequestLoggingMiddleware, RequestTimingMiddleware
from .routers import (
    admin_router,
    auth_router,
    health_router,
    inquiries_router,
    suppliers_router,
)

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the supplier store before the first request is served."""
    settings = get_settings()
    store = get_store()

    logger.info(
        f"{settings.app_name} {settings.version} ready: {len(store)} suppliers, "
        f"{len(store.all_categories())} categories, "
        f"uploads up to {settings.max_upload_bytes} bytes"
    )
    if not settings.seed_demo_data:
        logger.info("Demo suppliers disabled; directory starts empty")

    yield

    logger.info(f"Shutting down with {len(store)} suppliers in memory (not persisted)")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description=settings.description,
        version=settings.version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(RequestTimingMiddleware, slow_request_ms=settings.slow_request_ms)
    app.add_middleware(RequestLoggingMiddleware)

    setup_error_handlers(app)

    # Public catalogue first, admin console last
    for router in (health_router, suppliers_router, inquiries_router, auth_router, admin_router):
        app.include_router(router)

    @app.get("/")
    async def root():
        """Directory API entry points."""
        return {
            "name": settings.app_name,
            "version": settings.version,
            "endpoints": {
                "suppliers": "/api/v1/suppliers",
                "featured": "/api/v1/suppliers/featured",
                "facets": "/api/v1/suppliers/facets",
                "login": "/api/v1/auth/login",
                "admin": "/api/v1/admin/suppliers",
                "import": "/api/v1/admin/suppliers/import",
                "status": "/status",
                "docs": "/docs",
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "supplier_directory.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
