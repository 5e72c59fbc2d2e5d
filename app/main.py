"""
Main FastAPI application
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.routes import health, jsa, vision
from app.core.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import configure_logging
from app.core.security import RateLimiter
from app.middleware import (
    BodySizeLimitMiddleware,
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
)
from app.services.storage import create_document_store

logger = logging.getLogger(__name__)


class CachedStaticFiles(StaticFiles):
    """StaticFiles that lets clients cache successful responses"""

    def __init__(self, *args, max_age: int = 3600, **kwargs):
        super().__init__(*args, **kwargs)
        self.cache_control = f"public, max-age={max_age}"

    async def get_response(self, path, scope):
        response = await super().get_response(path, scope)
        if response.status_code in (200, 304):
            response.headers["Cache-Control"] = self.cache_control
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    settings: Settings = app.state.settings
    logger.info(
        "JSA API ready at %s (storage: %s)",
        settings.base_url,
        app.state.document_store.name,
    )
    if not settings.api_keys:
        logger.warning("API_KEY_ALLOWLIST is empty, protected routes reject all calls")
    yield
    logger.info("Shutting down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application"""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Render Job Safety Analysis documents as PDF",
        lifespan=lifespan,
    )

    # Shared state, fixed for the lifetime of the process
    app.state.settings = settings
    app.state.document_store = create_document_store(settings)
    app.state.rate_limiter = RateLimiter.from_settings(settings)

    # Middleware (last added runs first)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(BodySizeLimitMiddleware, max_body_size=settings.max_body_size)
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router, prefix="/api")
    app.include_router(vision.router, prefix="/api")
    app.include_router(jsa.router, prefix="/api")

    # Locally stored documents
    if not settings.use_remote_storage:
        app.mount(
            "/files",
            CachedStaticFiles(
                directory=settings.files_dir, max_age=settings.static_max_age
            ),
            name="files",
        )

    return app


def run() -> None:
    """Console entry point"""
    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
