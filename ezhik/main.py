"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, cast

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ezhik.api.public.routes import router as public_router
from ezhik.api.v1.router import api_router
from ezhik.config import settings
from ezhik.core.logging import setup_logging
from ezhik.services.email_renderer import registry
from ezhik.services.stats import StatsCounter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    setup_logging(settings.debug)

    logger.info(
        "Starting Ezhik",
        extra={
            "environment": settings.environment,
            "version": settings.app_version,
            "groq_enabled": settings.groq_enabled,
            "block_types": len(registry.block_types),
        },
    )
    if not settings.groq_enabled:
        logger.warning("GROQ_API_KEY not set; AI endpoints will return 503")

    yield

    logger.info("Shutting down Ezhik")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Idea generator and table-based email builder",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.stats = StatsCounter()

    # CORS middleware
    app.add_middleware(
        cast(Any, CORSMiddleware),
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get(
        "/health",
        summary="Health check",
        description="Return service health status and backend version information.",
    )
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.app_version}

    app.include_router(public_router)

    return app


app = create_app()
