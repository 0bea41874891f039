"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from modelgen.config import get_settings
from modelgen.core.logging import setup_logging, get_logger
from modelgen.core.error_handlers import register_error_handlers
from modelgen.core.middleware import RequestContextMiddleware
from modelgen.api.routes import router as api_router

settings = get_settings()


# ─── Lifespan: startup / shutdown ─────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own the shared HTTP client used to fetch remote records."""
    logger = get_logger(__name__)

    setup_logging(level=settings.log_level, log_format=settings.log_format)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.source_api_timeout),
        follow_redirects=True,
    ) as http_client:
        app.state.http_client = http_client
        logger.info(
            "Application starting",
            extra={
                "app": settings.app_name,
                "version": settings.app_version,
                "env": settings.app_env,
            },
        )
        yield

    logger.info("Application shut down gracefully.")


# ─── App factory ──────────────────────────────────────────────────────

def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestContextMiddleware)

    register_error_handlers(application)

    application.include_router(api_router, prefix="/api/v1")

    @application.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.app_version,
        }

    return application


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "modelgen.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
