"""Test System Service

FastAPI application exposing per-author management of quiz definitions.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from .api.deps import get_storage_service
from .api.routers import health_router, tests_router
from .config import settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown logic"""
    configure_logging(settings.log_level)
    logger.info(
        "Starting %s v%s (store=%s, update lookup=%s)",
        settings.app_name,
        settings.app_version,
        settings.store_backend,
        settings.update_lookup,
    )
    yield
    await get_storage_service().close()
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
    debug=settings.environment == "development",
    lifespan=lifespan,
)

# Add CORS middleware
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins.split(","),
        allow_credentials=settings.cors_credentials,
        allow_methods=settings.cors_methods.split(","),
        allow_headers=settings.cors_headers.split(","),
    )

app.include_router(health_router)
app.include_router(tests_router)


@app.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    """Redirect root to API docs"""
    return RedirectResponse(url="/docs")


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "testsystem.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
