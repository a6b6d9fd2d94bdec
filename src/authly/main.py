# src/authly/main.py
"""Main entry point for the Authly application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from authly import __version__
from authly.api import auth_router, charts_router
from authly.api.routing import install_error_handlers
from authly.core.settings import settings
from authly.services.staging import UploadStaging

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if not settings.auth_secret:
        logger.critical("AUTH_SECRET is not set; sign-in and chart routes will fail")
    if not settings.cdn_token:
        logger.warning("CDN_TOKEN is not set; audio uploads will fail")
    logger.info("%s listening on %s:%s", settings.app_name, settings.host, settings.port)
    yield


# Initialize FastAPI app
app = FastAPI(
    title="Authly API",
    description="Sign in by replaying a rhythm instead of typing a password",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
    expose_headers=["X-Total-Count", "X-Total-Pages"],
)

install_error_handlers(app)

# Shared by every request; entries live only for one upload round trip.
app.state.upload_staging = UploadStaging()

# Include API routers
app.include_router(auth_router)
app.include_router(charts_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "description": "Rhythm-based authentication API",
        "docs": "/docs",
    }


def run() -> None:
    import uvicorn

    uvicorn.run("authly.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
