"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from society_cms import __version__
from society_cms.api.errors import register_error_handlers
from society_cms.api.routes import (
    admin_slides_router,
    auth_router,
    slides_router,
    slideshow_settings_router,
    slideshows_router,
)
from society_cms.config import settings
from society_cms.db import engine

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting slideshow admin service ({settings.app_env})")
    yield
    await engine.dispose()


app = FastAPI(
    title="Society CMS Slideshow Service",
    description="Admin API for slideshows and their ordered slides",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware (can't use allow_origins=["*"] with allow_credentials=True)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(auth_router, prefix="/api/v1")
app.include_router(slideshows_router, prefix="/api/v1")
app.include_router(slides_router, prefix="/api/v1")
app.include_router(admin_slides_router, prefix="/api/v1")
app.include_router(slideshow_settings_router, prefix="/api/v1")


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "service": "society-cms"}


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "service": "Society CMS Slideshow Service",
        "version": __version__,
        "docs": "/docs",
    }
