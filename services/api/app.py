"""
Resume Tailor API - FastAPI Application

Health endpoints are registered first and import nothing heavy, so they
answer even if a feature router fails to load.
"""
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env file at startup
from dotenv import load_dotenv
load_dotenv()

from .config import get_config, log_openai_key_status
from .routes.health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    config = get_config()
    logger.info("=" * 60)
    logger.info("RESUME TAILOR API STARTING")
    logger.info(f"Host: {config.host}")
    logger.info(f"Port: {config.port}")
    logger.info(f"PORT env var: {os.environ.get('PORT', 'not set')}")
    logger.info(f"Model: {config.openai_model}")
    logger.info("=" * 60)
    log_openai_key_status()
    logger.info("Healthcheck endpoints: /health, /health/fast, /health/ready")

    yield

    logger.info("Shutting down Resume Tailor API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_config()

    app = FastAPI(
        title="Resume Tailor API",
        description="Tailors resumes and cover letters to job descriptions and tracks applications",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)

    from .routes import (
        resume_router,
        cover_letter_router,
        candidates_router,
        applications_router,
        export_router,
    )

    app.include_router(resume_router, prefix="/api")
    app.include_router(cover_letter_router, prefix="/api")
    app.include_router(candidates_router, prefix="/api")
    app.include_router(applications_router, prefix="/api")
    app.include_router(export_router, prefix="/api")

    return app


# Create app instance
app = create_app()
