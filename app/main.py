"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    setup_logging()
    logger.info("Starting Trainings Calculator API", version=settings.VERSION)
    yield
    logger.info("Shutting down Trainings Calculator API")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Distance, speed and calorie statistics for running, walking and swimming.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan)

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Trainings Calculator API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "trainings-calculator-api",
        "version": settings.VERSION
    }


def run() -> None:
    """Development server: loads ``.env`` and serves the API with uvicorn in reload mode."""
    load_dotenv()
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
