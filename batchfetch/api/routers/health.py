"""
Health check API endpoints.

Routes: GET /health, GET /health/db

System role: Liveness and database readiness probes for the batch fetch service
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from batchfetch.api.deps import get_settings_dependency
from batchfetch.boundary.db.connection import get_async_db
from batchfetch.configs import Settings

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    environment: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings_dependency)) -> HealthResponse:
    """Basic health check. Does not touch the document store."""
    return HealthResponse(status="healthy", message="Server Healthy", environment=settings.environment)


@router.get("/db", response_model=HealthResponse)
async def database_health_check(
    settings: Settings = Depends(get_settings_dependency),
    db: AsyncSession = Depends(get_async_db),
) -> HealthResponse:
    """
    Readiness check: run SELECT 1 against the document database.

    Raises:
        HTTPException: 503 if the database is unreachable
    """
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(
            f"{__name__}:database_health_check - Database unreachable",
            extra={"error_type": type(e).__name__},
        )
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unreachable",
        ) from e
    return HealthResponse(status="healthy", message="Database Reachable", environment=settings.environment)
