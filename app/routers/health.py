"""
Health check endpoint.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text
from datetime import datetime
import logging

from app.database import get_db
from app.models.schemas import HealthCheckResponse
from app.services.ai_gateway import GeminiGateway, get_ai_gateway

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=HealthCheckResponse)
async def health_check(
    db: AsyncSession = Depends(get_db),
    gateway: GeminiGateway = Depends(get_ai_gateway),
):
    """
    Health check endpoint to verify system status.

    Returns:
        HealthCheckResponse with status of database and AI configuration
    """
    # Check database connection
    db_status = "ok"
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        db_status = "error"

    # Key presence only; no request is sent to the model
    ai_status = "ok" if gateway.configured else "not_configured"

    overall_status = "healthy" if db_status == "ok" and ai_status == "ok" else "degraded"

    return HealthCheckResponse(
        status=overall_status,
        database=db_status,
        ai=ai_status,
        timestamp=datetime.utcnow()
    )
