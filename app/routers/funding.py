"""
Funding navigator endpoints.
"""
import logging

from fastapi import APIRouter, Depends

from app.dependencies.auth import get_or_create_user, load_authorized_plan
from app.models.database_models import User
from app.models.schemas import ForecastResponse, PlanReportRequest
from app.services.ai_gateway import GeminiGateway, get_ai_gateway
from app.services.funding import generate_forecast
from app.services.results import unwrap
from app.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-forecast", response_model=ForecastResponse)
async def generate_financial_forecast(
    body: PlanReportRequest,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
    gateway: GeminiGateway = Depends(get_ai_gateway),
) -> ForecastResponse:
    """Forecast startup costs, monthly projections and funding needs for a plan."""
    plan = await load_authorized_plan(store, user.id, body.plan_id)
    forecast = unwrap(await generate_forecast(gateway, plan))
    return ForecastResponse(forecast=forecast)
