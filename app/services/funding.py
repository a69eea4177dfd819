"""Financial forecast generation. Forecasts are returned, not stored."""
from __future__ import annotations

import logging
from typing import Any, Dict

from app.models.database_models import BusinessPlan
from app.services import prompts
from app.services.ai_gateway import GeminiGateway
from app.services.response_normalizer import normalize_financial_forecast
from app.services.results import Failure, Result

logger = logging.getLogger(__name__)


async def generate_forecast(gateway: GeminiGateway, plan: BusinessPlan) -> Result[Dict[str, Any]]:
    raw = await gateway.generate(prompts.build_financial_forecast_prompt(plan), safety=False)
    if isinstance(raw, Failure):
        return raw

    forecast = normalize_financial_forecast(raw.value)
    if isinstance(forecast, Failure):
        logger.error("Forecast parsing error for plan %d: %s", plan.id, forecast.message)
    return forecast
