"""
Market access reports: analysis, marketplace recommendations, growth strategies.

Each generation runs prompt -> AI gateway -> normaliser -> upsert. A
failure at any step is returned as-is and the cached report stays untouched.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from app.models.database_models import BusinessPlan, MarketPlace, ReportType
from app.services import prompts
from app.services.ai_gateway import GeminiGateway
from app.services.catalog_seed import SAMPLE_MARKETPLACES
from app.services.marketplace_matcher import MatchWeights, match_marketplaces
from app.services.response_normalizer import (
    normalize_growth_strategies,
    normalize_market_analysis,
)
from app.services.results import Failure, Result, Success
from app.store import Store

logger = logging.getLogger(__name__)


class MarketReportService:
    """Generates and caches the three market reports for a plan."""

    def __init__(
        self,
        store: Store,
        gateway: GeminiGateway,
        weights: Optional[MatchWeights] = None,
    ) -> None:
        self.store = store
        self.gateway = gateway
        self.weights = weights or MatchWeights.from_settings()

    async def seed_marketplaces(self) -> int:
        return await self.store.seed_if_empty(MarketPlace, SAMPLE_MARKETPLACES)

    async def generate_analysis(self, user_id: str, plan: BusinessPlan) -> Result[Dict[str, Any]]:
        return await self._generate(
            user_id,
            plan,
            ReportType.ANALYSIS,
            prompts.build_market_analysis_prompt(plan),
            normalize_market_analysis,
        )

    async def generate_strategies(self, user_id: str, plan: BusinessPlan) -> Result[Dict[str, Any]]:
        return await self._generate(
            user_id,
            plan,
            ReportType.STRATEGIES,
            prompts.build_growth_strategies_prompt(plan),
            normalize_growth_strategies,
        )

    async def generate_recommendations(
        self, user_id: str, plan: BusinessPlan
    ) -> Result[Dict[str, Any]]:
        """Score the active marketplace catalogue (seeding it first if empty)."""
        marketplaces = await self.store.list_active_marketplaces()
        if not marketplaces:
            await self.seed_marketplaces()
            marketplaces = await self.store.list_active_marketplaces()

        data = {"recommendations": match_marketplaces(plan, marketplaces, self.weights)}
        saved = await self.store.upsert_market_data(
            user_id, plan.id, ReportType.RECOMMENDATIONS.value, data
        )
        logger.info(
            "Saved %d marketplace recommendations for plan %d",
            len(data["recommendations"]),
            plan.id,
        )
        return Success(saved.data)

    async def get_cached(
        self, user_id: str, plan_id: int, tab_type: ReportType
    ) -> Optional[Dict[str, Any]]:
        row = await self.store.get_market_data(user_id, plan_id, ReportType(tab_type).value)
        return row.data if row is not None else None

    async def _generate(
        self,
        user_id: str,
        plan: BusinessPlan,
        tab_type: ReportType,
        prompt: str,
        normalize: Callable[[str], Result[Dict[str, Any]]],
    ) -> Result[Dict[str, Any]]:
        raw = await self.gateway.generate(prompt)
        if isinstance(raw, Failure):
            return raw

        normalized = normalize(raw.value)
        if isinstance(normalized, Failure):
            logger.warning("Not caching %s for plan %d: %s", tab_type.value, plan.id, normalized.message)
            return normalized

        saved = await self.store.upsert_market_data(user_id, plan.id, tab_type.value, normalized.value)
        logger.info("Saved %s report for plan %d", tab_type.value, plan.id)
        return Success(saved.data)
