"""
Business plan generation and section regeneration.

Sections are generated one after another (never concurrently) and each
regeneration bumps that section's version by exactly one with one matching
history entry.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from app.models.database_models import BusinessPlan, PlanSection, PlanStatus, User
from app.models.schemas import BusinessPlanCreate
from app.services import prompts
from app.services.ai_gateway import GeminiGateway
from app.services.results import Failure, FailureKind, Result, Success
from app.store import Store

logger = logging.getLogger(__name__)

INITIAL_CHANGE = "Initial plan generation"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _section_entry(content: str, version: int) -> Dict[str, Any]:
    return {"content": content, "lastUpdated": _now_iso(), "version": version}


async def _generate_section(
    gateway: GeminiGateway, section: PlanSection, plan: Any
) -> Result[str]:
    result = await gateway.generate(prompts.build_section_prompt(section, plan))
    if isinstance(result, Failure):
        logger.error("Error generating %s: %s", section.value, result.message)
        return Failure(result.kind, f"Failed to generate {section.value}. {result.message}")
    return result


async def generate_plan(
    store: Store, gateway: GeminiGateway, user: User, fields: BusinessPlanCreate
) -> Result[BusinessPlan]:
    """Generate all five sections and create the plan with status ``generated``."""
    plan = BusinessPlan(
        user_id=user.id,
        business_name=fields.business_name,
        industry=fields.industry.value,
        business_idea=fields.business_idea,
        target_market=fields.target_market,
        products_services=fields.products_services,
        competition=fields.competition,
        market_size=fields.market_size,
        unique_value=fields.unique_value,
        challenges=fields.challenges,
    )

    sections: Dict[str, Dict[str, Any]] = {}
    for section in PlanSection:
        result = await _generate_section(gateway, section, plan)
        if isinstance(result, Failure):
            return result
        sections[section.value] = _section_entry(result.value, 1)

    plan.sections = sections
    plan.status = PlanStatus.GENERATED.value
    plan.version_history = [{"version": 1, "updatedAt": _now_iso(), "changes": INITIAL_CHANGE}]

    plan = await store.create_plan(plan)
    logger.info("Generated business plan %d for user %s", plan.id, user.id)
    return Success(plan)


async def regenerate_section(
    store: Store, gateway: GeminiGateway, plan: BusinessPlan, section: PlanSection
) -> Result[Dict[str, Any]]:
    """Replace one section with fresh content at version + 1."""
    section = PlanSection(section)
    current = (plan.sections or {}).get(section.value)
    if current is None:
        return Failure(FailureKind.NOT_FOUND, f"Section {section.value} not found in plan")

    result = await _generate_section(gateway, section, plan)
    if isinstance(result, Failure):
        return result

    version = int(current.get("version", 0)) + 1
    entry = _section_entry(result.value, version)
    history = {
        "version": version,
        "updatedAt": entry["lastUpdated"],
        "changes": f"Regenerated {section.value} section",
    }
    plan = await store.save_plan_section(plan, section.value, entry, history)
    logger.info("Regenerated %s of plan %d (v%d)", section.value, plan.id, version)
    return Success(plan.sections[section.value])
