"""
Business plan endpoints.

Route summary
-------------
POST   /api/business-plans/generate            — generate all five sections
GET    /api/business-plans                     — list user's plans
GET    /api/business-plans/{plan_id}           — plan detail
POST   /api/business-plans/regenerate-section  — regenerate one section
DELETE /api/business-plans/{plan_id}           — delete plan
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, status

from app.dependencies.auth import (
    get_authorized_plan,
    get_or_create_user,
    load_authorized_plan,
)
from app.models.database_models import BusinessPlan, User
from app.models.schemas import (
    BusinessPlanCreate,
    BusinessPlanGenerateResponse,
    BusinessPlanResponse,
    MessageResponse,
    PlanSectionResponse,
    RegenerateSectionRequest,
    SectionRegenerateResponse,
)
from app.services import business_plans
from app.services.ai_gateway import GeminiGateway, get_ai_gateway
from app.services.results import unwrap
from app.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


def plan_response(plan: BusinessPlan) -> BusinessPlanResponse:
    return BusinessPlanResponse(
        id=plan.id,
        business_name=plan.business_name,
        industry=plan.industry,
        business_idea=plan.business_idea,
        target_market=plan.target_market,
        products_services=plan.products_services,
        competition=plan.competition,
        market_size=plan.market_size,
        unique_value=plan.unique_value,
        challenges=plan.challenges,
        sections=plan.sections or {},
        status=plan.status,
        version_history=plan.version_history or [],
        created_at=plan.created_at,
        updated_at=plan.updated_at,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# GENERATION
# ═══════════════════════════════════════════════════════════════════════════════

@router.post(
    "/generate",
    response_model=BusinessPlanGenerateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_business_plan(
    body: BusinessPlanCreate,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
    gateway: GeminiGateway = Depends(get_ai_gateway),
) -> BusinessPlanGenerateResponse:
    """Generate every section in turn and store the plan as ``generated``."""
    plan = unwrap(await business_plans.generate_plan(store, gateway, user, body))
    return BusinessPlanGenerateResponse(
        message="Business plan generated successfully",
        plan=plan_response(plan),
    )


@router.post("/regenerate-section", response_model=SectionRegenerateResponse)
async def regenerate_section(
    body: RegenerateSectionRequest,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
    gateway: GeminiGateway = Depends(get_ai_gateway),
) -> SectionRegenerateResponse:
    plan = await load_authorized_plan(store, user.id, body.plan_id)
    section = unwrap(await business_plans.regenerate_section(store, gateway, plan, body.section))
    return SectionRegenerateResponse(
        message="Section regenerated successfully",
        section=PlanSectionResponse(**section),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# CRUD
# ═══════════════════════════════════════════════════════════════════════════════

@router.get("", response_model=List[BusinessPlanResponse])
async def list_business_plans(
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> List[BusinessPlanResponse]:
    """List the authenticated user's plans, newest first."""
    return [plan_response(plan) for plan in await store.list_plans(user.id)]


@router.get("/{plan_id}", response_model=BusinessPlanResponse)
async def get_business_plan(
    plan: BusinessPlan = Depends(get_authorized_plan),
) -> BusinessPlanResponse:
    return plan_response(plan)


@router.delete("/{plan_id}", response_model=MessageResponse)
async def delete_business_plan(
    plan: BusinessPlan = Depends(get_authorized_plan),
    store: Store = Depends(get_store),
) -> MessageResponse:
    """Delete a plan. Cached market reports for it are left in place."""
    plan_id = plan.id
    await store.delete_plan(plan)
    logger.info("Deleted business plan id=%d", plan_id)
    return MessageResponse(message="Business plan deleted successfully")
