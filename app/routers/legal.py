"""
Legal & tax hub endpoints.

Route summary
-------------
GET  /api/legal/compliance-items/init      — seed sample items (public)
GET  /api/legal/compliance-items           — items for a business type / state
POST /api/legal/compliance-items/generate  — existing or AI-generated items
POST /api/legal/compliance-progress        — mark an item done / not done
GET  /api/legal/guides                     — static guides
GET  /api/legal/guides/{guide_id}          — one guide
POST /api/legal/chat                       — legal assistant (markdown)
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.dependencies.auth import get_or_create_user
from app.models.database_models import ComplianceItem, User
from app.models.schemas import (
    ComplianceGenerateRequest,
    ComplianceGenerateResponse,
    ComplianceItemResponse,
    ComplianceListResponse,
    ComplianceProgressRequest,
    ComplianceProgressResponse,
    LegalChatRequest,
    LegalChatResponse,
    LegalGuide,
    LegalGuideListResponse,
    LegalGuideResponse,
    MessageResponse,
)
from app.services import compliance
from app.services.ai_gateway import GeminiGateway, get_ai_gateway
from app.services.results import unwrap
from app.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


def item_response(item: ComplianceItem) -> ComplianceItemResponse:
    return ComplianceItemResponse(
        id=item.id,
        title=item.title,
        description=item.description,
        category=item.category,
        priority=item.priority,
        applicable_business_types=item.applicable_business_types or [],
        applicable_states=item.applicable_states or [],
        due_date=item.due_date,
        link=item.link,
        status=item.status,
        steps=item.steps or [],
        fees=item.fees,
        helpful_links=item.helpful_links or [],
        template_url=item.template_url,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# COMPLIANCE CHECKLIST
# ═══════════════════════════════════════════════════════════════════════════════

@router.get("/compliance-items/init", response_model=MessageResponse)
async def init_compliance_items(store: Store = Depends(get_store)) -> MessageResponse:
    await compliance.seed_compliance_items(store)
    return MessageResponse(message="Compliance items initialized")


@router.get("/compliance-items", response_model=ComplianceListResponse)
async def list_compliance_items(
    business_type: Optional[str] = Query(None, alias="businessType"),
    state: Optional[str] = Query(None, alias="state"),
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> ComplianceListResponse:
    """Active items for the type/state (or the user's saved profile), high priority first."""
    result = await compliance.list_items(store, user, business_type, state)
    return ComplianceListResponse(
        items=[item_response(item) for item in result["items"]],
        completed_items=result["completed_items"],
        business_type=result["business_type"],
        state=result["state"],
    )


@router.post("/compliance-items/generate", response_model=ComplianceGenerateResponse)
async def generate_compliance_items(
    body: ComplianceGenerateRequest,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
    gateway: GeminiGateway = Depends(get_ai_gateway),
) -> ComplianceGenerateResponse:
    generated = unwrap(
        await compliance.generate_items(store, gateway, user, body.business_type, body.state)
    )
    return ComplianceGenerateResponse(
        items=[item_response(item) for item in generated.items],
        message=generated.message,
        is_existing=generated.is_existing,
    )


@router.post("/compliance-progress", response_model=ComplianceProgressResponse)
async def update_compliance_progress(
    body: ComplianceProgressRequest,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> ComplianceProgressResponse:
    completed = await compliance.set_progress(store, user, body.item_id, body.completed)
    return ComplianceProgressResponse(completed_items=completed)


# ═══════════════════════════════════════════════════════════════════════════════
# GUIDES & ASSISTANT
# ═══════════════════════════════════════════════════════════════════════════════

@router.get("/guides", response_model=LegalGuideListResponse)
async def list_guides(
    user: User = Depends(get_or_create_user),
) -> LegalGuideListResponse:
    return LegalGuideListResponse(guides=[LegalGuide(**g) for g in compliance.list_guides()])


@router.get("/guides/{guide_id}", response_model=LegalGuideResponse)
async def get_guide(
    guide_id: str,
    user: User = Depends(get_or_create_user),
) -> LegalGuideResponse:
    guide = unwrap(compliance.get_guide(guide_id))
    return LegalGuideResponse(guide=LegalGuide(**guide))


@router.post("/chat", response_model=LegalChatResponse)
async def legal_chat(
    body: LegalChatRequest,
    user: User = Depends(get_or_create_user),
    gateway: GeminiGateway = Depends(get_ai_gateway),
) -> LegalChatResponse:
    """Answer a legal question in markdown, using the user's business context."""
    answer = unwrap(
        await compliance.legal_chat(gateway, user, body.message, body.business_type, body.state)
    )
    return LegalChatResponse(response=answer)
