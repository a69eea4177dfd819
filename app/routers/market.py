"""
Market access endpoints.

Route summary
-------------
GET  /api/market/init             — seed the marketplace catalogue (public)
POST /api/market/analyze          — AI market analysis for a plan
POST /api/market/recommendations  — marketplace matches for a plan
POST /api/market/strategies       — AI growth strategies for a plan
GET  /api/market/data             — cached report for (planId, tabType)
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.dependencies.auth import get_or_create_user, load_authorized_plan
from app.models.database_models import ReportType, User
from app.models.schemas import (
    MarketDataResponse,
    MarketReportResponse,
    MessageResponse,
    PlanReportRequest,
)
from app.services.ai_gateway import GeminiGateway, get_ai_gateway
from app.services.market_reports import MarketReportService
from app.services.results import unwrap
from app.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_report_service(
    store: Store = Depends(get_store),
    gateway: GeminiGateway = Depends(get_ai_gateway),
) -> MarketReportService:
    return MarketReportService(store, gateway)


@router.get("/init", response_model=MessageResponse)
async def init_marketplaces(
    service: MarketReportService = Depends(get_report_service),
) -> MessageResponse:
    """Insert the sample marketplaces when the catalogue is empty."""
    await service.seed_marketplaces()
    return MessageResponse(message="Marketplaces initialized")


@router.post("/analyze", response_model=MarketReportResponse)
async def analyze_market(
    body: PlanReportRequest,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
    service: MarketReportService = Depends(get_report_service),
) -> MarketReportResponse:
    plan = await load_authorized_plan(store, user.id, body.plan_id)
    data = unwrap(await service.generate_analysis(user.id, plan))
    return MarketReportResponse(data=data)


@router.post("/recommendations", response_model=MarketReportResponse)
async def recommend_marketplaces(
    body: PlanReportRequest,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
    service: MarketReportService = Depends(get_report_service),
) -> MarketReportResponse:
    plan = await load_authorized_plan(store, user.id, body.plan_id)
    data = unwrap(await service.generate_recommendations(user.id, plan))
    return MarketReportResponse(data=data)


@router.post("/strategies", response_model=MarketReportResponse)
async def growth_strategies(
    body: PlanReportRequest,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
    service: MarketReportService = Depends(get_report_service),
) -> MarketReportResponse:
    plan = await load_authorized_plan(store, user.id, body.plan_id)
    data = unwrap(await service.generate_strategies(user.id, plan))
    return MarketReportResponse(data=data)


@router.get("/data", response_model=MarketDataResponse)
async def get_market_data(
    plan_id: Optional[int] = Query(None, alias="planId"),
    tab_type: Optional[str] = Query(None, alias="tabType"),
    user: User = Depends(get_or_create_user),
    service: MarketReportService = Depends(get_report_service),
) -> MarketDataResponse:
    """Return the cached report, or ``{"data": null}`` when none exists yet."""
    if plan_id is None or not tab_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="planId and tabType are required",
        )
    try:
        report_type = ReportType(tab_type)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid tabType")

    return MarketDataResponse(data=await service.get_cached(user.id, plan_id, report_type))
