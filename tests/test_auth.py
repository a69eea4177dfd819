"""Tests for authentication boundaries.

Verifies that user-scoped endpoints require X-User-Id and that users
cannot read or act on other users' business plans.
"""
import pytest
from httpx import AsyncClient

from tests.conftest import AUTH_HEADERS, AUTH_HEADERS_USER2, PLAN_FIELDS, create_plan


@pytest.mark.asyncio
async def test_list_plans_requires_auth_header(client: AsyncClient):
    """GET /api/business-plans without X-User-Id should return 401."""
    resp = await client.get("/api/business-plans")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Authentication required"


@pytest.mark.asyncio
async def test_generate_requires_auth_header(client: AsyncClient, fake_ai):
    """No AI call is made for an unauthenticated request."""
    resp = await client.post("/api/business-plans/generate", json=PLAN_FIELDS)
    assert resp.status_code == 401
    assert fake_ai.calls == 0


@pytest.mark.asyncio
async def test_profile_requires_auth_header(client: AsyncClient):
    resp = await client.get("/api/user/profile")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_public_seed_endpoints_need_no_auth(client: AsyncClient):
    resp = await client.get("/api/market/init")
    assert resp.status_code == 200
    resp = await client.get("/api/legal/compliance-items/init")
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_wrong_user_cannot_access_plan(client: AsyncClient):
    """User 2 should get 404 when accessing user 1's plan."""
    plan = await create_plan(client)

    resp = await client.get(f"/api/business-plans/{plan['id']}", headers=AUTH_HEADERS_USER2)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Business plan not found or unauthorized"


@pytest.mark.asyncio
async def test_wrong_user_cannot_delete_plan(client: AsyncClient):
    plan = await create_plan(client)

    resp = await client.delete(f"/api/business-plans/{plan['id']}", headers=AUTH_HEADERS_USER2)
    assert resp.status_code == 404

    resp = await client.get(f"/api/business-plans/{plan['id']}", headers=AUTH_HEADERS)
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_wrong_user_cannot_generate_reports(client: AsyncClient, fake_ai):
    plan = await create_plan(client)
    calls_before = fake_ai.calls

    for path in ("/api/market/analyze", "/api/market/strategies", "/api/funding/generate-forecast"):
        resp = await client.post(path, json={"planId": plan["id"]}, headers=AUTH_HEADERS_USER2)
        assert resp.status_code == 404, path

    assert fake_ai.calls == calls_before


@pytest.mark.asyncio
async def test_nonexistent_plan_returns_404(client: AsyncClient):
    resp = await client.get("/api/business-plans/999999", headers=AUTH_HEADERS)
    assert resp.status_code == 404
