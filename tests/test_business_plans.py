"""Tests for business plan generation, regeneration, listing and deletion."""
import pytest
from httpx import AsyncClient

from tests.conftest import AUTH_HEADERS, PLAN_FIELDS, create_plan

SECTIONS = [
    "executiveSummary",
    "marketAnalysis",
    "operations",
    "marketing",
    "financialProjections",
]


@pytest.mark.asyncio
async def test_generate_plan_creates_all_sections(client: AsyncClient, fake_ai):
    fake_ai.queue(*[f"{name} text" for name in SECTIONS])

    resp = await client.post("/api/business-plans/generate", json=PLAN_FIELDS, headers=AUTH_HEADERS)
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Business plan generated successfully"

    plan = body["plan"]
    assert plan["businessName"] == "Sakhi Handlooms"
    assert plan["status"] == "generated"
    assert set(plan["sections"]) == set(SECTIONS)
    for name in SECTIONS:
        assert plan["sections"][name]["content"] == f"{name} text"
        assert plan["sections"][name]["version"] == 1
    assert len(plan["versionHistory"]) == 1
    assert plan["versionHistory"][0]["changes"] == "Initial plan generation"


@pytest.mark.asyncio
async def test_sections_generated_in_order(client: AsyncClient, fake_ai):
    await create_plan(client)
    assert fake_ai.calls == 5
    assert "executive summary" in fake_ai.prompts[0]
    assert "market analysis" in fake_ai.prompts[1]
    assert "financial projections" in fake_ai.prompts[4]
    assert all(fake_ai.safety)


@pytest.mark.asyncio
async def test_generate_rejects_short_business_idea(client: AsyncClient, fake_ai):
    resp = await client.post(
        "/api/business-plans/generate",
        json={**PLAN_FIELDS, "businessIdea": "Too short"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 422
    assert fake_ai.calls == 0


@pytest.mark.asyncio
async def test_generate_rejects_unknown_industry(client: AsyncClient):
    resp = await client.post(
        "/api/business-plans/generate",
        json={**PLAN_FIELDS, "industry": "Mining"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_ai_failure_stores_nothing(client: AsyncClient, fake_ai):
    fake_ai.queue("summary")
    fake_ai.fail_next()

    resp = await client.post("/api/business-plans/generate", json=PLAN_FIELDS, headers=AUTH_HEADERS)
    assert resp.status_code == 502
    assert "Failed to generate marketAnalysis" in resp.json()["detail"]
    assert fake_ai.calls == 2

    resp = await client.get("/api/business-plans", headers=AUTH_HEADERS)
    assert resp.json() == []


@pytest.mark.asyncio
async def test_regenerate_section_bumps_version_once(client: AsyncClient, fake_ai):
    plan = await create_plan(client)

    fake_ai.queue("Marketing v2")
    resp = await client.post(
        "/api/business-plans/regenerate-section",
        json={"planId": plan["id"], "section": "marketing"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Section regenerated successfully"
    assert body["section"]["content"] == "Marketing v2"
    assert body["section"]["version"] == 2

    fake_ai.queue("Marketing v3")
    resp = await client.post(
        "/api/business-plans/regenerate-section",
        json={"planId": plan["id"], "section": "marketing"},
        headers=AUTH_HEADERS,
    )
    assert resp.json()["section"]["version"] == 3

    resp = await client.get(f"/api/business-plans/{plan['id']}", headers=AUTH_HEADERS)
    stored = resp.json()
    assert stored["sections"]["marketing"]["version"] == 3
    assert stored["sections"]["operations"]["version"] == 1
    history = stored["versionHistory"]
    assert [h["version"] for h in history] == [1, 2, 3]
    assert history[-1]["changes"] == "Regenerated marketing section"


@pytest.mark.asyncio
async def test_regenerate_failure_keeps_section(client: AsyncClient, fake_ai):
    plan = await create_plan(client)
    fake_ai.fail_next()

    resp = await client.post(
        "/api/business-plans/regenerate-section",
        json={"planId": plan["id"], "section": "operations"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 502

    resp = await client.get(f"/api/business-plans/{plan['id']}", headers=AUTH_HEADERS)
    stored = resp.json()
    assert stored["sections"]["operations"]["version"] == 1
    assert len(stored["versionHistory"]) == 1


@pytest.mark.asyncio
async def test_regenerate_rejects_unknown_section(client: AsyncClient):
    plan = await create_plan(client)
    resp = await client.post(
        "/api/business-plans/regenerate-section",
        json={"planId": plan["id"], "section": "appendix"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_list_plans_newest_first(client: AsyncClient):
    first = await create_plan(client, businessName="First Venture")
    second = await create_plan(client, businessName="Second Venture")

    resp = await client.get("/api/business-plans", headers=AUTH_HEADERS)
    assert resp.status_code == 200
    ids = [p["id"] for p in resp.json()]
    assert ids == [second["id"], first["id"]]


@pytest.mark.asyncio
async def test_delete_plan(client: AsyncClient):
    plan = await create_plan(client)

    resp = await client.delete(f"/api/business-plans/{plan['id']}", headers=AUTH_HEADERS)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Business plan deleted successfully"

    resp = await client.get(f"/api/business-plans/{plan['id']}", headers=AUTH_HEADERS)
    assert resp.status_code == 404
