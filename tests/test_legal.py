"""Tests for compliance items, progress, guides and the legal assistant."""
import json

import pytest
from httpx import AsyncClient

from tests.conftest import AUTH_HEADERS

GENERATED_ITEMS = [
    {
        "title": "FSSAI Licence",
        "description": "Food safety licence",
        "category": "Industry-Specific",
        "priority": "HIGH",
        "applicableBusinessTypes": ["All"],
        "applicableStates": ["All"],
        "steps": [{"order": 1, "description": "Apply online", "estimatedTime": "2 days"}],
        "fees": {"amount": 2000, "description": "Annual"},
    },
    {
        "title": "Shop and Establishment Registration",
        "description": "Register premises with the state labour department",
        "category": "Registration",
        "priority": "urgent",
    },
]


async def _seed(client: AsyncClient):
    resp = await client.get("/api/legal/compliance-items/init")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Compliance items initialized"


@pytest.mark.asyncio
async def test_list_items_high_priority_first(client: AsyncClient):
    await _seed(client)

    resp = await client.get("/api/legal/compliance-items", headers=AUTH_HEADERS)
    assert resp.status_code == 200
    body = resp.json()
    assert [item["title"] for item in body["items"]] == [
        "GST Registration",
        "PF Registration",
        "MSME Registration",
    ]
    assert body["businessType"] == "Other"
    assert body["state"] == "All"
    assert body["completedItems"] == []


@pytest.mark.asyncio
async def test_list_items_remembers_type_and_state(client: AsyncClient):
    await _seed(client)
    await client.get(
        "/api/legal/compliance-items",
        params={"businessType": "Retail", "state": "Goa"},
        headers=AUTH_HEADERS,
    )

    resp = await client.get("/api/legal/compliance-items", headers=AUTH_HEADERS)
    body = resp.json()
    assert body["businessType"] == "Retail"
    assert body["state"] == "Goa"


@pytest.mark.asyncio
async def test_generate_returns_existing_items_without_ai(client: AsyncClient, fake_ai):
    await _seed(client)

    resp = await client.post(
        "/api/legal/compliance-items/generate",
        json={"businessType": "Retail", "state": "Goa"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["isExisting"] is True
    assert body["message"] == "Found existing compliance items"
    assert len(body["items"]) == 3
    assert fake_ai.calls == 0


@pytest.mark.asyncio
async def test_generate_saves_ai_items_for_type_and_state(client: AsyncClient, fake_ai):
    fake_ai.queue("```json\n" + json.dumps(GENERATED_ITEMS) + "\n```")

    resp = await client.post(
        "/api/legal/compliance-items/generate",
        json={"businessType": "Food Processing", "state": "Kerala"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["isExisting"] is False
    assert body["message"] == "Generated and saved compliance items successfully"
    items = {item["title"]: item for item in body["items"]}
    assert set(items) == {"FSSAI Licence", "Shop and Establishment Registration"}
    assert items["FSSAI Licence"]["applicableBusinessTypes"] == ["Food Processing"]
    assert items["FSSAI Licence"]["applicableStates"] == ["Kerala"]
    assert items["FSSAI Licence"]["priority"] == "high"
    assert items["Shop and Establishment Registration"]["priority"] == "medium"
    assert items["Shop and Establishment Registration"]["steps"] == []

    # Second request finds the stored items
    resp = await client.post(
        "/api/legal/compliance-items/generate",
        json={"businessType": "Food Processing", "state": "Kerala"},
        headers=AUTH_HEADERS,
    )
    assert resp.json()["isExisting"] is True
    assert fake_ai.calls == 1


@pytest.mark.asyncio
async def test_generate_parse_failure_saves_nothing(client: AsyncClient, fake_ai):
    fake_ai.queue("No requirements apply.")

    resp = await client.post(
        "/api/legal/compliance-items/generate",
        json={"businessType": "Food Processing", "state": "Kerala"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 502

    resp = await client.get(
        "/api/legal/compliance-items",
        params={"businessType": "Food Processing", "state": "Kerala"},
        headers=AUTH_HEADERS,
    )
    assert resp.json()["items"] == []


@pytest.mark.asyncio
async def test_generate_requires_type_and_state(client: AsyncClient):
    resp = await client.post(
        "/api/legal/compliance-items/generate",
        json={"businessType": "", "state": "Kerala"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_progress_has_no_duplicates(client: AsyncClient):
    for _ in range(2):
        resp = await client.post(
            "/api/legal/compliance-progress",
            json={"itemId": 1, "completed": True},
            headers=AUTH_HEADERS,
        )
        assert resp.json()["completedItems"] == [1]

    resp = await client.post(
        "/api/legal/compliance-progress",
        json={"itemId": 2, "completed": True},
        headers=AUTH_HEADERS,
    )
    assert resp.json()["completedItems"] == [1, 2]

    resp = await client.post(
        "/api/legal/compliance-progress",
        json={"itemId": 1, "completed": False},
        headers=AUTH_HEADERS,
    )
    assert resp.json()["completedItems"] == [2]


@pytest.mark.asyncio
async def test_guides(client: AsyncClient):
    resp = await client.get("/api/legal/guides", headers=AUTH_HEADERS)
    assert resp.status_code == 200
    ids = [g["id"] for g in resp.json()["guides"]]
    assert ids == ["reg-1", "reg-2", "tax-1", "tax-2"]

    resp = await client.get("/api/legal/guides/tax-1", headers=AUTH_HEADERS)
    assert resp.status_code == 200
    guide = resp.json()["guide"]
    assert guide["id"] == "tax-1"
    assert "lastUpdated" in guide

    resp = await client.get("/api/legal/guides/nope", headers=AUTH_HEADERS)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Guide not found"


@pytest.mark.asyncio
async def test_chat_uses_profile_context(client: AsyncClient, fake_ai):
    await client.patch(
        "/api/user/business-profile",
        json={"state": "Karnataka", "industry": "Services"},
        headers=AUTH_HEADERS,
    )
    fake_ai.queue("## GST\nYou need to register once turnover crosses the threshold.")

    resp = await client.post(
        "/api/legal/chat",
        json={"message": "Do I need GST?", "businessType": "Consulting"},
        headers=AUTH_HEADERS,
    )
    assert resp.status_code == 200
    assert resp.json()["response"].startswith("## GST")

    prompt = fake_ai.prompts[-1]
    assert "- Type: Consulting" in prompt
    assert "- State: Karnataka" in prompt
    assert "- Sector: Services" in prompt
    assert fake_ai.safety[-1] is False


@pytest.mark.asyncio
async def test_chat_ai_failure_returns_502(client: AsyncClient, fake_ai):
    fake_ai.fail_next()
    resp = await client.post("/api/legal/chat", json={"message": "Hello"}, headers=AUTH_HEADERS)
    assert resp.status_code == 502


@pytest.mark.asyncio
async def test_chat_rejects_empty_message(client: AsyncClient):
    resp = await client.post("/api/legal/chat", json={"message": ""}, headers=AUTH_HEADERS)
    assert resp.status_code == 422
