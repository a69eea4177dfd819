"""Tests for the Gemini gateway using httpx.MockTransport."""
import asyncio
import json

import httpx
import pytest

from app.services.ai_gateway import GeminiGateway
from app.services.results import Failure, FailureKind, Success


def _reply(*texts):
    return {"candidates": [{"content": {"parts": [{"text": t} for t in texts]}}]}


def _gateway(handler, **kwargs) -> GeminiGateway:
    kwargs.setdefault("api_key", "secret")
    return GeminiGateway(
        model="gemini-test",
        base_url="https://ai.example/v1beta",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_generate_returns_candidate_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["key"] = request.headers.get("x-goog-api-key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_reply("Hello ", "world"))

    result = await _gateway(handler).generate("Say hello")

    assert result == Success("Hello world")
    assert seen["url"] == "https://ai.example/v1beta/models/gemini-test:generateContent"
    assert seen["key"] == "secret"
    assert seen["body"]["contents"][0]["parts"][0]["text"] == "Say hello"
    assert {s["category"] for s in seen["body"]["safetySettings"]} == {
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
    }


@pytest.mark.asyncio
async def test_generate_without_safety_settings():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_reply("ok"))

    await _gateway(handler).generate("prompt", safety=False)
    assert "safetySettings" not in seen["body"]


@pytest.mark.asyncio
async def test_missing_key_fails_without_request():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=_reply("unused"))

    result = await _gateway(handler, api_key="").generate("prompt")

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.AI_UNAVAILABLE
    assert result.message == "AI error: AI_API_KEY environment variable is not set"
    assert calls == []


@pytest.mark.asyncio
async def test_non_2xx_is_ai_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": {"message": "boom"}})

    result = await _gateway(handler).generate("prompt")
    assert result == Failure(FailureKind.AI_UNAVAILABLE, "AI error: upstream returned HTTP 500")


@pytest.mark.asyncio
async def test_empty_candidates_fail():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"candidates": []})

    result = await _gateway(handler).generate("prompt")
    assert result == Failure(FailureKind.AI_UNAVAILABLE, "AI error: Failed to generate content")


@pytest.mark.asyncio
async def test_non_json_body_fails():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    result = await _gateway(handler).generate("prompt")
    assert result == Failure(FailureKind.AI_UNAVAILABLE, "AI error: invalid response body")


@pytest.mark.asyncio
async def test_slow_upstream_times_out():
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1)
        return httpx.Response(200, json=_reply("too late"))

    result = await _gateway(handler, timeout_seconds=0.05).generate("prompt")
    assert isinstance(result, Failure)
    assert result.kind is FailureKind.AI_UNAVAILABLE
    assert "timed out" in result.message


@pytest.mark.asyncio
async def test_transport_error_is_ai_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = await _gateway(handler).generate("prompt")
    assert result == Failure(FailureKind.AI_UNAVAILABLE, "AI error: connection refused")


def test_configured_reflects_key():
    assert GeminiGateway(api_key="k").configured
    assert not GeminiGateway(api_key="").configured
