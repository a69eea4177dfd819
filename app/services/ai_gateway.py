"""
Gateway to the Gemini generateContent REST API.

One POST per call, raced against AI_TIMEOUT_SECONDS. Every failure mode
(missing key, timeout, transport error, non-2xx, empty candidates) comes
back as ``Failure(AI_UNAVAILABLE, "AI error: ...")``. There are no retries.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from app.config import settings
from app.services.results import Failure, FailureKind, Result, Success

logger = logging.getLogger(__name__)


def _ai_error(message: str) -> Failure:
    return Failure(FailureKind.AI_UNAVAILABLE, f"AI error: {message}")


class GeminiGateway:
    """Thin async client for ``models/{model}:generateContent``."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = settings.AI_API_KEY if api_key is None else api_key
        self.model = model or settings.AI_MODEL
        self.base_url = (base_url or settings.AI_BASE_URL).rstrip("/")
        self.timeout_seconds = timeout_seconds or settings.AI_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str, safety: bool = True) -> Result[str]:
        """
        Send *prompt* and return the concatenated candidate text.

        When *safety* is set the configured safety settings (harassment and
        hate speech at BLOCK_ONLY_HIGH by default) go with the request.
        """
        if not self.api_key:
            logger.error("generate: AI_API_KEY is not set")
            return _ai_error("AI_API_KEY environment variable is not set")

        body: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        if safety:
            body["safetySettings"] = settings.get_safety_settings()

        try:
            payload = await asyncio.wait_for(self._post(body), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error("generate: request timed out after %.0f s", self.timeout_seconds)
            return _ai_error(f"AI request timed out after {self.timeout_seconds:.0f} seconds")
        except httpx.HTTPStatusError as exc:
            logger.error(
                "generate: Gemini returned HTTP %d: %s",
                exc.response.status_code,
                exc.response.text[:300],
            )
            return _ai_error(f"upstream returned HTTP {exc.response.status_code}")
        except httpx.HTTPError as exc:
            logger.error("generate: transport error - %s", exc)
            return _ai_error(str(exc) or exc.__class__.__name__)
        except ValueError as exc:
            logger.error("generate: response body was not JSON - %s", exc)
            return _ai_error("invalid response body")

        text = self._candidate_text(payload)
        if not text:
            logger.error("generate: no candidate text in response")
            return _ai_error("Failed to generate content")
        return Success(text)

    async def _post(self, body: Dict[str, Any]) -> Dict[str, Any]:
        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            resp = await client.post(
                self.endpoint,
                json=body,
                headers={"x-goog-api-key": self.api_key},
            )
            resp.raise_for_status()
            return resp.json()

    @staticmethod
    def _candidate_text(payload: Dict[str, Any]) -> str:
        candidates: List[Dict[str, Any]] = payload.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts if isinstance(part, dict))


async def get_ai_gateway() -> GeminiGateway:
    """FastAPI dependency; tests override it with a fake."""
    return GeminiGateway()
