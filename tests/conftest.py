"""
Shared fixtures for UdyamSakhi backend integration tests.

Runs against SQLite (aiosqlite) by default; point TEST_DATABASE_URL at a
PostgreSQL database to exercise asyncpg instead. Every test gets freshly
created tables and a fake AI gateway whose replies are queued by the test.
"""
from __future__ import annotations

import os
import tempfile
from typing import AsyncGenerator, List, Union

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

# Override settings *before* any app module is imported, so that
# settings.DATABASE_URL and the global engine point at the test DB.
TEST_DATABASE_URL = os.environ.get(
    "TEST_DATABASE_URL",
    "sqlite+aiosqlite:///./test.db",
)
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="udyamsakhi-uploads-")
os.environ["AI_API_KEY"] = "test-key"

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import database_models  # noqa: E402,F401
from app.services.ai_gateway import get_ai_gateway  # noqa: E402
from app.services.results import Failure, FailureKind, Success  # noqa: E402


# ---------------------------------------------------------------------------
# Fake AI gateway
# ---------------------------------------------------------------------------

class FakeGateway:
    """
    Stands in for GeminiGateway. Replies are served from a queue; once it
    is empty every call returns ``DEFAULT_REPLY``.
    """

    DEFAULT_REPLY = "Generated content"

    def __init__(self) -> None:
        self.replies: List[Union[str, Failure]] = []
        self.prompts: List[str] = []
        self.safety: List[bool] = []
        self.configured = True

    def queue(self, *replies: Union[str, Failure]) -> None:
        self.replies.extend(replies)

    def fail_next(self, message: str = "AI error: upstream returned HTTP 503") -> None:
        self.replies.append(Failure(FailureKind.AI_UNAVAILABLE, message))

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def generate(self, prompt: str, safety: bool = True):
        self.prompts.append(prompt)
        self.safety.append(safety)
        reply = self.replies.pop(0) if self.replies else self.DEFAULT_REPLY
        if isinstance(reply, Failure):
            return reply
        return Success(reply)


# ---------------------------------------------------------------------------
# Per-test fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a DB session for each test. Tables are created before and
    dropped after, so each test starts with a clean slate.
    """
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def fake_ai() -> FakeGateway:
    return FakeGateway()


@pytest_asyncio.fixture
async def client(
    db_session: AsyncSession, fake_ai: FakeGateway
) -> AsyncGenerator[AsyncClient, None]:
    """
    httpx AsyncClient wired to the FastAPI app with the DB and AI
    dependencies overridden to use the per-test session and fake gateway.
    """

    async def _override_get_db():
        yield db_session

    async def _override_get_ai_gateway():
        return fake_ai

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_ai_gateway] = _override_get_ai_gateway

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

AUTH_HEADERS = {
    "X-User-Id": "test-user-1",
    "X-User-Email": "test1@example.com",
    "X-User-Name": "Test User 1",
}

AUTH_HEADERS_USER2 = {
    "X-User-Id": "test-user-2",
    "X-User-Email": "test2@example.com",
    "X-User-Name": "Test User 2",
}

PLAN_FIELDS = {
    "businessName": "Sakhi Handlooms",
    "industry": "Retail",
    "businessIdea": (
        "Handwoven cotton sarees and stoles sourced directly from women weavers "
        "in rural Maharashtra and sold online across India."
    ),
    "targetMarket": "Urban B2C shoppers across Pan India",
    "productsServices": "Clothing and Accessories",
    "competition": "Fabindia, local boutiques",
}


async def create_plan(client: AsyncClient, headers=AUTH_HEADERS, **overrides) -> dict:
    """Generate a plan through the API and return its JSON body."""
    resp = await client.post(
        "/api/business-plans/generate",
        json={**PLAN_FIELDS, **overrides},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["plan"]
