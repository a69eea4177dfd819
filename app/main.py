"""
Main FastAPI application for the UdyamSakhi backend.
Handles CORS, request logging middleware, lifespan events, and router registration.
"""
import logging
import os
import time
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.database import close_db, init_db
from app.routers import business_plans, funding, health, legal, market, skilling, users

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Startup / shutdown helpers
# ---------------------------------------------------------------------------

async def _check_database() -> bool:
    """Initialise DB tables and verify the connection.  Returns True on success."""
    try:
        await init_db()
        logger.info("✓ Database connection OK")
        return True
    except Exception as exc:
        logger.error("✗ Database connection failed: %s", exc)
        raise


def _check_ai_key() -> bool:
    """Log whether the generative AI key is set.  Never raises."""
    if settings.AI_API_KEY:
        logger.info("✓ AI key configured (model: %s)", settings.AI_MODEL)
        return True
    logger.warning(
        "⚠ AI_API_KEY is not set; plan generation, market reports, forecasts "
        "and the legal assistant will return 502 until it is configured."
    )
    return False


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown event handler."""
    logger.info("=" * 60)
    logger.info("  Starting UdyamSakhi backend …")
    logger.info("=" * 60)

    # 1 — Database (required; raises on failure)
    await _check_database()

    # 2 — AI key (optional; logs a warning and continues)
    _check_ai_key()

    # 3 — Upload directory
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    logger.info("✓ Upload directory: %s", os.path.abspath(settings.UPLOAD_DIR))

    logger.info("=" * 60)
    logger.info("  UdyamSakhi backend ready on http://%s:%d", settings.HOST, settings.PORT)
    logger.info("  Swagger UI : http://%s:%d/docs", settings.HOST, settings.PORT)
    logger.info("  Health     : http://%s:%d/api/health", settings.HOST, settings.PORT)
    logger.info("=" * 60)

    yield  # ← server is running

    logger.info("Shutting down UdyamSakhi backend …")
    await close_db()
    logger.info("✓ Shutdown complete.")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="UdyamSakhi API",
    description=(
        "**UdyamSakhi** — AI-assisted business companion for small Indian enterprises.\n\n"
        "Generate and revise business plans, analyse markets, match online "
        "marketplaces, forecast funding needs, track legal compliance and "
        "follow courses and mentors.\n\n"
        "Key endpoints:\n"
        "- `POST /api/business-plans/generate` — generate a five-section plan\n"
        "- `POST /api/market/analyze` — AI market analysis for a plan\n"
        "- `POST /api/market/recommendations` — marketplace matches\n"
        "- `POST /api/funding/generate-forecast` — financial forecast\n"
        "- `GET  /api/legal/compliance-items` — compliance checklist\n"
        "- `POST /api/legal/chat` — legal assistant\n"
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Request / response logging middleware
# ---------------------------------------------------------------------------

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log every request with method, path, status code, and elapsed time.
    Attaches an ``X-Process-Time`` header (milliseconds) to every response.
    """
    t0 = time.monotonic()
    response = await call_next(request)
    elapsed_ms = round((time.monotonic() - t0) * 1000, 2)

    # Skip noisy health-check polling from the frontend
    if request.url.path not in ("/api/health", "/api/health/", "/"):
        logger.info(
            "%s %s → %d  (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )

    response.headers["X-Process-Time"] = f"{elapsed_ms}ms"
    return response


# ---------------------------------------------------------------------------
# Global exception handler
# ---------------------------------------------------------------------------

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Return a structured JSON error for any unhandled exception."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error": str(exc),
            "path": str(request.url.path),
            "timestamp": datetime.utcnow().isoformat(),
        },
    )


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

app.include_router(health.router,         prefix="/api/health",         tags=["Health"])
app.include_router(business_plans.router, prefix="/api/business-plans", tags=["Business Plans"])
app.include_router(market.router,         prefix="/api/market",         tags=["Market Access"])
app.include_router(funding.router,        prefix="/api/funding",        tags=["Funding"])
app.include_router(legal.router,          prefix="/api/legal",          tags=["Legal & Tax"])
app.include_router(skilling.router,       prefix="/api",                tags=["Skilling"])
app.include_router(users.router,          prefix="/api",                tags=["Users"])

# Uploaded avatars and documents
app.mount(
    "/uploads",
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="uploads",
)


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

@app.get("/", tags=["Root"], include_in_schema=False)
async def root():
    """API root — returns basic service info."""
    return {
        "name": "UdyamSakhi API",
        "version": "1.0.0",
        "description": "Business companion backend for Indian MSMEs",
        "docs": "/docs",
        "health": "/api/health",
        "endpoints": {
            "business_plans": "/api/business-plans",
            "market": "/api/market",
            "funding": "/api/funding",
            "legal": "/api/legal",
            "courses": "/api/courses",
            "mentors": "/api/mentors",
            "profile": "/api/user/profile",
            "dashboard": "/api/dashboard",
        },
    }


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        log_level="info",
    )
