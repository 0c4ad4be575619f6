"""
RadarCol — dashboard API for public procurement risk analysis.

Serves paginated contract listings with risk statistics and per-contract
AI analyses, backed by the upstream contracts scoring API.

Run with: uvicorn radarcol.main:app --port 8001 --reload
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware

# Configure structured logging FIRST (before any logger calls)
from .middleware.structlog_config import configure as configure_logging
configure_logging(os.environ.get("LOG_LEVEL", "INFO"))

import structlog

from .cache import app_cache
from .config.api_config import ApiConfig
from .dependencies import get_api_config
from .middleware import RequestLoggingMiddleware, register_error_handlers
from .routers import analysis_router, dashboard_router

logger = structlog.get_logger("radarcol.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: log where the upstream API lives."""
    config = get_api_config()
    logger.info(
        "startup",
        upstream=config.base_url,
        timeout_seconds=config.timeout_seconds,
        strict_risk_levels=config.strict_risk_levels,
    )
    yield
    logger.info("shutdown")


API_TITLE = "RadarCol — Contract Risk Dashboard API"
API_DESCRIPTION = """
Public procurement contracts annotated with risk scores and AI
explanations (SHAP feature attributions).

- **Dashboard** - Filtered, paginated contracts with local and server-wide statistics
- **Analysis** - Per-contract AI explanation and ranked SHAP values
"""
API_VERSION = "1.0.0"

_docs_enabled = os.environ.get("ENABLE_DOCS", "true").lower() == "true"
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
    lifespan=lifespan,
)

register_error_handlers(app)

# Request logging middleware (added before CORS so it wraps it)
app.add_middleware(RequestLoggingMiddleware)

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


def cors_origins_from_env() -> list[str]:
    """Read CORS_ORIGINS; a wildcard is rejected in favour of the localhost defaults."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    if "*" in origins:
        logger.warning("cors_wildcard_rejected", fallback=DEFAULT_CORS_ORIGINS)
        return list(DEFAULT_CORS_ORIGINS)
    return origins


app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins_from_env(),
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["Content-Type", "Accept", "Accept-Language"],
)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response


app.include_router(dashboard_router, prefix="/api/v1")
app.include_router(analysis_router, prefix="/api/v1")


@app.get("/", tags=["root"])
async def root():
    """API root - returns basic info and links."""
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "docs": "/docs" if _docs_enabled else None,
        "endpoints": {
            "dashboard_contracts": "/api/v1/dashboard/contracts",
            "contract_analysis": "/api/v1/analysis/{contract_id}",
            "health": "/health",
        },
    }


@app.get("/health", tags=["root"])
async def health(config: ApiConfig = Depends(get_api_config)):
    """Liveness check. Does not call the upstream API."""
    return {
        "status": "ok",
        "upstream": config.base_url,
        "caches": app_cache.stats(),
    }
