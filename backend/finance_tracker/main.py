"""Finance Tracker API: main entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finance_tracker.config import settings
from finance_tracker.core.middleware import RequestLoggingMiddleware
from finance_tracker.core.storage import JsonStore, get_store

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    logger.info("Starting Finance Tracker API", env=settings.app_env, data_file=settings.data_file)
    yield
    logger.info("Shutting down Finance Tracker API")


app = FastAPI(
    title="Finance Tracker API",
    description="Personal income/expense tracking with summaries, trends and rule-based advice",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    redirect_slashes=False,
)

# ── Middleware ─────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Health Check ──────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check():
    """Liveness probe: always returns healthy if the process is running."""
    return {"status": "healthy", "version": "0.1.0"}


@app.get("/ready", tags=["system"])
def readiness_check(store: JsonStore = Depends(get_store)):
    """Readiness probe: checks the data file can be parsed."""
    checks = {"storage": "unknown", "api": "ok"}
    if store.is_readable():
        checks["storage"] = "ok"
    else:
        checks["storage"] = f"error: cannot parse {store.path}"
        return {"status": "degraded", "checks": checks}

    return {"status": "ready", "checks": checks}


# ── API Routes ────────────────────────────────────
from finance_tracker.api.v1 import analytics, budget, categories, transactions  # noqa: E402

app.include_router(transactions.router, prefix="/api/v1/transactions", tags=["transactions"])
app.include_router(categories.router, prefix="/api/v1/categories", tags=["categories"])
app.include_router(budget.router, prefix="/api/v1/budget", tags=["budget"])
app.include_router(analytics.router, prefix="/api/v1/analytics", tags=["analytics"])
