"""FastAPI application for the finance tracker API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .db.engine import engine
from .exceptions import register_exception_handlers
from .routers import (
    accounts_router,
    auth_router,
    budgets_router,
    categories_router,
    regular_payments_router,
    transactions_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    logger.info(f"Finance tracker API {__version__} starting, routes under {settings.api_prefix}")
    if not settings.has_database:
        logger.warning("DATABASE_URL or DATABASE_PASSWORD not set, using default connection settings")

    yield

    # Shutdown: release pooled connections
    await engine.dispose()
    logger.info("Finance tracker API stopped")


app = FastAPI(
    title="Finance Tracker API",
    description="Personal finance tracker: accounts, categories, transactions, budgets and regular payments",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(auth_router, prefix=settings.api_prefix)
app.include_router(accounts_router, prefix=settings.api_prefix)
app.include_router(categories_router, prefix=settings.api_prefix)
app.include_router(transactions_router, prefix=settings.api_prefix)
app.include_router(budgets_router, prefix=settings.api_prefix)
app.include_router(regular_payments_router, prefix=settings.api_prefix)


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy", "service": "finance-tracker"}


@app.get("/", tags=["Health"])
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Finance Tracker API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "api": settings.api_prefix,
    }
