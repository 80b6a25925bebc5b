# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Orbital Payouts API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python scripts/start_api.py
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.exceptions import PayoutsException, payouts_exception_handler
from app.routers import health, payouts

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup configuration and shutdown. There are no connections
    or background tasks to manage.
    """
    logger.info(f"Starting Orbital Payouts API in {settings.ENVIRONMENT} mode")
    logger.info(f"Listening at http://{settings.API_HOST}:{settings.API_PORT}")
    logger.info(f"Max epoch number: {settings.MAX_EPOCH}")

    yield

    logger.info("Shutting down Orbital Payouts API")


# Create FastAPI application
app = FastAPI(
    title="Orbital Payouts API",
    description="""
## Epoch Payout Weights

Given an epoch number `n`, returns every divisor of `n` paired with its
payout weight `d / sigma(n)`, where `sigma(n)` is the sum of the divisors
of `n`. The weights of one epoch always sum to 1.

### Quick Start

```bash
curl http://localhost:3000/payouts/6
# [{"token":1,"weight":0.0833...},{"token":2,"weight":0.1666...},
#  {"token":3,"weight":0.25},{"token":6,"weight":0.5}]
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Payouts",
            "description": "Divisor payout weights per epoch",
        },
        {
            "name": "Health",
            "description": "API health and liveness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=settings.is_production,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(PayoutsException)
async def handle_payouts_exception(request: Request, exc: PayoutsException):
    """Handle custom Payouts API exceptions."""
    return await payouts_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Payout endpoints (GET /payouts/{number})
app.include_router(
    payouts.router,
    tags=["Payouts"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Orbital Payouts API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
