"""
PURPOSE: API router initialization and exports for the MNQ Strat relay.

This module aggregates the alert webhook and system routers into a single
api_router that is included in the main FastAPI application. Paths are
unprefixed because TradingView alerts are already configured against
/webhook/1min and /webhook/15min.
"""

from fastapi import APIRouter

from app.api.routes_system import router as system_router
from app.api.routes_webhook import router as webhook_router

# Create the main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(webhook_router, tags=["webhook"])
api_router.include_router(system_router, tags=["system"])

__all__ = ["api_router"]
