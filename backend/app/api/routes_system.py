"""
PURPOSE: System-level API routes for the MNQ Strat relay.

Provides the connectivity check endpoint used when wiring up a new
TradingView alert: it echoes the posted body back unchanged.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

from app.api.routes_webhook import read_alert_body
from app.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["system"])


@router.post("/test")
async def echo_test(request: Request) -> Dict[str, Any]:
    """
    PURPOSE: Echo the posted body so callers can verify connectivity and payload shape.

    CALLED BY: Operators, TradingView alert setup

    Returns:
        dict: {"success": true, "received": <decoded body>}
    """
    body = await read_alert_body(request)
    logger.info("test_request_received", body=body)
    return {"success": True, "received": body}
