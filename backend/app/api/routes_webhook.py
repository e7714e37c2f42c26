"""
PURPOSE: Strategy alert webhook routes for the MNQ Strat relay.

Provides one public inbound endpoint per timeframe channel. TradingView
posts the alert body; the relay formats it and forwards it to the Discord
channel configured for that timeframe.

CALLED BY:
    - TradingView strategy alert webhooks (POST, public)
"""

import json
from typing import Any
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.utils.logger import get_logger
from app.webhook.processor import AlertRelay, get_alert_relay

logger = get_logger(__name__)

router = APIRouter(prefix="/webhook", tags=["webhook"])


# ════════════════════════════════════════════════════════════════
# Internal Helpers
# ════════════════════════════════════════════════════════════════


async def read_alert_body(request: Request) -> Any:
    """
    PURPOSE: Decode an inbound alert body.

    JSON is the normal case. An empty body is read as an empty object and a
    form-encoded body is read as a flat object of its fields. A body sent
    with any other content type that is not JSON (TradingView posts plain
    alert messages as text/plain) is returned as its text.

    CALLED BY: Alert route handlers, POST /test

    Args:
        request: Incoming FastAPI request.

    Returns:
        Any: The decoded JSON value, or the raw text of a non-JSON body.

    Raises:
        ValueError: If a body declared as application/json is not valid JSON.
    """
    raw = await request.body()
    if not raw.strip():
        return {}

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == "application/x-www-form-urlencoded":
        return dict(parse_qsl(raw.decode("utf-8"), keep_blank_values=True))

    try:
        return json.loads(raw)
    except ValueError as e:
        if content_type == "application/json":
            raise ValueError(f"Invalid JSON body: {e}") from e
        return raw.decode("utf-8", errors="replace").strip()


async def _handle_alert(request: Request, relay: AlertRelay, timeframe: str) -> JSONResponse:
    """
    PURPOSE: Shared body of the per-timeframe alert endpoints.

    Args:
        request: Incoming FastAPI request.
        relay: Relay used to format and deliver the alert.
        timeframe: Channel label of the endpoint.

    Returns:
        JSONResponse: 200 {"success": true} or 500 {"success": false, "error": ...}.
    """
    try:
        payload = await read_alert_body(request)
        await relay.relay(payload, timeframe)
    except Exception as e:
        logger.error(
            "webhook_processing_failed",
            timeframe=timeframe,
            error=str(e),
            exception_type=type(e).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": str(e) or type(e).__name__},
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"success": True, "message": "Alert processed"},
    )


# ════════════════════════════════════════════════════════════════
# Public Inbound Endpoints
# ════════════════════════════════════════════════════════════════


@router.post("/1min")
async def webhook_1min(
    request: Request,
    relay: AlertRelay = Depends(get_alert_relay),
) -> JSONResponse:
    """
    PURPOSE: Receive a 1-minute strategy alert and relay it to the 1min Discord channel.

    Returns:
        JSONResponse: {"success": true, "message": "Alert processed"}

    Raises:
        HTTP 500: Body could not be decoded or Discord delivery failed.
    """
    return await _handle_alert(request, relay, "1min")


@router.post("/15min")
async def webhook_15min(
    request: Request,
    relay: AlertRelay = Depends(get_alert_relay),
) -> JSONResponse:
    """
    PURPOSE: Receive a 15-minute strategy alert and relay it to the 15min Discord channel.

    Returns:
        JSONResponse: {"success": true, "message": "Alert processed"}

    Raises:
        HTTP 500: Body could not be decoded or Discord delivery failed.
    """
    return await _handle_alert(request, relay, "15min")

