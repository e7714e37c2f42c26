"""
PURPOSE: Outbound Discord webhook delivery for the MNQ Strat relay.

Posts a formatted DiscordMessage to a channel webhook URL with httpx. One
attempt per alert; failures surface as AlertDeliveryError for the route to
report.

CALLED BY:
    - app/webhook/processor.py (AlertRelay.relay)
"""

from typing import Optional

import httpx

from app.schemas.alert import DiscordMessage
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Seconds allowed for one webhook execution
DEFAULT_TIMEOUT_SECONDS = 10.0


class AlertDeliveryError(Exception):
    """Raised when a formatted alert could not be handed to Discord."""


class DiscordWebhookClient:
    """
    PURPOSE: Thin async client for Discord's "execute webhook" endpoint.

    Attributes:
        _timeout: Per-request timeout in seconds.
        _transport: Optional httpx transport override (used by tests).
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def send(self, url: str, message: DiscordMessage) -> None:
        """
        PURPOSE: POST a message to a Discord webhook URL.

        CALLED BY: AlertRelay.relay()

        Args:
            url: Full Discord webhook URL of the target channel.
            message: Formatted alert message.

        Raises:
            AlertDeliveryError: On connection failure, timeout, or a non-2xx
                response from Discord.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                resp = await client.post(url, json=message.to_wire())
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "discord_webhook_rejected",
                status_code=e.response.status_code,
                response_body=e.response.text[:500],
            )
            raise AlertDeliveryError(
                f"Discord webhook returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "discord_webhook_request_failed",
                error=str(e),
                exception_type=type(e).__name__,
            )
            raise AlertDeliveryError(
                str(e) or f"Discord webhook request failed ({type(e).__name__})"
            ) from e
