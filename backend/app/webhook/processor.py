"""
PURPOSE: Alert relay for the MNQ Strat webhook service.

Bridges inbound TradingView strategy alerts to the Discord channel of their
timeframe: logs the raw alert, formats it, and delivers it when the channel
has a webhook configured. Each call is independent; nothing is stored.

CALLED BY:
    - app/api/routes_webhook.py (POST /webhook/1min, POST /webhook/15min)
"""

from datetime import datetime
from typing import Any, Callable, Optional

from app.config.settings import Settings, settings
from app.schemas.alert import DiscordMessage
from app.utils.logger import get_logger
from app.utils.time_utils import get_utc_now
from app.webhook.discord_client import DiscordWebhookClient
from app.webhook.formatter import format_alert

logger = get_logger(__name__)


class AlertRelay:
    """
    PURPOSE: Formats and forwards one alert per call to Discord.

    Attributes:
        _settings: Settings holding the per-timeframe webhook URLs.
        _client: Delivery client used for the outbound POST.
        _clock: Source of the current time for embed timestamps.
    """

    def __init__(
        self,
        relay_settings: Settings,
        client: DiscordWebhookClient,
        clock: Callable[[], datetime] = get_utc_now,
    ) -> None:
        """
        PURPOSE: Initialise the relay with its configuration and delivery client.

        CALLED BY: Module-level singleton factory get_alert_relay(), tests
        """
        self._settings = relay_settings
        self._client = client
        self._clock = clock

    # ════════════════════════════════════════════════════════════════
    # Public API
    # ════════════════════════════════════════════════════════════════

    async def relay(self, payload: Any, timeframe: str) -> DiscordMessage:
        """
        PURPOSE: Format an inbound alert and deliver it to its timeframe channel.

        A channel without a configured webhook URL is not an error: the
        message is formatted and the skip is logged.

        CALLED BY: POST /webhook/{timeframe} route handlers

        Args:
            payload: Decoded JSON body of the alert request.
            timeframe: Channel label, "1min" or "15min".

        Returns:
            DiscordMessage: The formatted message (delivered or not).

        Raises:
            AlertDeliveryError: If Discord could not be reached or rejected the message.
        """
        logger.info("webhook_alert_received", timeframe=timeframe, payload=payload)

        message = format_alert(payload, timeframe, now=self._clock())

        url = self._settings.webhook_url_for(timeframe)
        if url is None:
            logger.warning(
                "discord_webhook_not_configured",
                timeframe=timeframe,
                setting=f"DISCORD_WEBHOOK_{timeframe.upper()}",
            )
            return message

        await self._client.send(url, message)
        logger.info(
            "discord_message_sent",
            timeframe=timeframe,
            kind="embed" if message.is_embed else "content",
        )
        return message


# ════════════════════════════════════════════════════════════════
# Module-level singleton
# ════════════════════════════════════════════════════════════════

_relay_instance: Optional[AlertRelay] = None


def get_alert_relay() -> AlertRelay:
    """
    PURPOSE: Return the module-level AlertRelay singleton.

    Creates the instance on first call; subsequent calls return the same object.

    CALLED BY: routes_webhook.py route handlers (FastAPI dependency)

    Returns:
        AlertRelay: Singleton relay instance.
    """
    global _relay_instance
    if _relay_instance is None:
        _relay_instance = AlertRelay(
            relay_settings=settings,
            client=DiscordWebhookClient(timeout=settings.DISCORD_TIMEOUT_SECONDS),
        )
    return _relay_instance
