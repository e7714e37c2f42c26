"""
PURPOSE: Webhook module for the MNQ Strat relay: turns inbound TradingView alerts into Discord messages.

Provides the alert formatter, the Discord delivery client, and the relay
that ties them together per timeframe channel.
"""

from .discord_client import AlertDeliveryError, DiscordWebhookClient
from .formatter import classify_alert, format_alert
from .processor import AlertRelay, get_alert_relay

__all__ = [
    "AlertDeliveryError",
    "AlertRelay",
    "DiscordWebhookClient",
    "classify_alert",
    "format_alert",
    "get_alert_relay",
]
