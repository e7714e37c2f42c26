"""
PURPOSE: Export configuration settings and constants for the webhook relay.

This module centralizes access to all configuration settings and constants
used throughout the service.
"""

from .constants import (
    AlertKind,
    EmbedColor,
    INSTRUMENT,
    MISSING_VALUE,
    SignalSide,
    TIMEFRAMES,
    TradeEvent,
)
from .settings import settings

__all__ = [
    "settings",
    "AlertKind",
    "EmbedColor",
    "SignalSide",
    "TradeEvent",
    "INSTRUMENT",
    "MISSING_VALUE",
    "TIMEFRAMES",
]
