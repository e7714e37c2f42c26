"""
PURPOSE: Constants shared by the alert formatter and the HTTP layer.

Discord embed colours, emoji, timeframe channels, and the placeholder used
for any field the upstream alert did not send.
"""

from enum import Enum
from typing import Dict


# Instrument every alert refers to
INSTRUMENT = "MNQ"

# Supported timeframe channels and their footer text
TIMEFRAMES = ["1min", "15min"]

TIMEFRAME_FOOTERS: Dict[str, str] = {
    "1min": "1-Minute Timeframe",
    "15min": "15-Minute Timeframe",
}

# Rendered for fields that are absent or null in the incoming alert
MISSING_VALUE = "N/A"


class EmbedColor(int, Enum):
    """Discord embed sidebar colours (decimal RGB)."""

    GREEN = 3066993  # 0x2ECC71
    RED = 15158332  # 0xE74C3C


class SignalSide(str, Enum):
    """Entry directions carried in the `signal` field."""

    BUY = "BUY"
    SELL = "SELL"


class TradeEvent(str, Enum):
    """Lifecycle updates carried in the `event` field."""

    TP1 = "TP1"
    EXIT = "EXIT"


class AlertKind(str, Enum):
    """Shape of an incoming alert, decided once per request."""

    ENTRY = "entry"
    TP1_HIT = "tp1_hit"
    TRADE_CLOSED = "trade_closed"
    UNRECOGNIZED = "unrecognized"


SIGNAL_EMOJI: Dict[SignalSide, str] = {
    SignalSide.BUY: "🚀",
    SignalSide.SELL: "🔻",
}

SIGNAL_COLORS: Dict[SignalSide, EmbedColor] = {
    SignalSide.BUY: EmbedColor.GREEN,
    SignalSide.SELL: EmbedColor.RED,
}

# Checked in order against the exit `result` text; first substring wins
RESULT_EMOJI = [
    ("TP2", "🎯🎯"),
    ("TP1", "🎯"),
    ("SL", "🛑"),
    ("Auto-closed", "🔄"),
]
DEFAULT_RESULT_EMOJI = "📊"
