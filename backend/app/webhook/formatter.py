"""
PURPOSE: Discord message formatter for MNQ Strat strategy alerts.

Maps one inbound TradingView alert onto one Discord webhook message. The
alert shape is classified first (entry, TP1 hit, trade closed, or
unrecognized) and a dedicated builder renders each kind. Formatting is
pure: no I/O, no shared state, and it never raises on odd input. Missing
fields render as MISSING_VALUE.

CALLED BY:
    - app/webhook/processor.py (AlertRelay.relay)
"""

import json
import math
import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Optional

from app.config.constants import (
    DEFAULT_RESULT_EMOJI,
    INSTRUMENT,
    MISSING_VALUE,
    RESULT_EMOJI,
    SIGNAL_COLORS,
    SIGNAL_EMOJI,
    TIMEFRAME_FOOTERS,
    AlertKind,
    EmbedColor,
    SignalSide,
    TradeEvent,
)
from app.schemas.alert import DiscordMessage, Embed, EmbedField, EmbedFooter, SignalRecord
from app.utils.time_utils import get_utc_now, to_iso_z

_SIGNAL_VALUES = [side.value for side in SignalSide]

# Leading numeric prefix, as accepted by JavaScript's parseFloat
_FLOAT_PREFIX = re.compile(
    r"^\s*[+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)"
)


# ════════════════════════════════════════════════════════════════
# Public API
# ════════════════════════════════════════════════════════════════


def classify_alert(record: SignalRecord) -> AlertKind:
    """
    PURPOSE: Decide which kind of alert a record is.

    An entry `signal` takes precedence over any `event` on the same record.
    An EXIT event without a `result` cannot be summarised and is treated as
    unrecognized so the raw payload reaches the channel instead.

    Args:
        record: Parsed inbound alert.

    Returns:
        AlertKind: The first matching kind.
    """
    if record.signal in _SIGNAL_VALUES:
        return AlertKind.ENTRY
    if record.event == TradeEvent.TP1.value:
        return AlertKind.TP1_HIT
    if record.event == TradeEvent.EXIT.value and record.result is not None:
        return AlertKind.TRADE_CLOSED
    return AlertKind.UNRECOGNIZED


def format_alert(
    payload: Any,
    timeframe: str,
    now: Optional[datetime] = None,
) -> DiscordMessage:
    """
    PURPOSE: Build the Discord message for one inbound alert.

    CALLED BY: AlertRelay.relay()

    Args:
        payload: Decoded JSON body of the alert request (any JSON value).
        timeframe: Channel label substituted into the text, e.g. "1min".
        now: Clock value used for embed timestamps and the default alert
            time. Defaults to the current UTC time.

    Returns:
        DiscordMessage: Embed message for recognized alerts, plain-text
            content echoing the payload otherwise.
    """
    if now is None:
        now = get_utc_now()

    record = SignalRecord.from_payload(payload)
    kind = classify_alert(record)
    if kind is AlertKind.UNRECOGNIZED:
        return _build_fallback(payload, timeframe)

    embed = _EMBED_BUILDERS[kind](record, timeframe, to_iso_z(now))
    return DiscordMessage(embeds=[embed])


def result_emoji(result: Any) -> str:
    """Pick the title emoji for a closed trade from its result text."""
    text = _text(result)
    for marker, emoji in RESULT_EMOJI:
        if marker in text:
            return emoji
    return DEFAULT_RESULT_EMOJI


def parse_leading_float(value: Any) -> float:
    """
    PURPOSE: Parse a number the way the alert source's parseFloat does.

    Numbers pass through. Strings yield their leading numeric prefix
    ("12.5 ticks" -> 12.5). Anything else, or a string with no numeric
    prefix, yields NaN.
    """
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    match = _FLOAT_PREFIX.match(str(value))
    if not match:
        return math.nan
    return float(match.group(0))


def timeframe_footer(timeframe: str) -> str:
    """Footer text for a channel; unknown labels are shown as-is."""
    return TIMEFRAME_FOOTERS.get(timeframe, timeframe)


# ════════════════════════════════════════════════════════════════
# Embed Builders
# ════════════════════════════════════════════════════════════════


def _build_entry(record: SignalRecord, timeframe: str, timestamp: str) -> Embed:
    side = SignalSide(record.signal)
    fields = [
        _field("📊 Entry Price", _text(record.entry)),
        _field("🎯 TP1", _text(record.tp1)),
        _field("🎯 TP2", _text(record.tp2)),
        _field("🛑 Stop Loss", _text(record.sl)),
        _field("📈 Pattern", _pattern(record)),
        _field("⭐ Confidence", f"{_text(record.confidence)}/5"),
        _field("🔄 MTF Alignment", f"{_text(record.mtf_align)}/3"),
        _field("📊 Volume Ratio", f"{_text(record.volume_ratio)}x"),
        _field("⏰ Time", _text(record.time) if record.time else timestamp),
    ]
    return Embed(
        title=f"{SIGNAL_EMOJI[side]} {side.value} SIGNAL - {INSTRUMENT} {timeframe}",
        color=SIGNAL_COLORS[side].value,
        fields=fields,
        footer=EmbedFooter(text=timeframe_footer(timeframe)),
        timestamp=timestamp,
    )


def _build_tp1_hit(record: SignalRecord, timeframe: str, timestamp: str) -> Embed:
    fields = [
        _field("💰 P&L (so far)", f"{_text(record.pnl_ticks)} ticks"),
        _field("⏱️ Duration", f"{_text(record.duration_bars)} bars"),
        _field("📈 Pattern", _pattern(record)),
        _field("⭐ Confidence", f"{_text(record.confidence)}/5"),
        _field("🔄 MTF Align", f"{_text(record.mtf_align)}/3"),
        _field("📈 Avg/Bar", f"{_text(record.avg_per_bar)} ticks"),
    ]
    return Embed(
        title=f"🎯 TP1 HIT - {INSTRUMENT} {timeframe}",
        color=EmbedColor.GREEN.value,
        description=f"**Status:** {_text(record.result)}",
        fields=fields,
        footer=EmbedFooter(text=f"{timeframe_footer(timeframe)} • Now targeting TP2"),
        timestamp=timestamp,
    )


def _build_trade_closed(record: SignalRecord, timeframe: str, timestamp: str) -> Embed:
    # NaN compares False, so unparseable P&L is shown as a loss
    is_profit = parse_leading_float(record.pnl_ticks) > 0
    color = EmbedColor.GREEN if is_profit else EmbedColor.RED

    if _text(record.tp1_hit) == "true":
        tp1_status = f"✅ Hit @ {_text(record.tp1_bars)} bars"
    else:
        tp1_status = "❌ Not Hit"

    fields = [
        _field("💰 P&L", f"{_text(record.pnl_ticks)} ticks"),
        _field("⏱️ Duration", f"{_text(record.duration_bars)} bars"),
        _field("📈 Pattern", _pattern(record)),
        _field("📊 Max Profit", f"{_text(record.max_profit_ticks)} ticks"),
        _field("📉 Max Drawdown", f"{_text(record.max_dd_ticks)} ticks"),
        _field("📈 Avg/Bar", f"{_text(record.avg_per_bar)} ticks"),
        _field("⭐ Confidence", f"{_text(record.confidence)}/5"),
        _field("🔄 MTF Align", f"{_text(record.mtf_align)}/3"),
        _field("🎯 TP1", tp1_status),
    ]
    return Embed(
        title=f"{result_emoji(record.result)} TRADE CLOSED - {INSTRUMENT} {timeframe}",
        color=color.value,
        description=f"**Result:** {_text(record.result)}",
        fields=fields,
        footer=EmbedFooter(text=timeframe_footer(timeframe)),
        timestamp=timestamp,
    )


def _build_fallback(payload: Any, timeframe: str) -> DiscordMessage:
    pretty = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    return DiscordMessage(
        content=f"📨 **Alert from {INSTRUMENT} {timeframe}:**\n```json\n{pretty}\n```"
    )


_EMBED_BUILDERS: Dict[AlertKind, Callable[[SignalRecord, str, str], Embed]] = {
    AlertKind.ENTRY: _build_entry,
    AlertKind.TP1_HIT: _build_tp1_hit,
    AlertKind.TRADE_CLOSED: _build_trade_closed,
}


# ════════════════════════════════════════════════════════════════
# Internal Helpers
# ════════════════════════════════════════════════════════════════


def _text(value: Any) -> str:
    """Render one alert value for display."""
    if value is None:
        return MISSING_VALUE
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _number_text(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _pattern(record: SignalRecord) -> str:
    return _text(record.type) if record.type else MISSING_VALUE


def _field(name: str, value: str) -> EmbedField:
    return EmbedField(name=name, value=value, inline=True)


def _number_text(value: Any) -> str:
    """
    Render a number the way the alert source prints it.

    Integral values drop the trailing ".0". Exponent notation is used only
    from 1e21 up and below 1e-6, written as "1e+21" / "1e-7". Integers too
    large for a float render as "Infinity".
    """
    if isinstance(value, int):
        if abs(value) < 10 ** 21:
            return str(value)
        try:
            value = float(value)
        except OverflowError:
            return "Infinity" if value > 0 else "-Infinity"

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # Position of the decimal point relative to the first digit
    n = k + exponent

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{sign}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{sign}0.{'0' * -n}{digits}"

    mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
    e = n - 1
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
