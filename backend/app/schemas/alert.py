"""
Alert Pydantic schemas for the MNQ Strat webhook relay.

Covers the inbound TradingView strategy alert (SignalRecord) and the
outbound Discord webhook message (DiscordMessage and its embed parts).
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SignalRecord(BaseModel):
    """
    Inbound strategy alert as posted by TradingView.

    Every field is optional and untyped: the upstream Pine Script sends a mix
    of strings and numbers, and an unexpected shape must still be relayed to
    the operator rather than rejected. Unknown keys are kept.

    Attributes:
        signal: "BUY" or "SELL" for an entry alert
        event: "TP1" or "EXIT" for a lifecycle update of an open trade
        entry, tp1, tp2, sl: Price levels of an entry alert
        type: Pattern label that triggered the trade
        confidence: Confidence score, 0-5
        mtf_align: Number of aligned higher timeframes, 0-3
        volume_ratio: Volume multiple versus average
        time: ISO-8601 alert time
        result: Free-text outcome of a closed or partially closed trade
        pnl_ticks, duration_bars, avg_per_bar: Trade progress figures
        max_profit_ticks, max_dd_ticks: Excursion figures of a closed trade
        tp1_hit: "true" when TP1 was reached before the close
        tp1_bars: Bars taken to reach TP1
    """

    model_config = ConfigDict(extra="allow")

    signal: Optional[Any] = None
    event: Optional[Any] = None
    entry: Optional[Any] = None
    tp1: Optional[Any] = None
    tp2: Optional[Any] = None
    sl: Optional[Any] = None
    type: Optional[Any] = None
    confidence: Optional[Any] = None
    mtf_align: Optional[Any] = None
    volume_ratio: Optional[Any] = None
    time: Optional[Any] = None
    result: Optional[Any] = None
    pnl_ticks: Optional[Any] = None
    duration_bars: Optional[Any] = None
    avg_per_bar: Optional[Any] = None
    max_profit_ticks: Optional[Any] = None
    max_dd_ticks: Optional[Any] = None
    tp1_hit: Optional[Any] = None
    tp1_bars: Optional[Any] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "SignalRecord":
        """Build a record from any decoded JSON value; non-objects give an empty record."""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)


class EmbedField(BaseModel):
    """One name/value cell of a Discord embed."""

    name: str
    value: str
    inline: bool = True


class EmbedFooter(BaseModel):
    """Footer line of a Discord embed."""

    text: str


class Embed(BaseModel):
    """
    Discord rich embed.

    Attributes:
        title: Headline shown in bold
        color: Sidebar colour as a decimal RGB integer
        description: Optional markdown body under the title
        fields: Ordered name/value cells
        footer: Footer line
        timestamp: ISO-8601 time shown next to the footer
    """

    title: str
    color: int
    description: Optional[str] = None
    fields: List[EmbedField] = Field(default_factory=list)
    footer: Optional[EmbedFooter] = None
    timestamp: Optional[str] = None


class DiscordMessage(BaseModel):
    """
    Body of a Discord webhook execution.

    Exactly one of `embeds` (rich alert) or `content` (plain-text fallback)
    is set by the formatter.
    """

    embeds: Optional[List[Embed]] = None
    content: Optional[str] = None

    @property
    def is_embed(self) -> bool:
        return bool(self.embeds)

    def to_wire(self) -> dict:
        """Return the JSON body posted to the webhook, without unset parts."""
        return self.model_dump(exclude_none=True)
