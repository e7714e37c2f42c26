"""
Pydantic v2 schemas for the MNQ Strat webhook relay.

This module exports all schema classes used for inbound alert parsing
and outbound Discord message construction.
"""

from .alert import DiscordMessage, Embed, EmbedField, EmbedFooter, SignalRecord

__all__ = [
    # Inbound
    "SignalRecord",
    # Outbound
    "DiscordMessage",
    "Embed",
    "EmbedField",
    "EmbedFooter",
]
