"""
PURPOSE: Pytest fixtures for the MNQ Strat webhook relay tests.

Provides shared test data and test doubles including:
- A fixed clock for deterministic timestamps
- Sample entry, TP1 and exit alert payloads
- Test configuration settings
- A recording fake Discord client and a relay wired to it
- A FastAPI TestClient with the relay dependency overridden
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient


FIXED_NOW = datetime(2024, 3, 1, 14, 30, 5, 123000, tzinfo=timezone.utc)
FIXED_NOW_ISO = "2024-03-01T14:30:05.123Z"


class RecordingDiscordClient:
    """Fake DiscordWebhookClient that records sends and can be told to fail."""

    def __init__(self, error: Exception = None):
        self.sent = []
        self.error = error

    async def send(self, url, message):
        if self.error is not None:
            raise self.error
        self.sent.append((url, message))


@pytest.fixture
def fixed_now():
    """
    PURPOSE: Fixed UTC clock value for embed timestamps.

    Returns:
        datetime: 2024-03-01T14:30:05.123Z
    """
    return FIXED_NOW


@pytest.fixture
def buy_signal():
    """Entry alert as posted by the strategy for a long setup."""
    return {
        "signal": "BUY",
        "entry": "21050",
        "tp1": "21075",
        "tp2": "21100",
        "sl": "21025",
        "type": "2-1-2 Bullish Reversal",
        "confidence": 4,
        "mtf_align": 2,
        "volume_ratio": 1.8,
        "time": "2024-03-01T14:30:00Z",
    }


@pytest.fixture
def tp1_event():
    """Partial-profit alert for an open trade."""
    return {
        "event": "TP1",
        "result": "TP1 hit, 50% closed",
        "pnl_ticks": "25",
        "duration_bars": "7",
        "type": "3-1-2 Bullish",
        "confidence": 3,
        "mtf_align": 3,
        "avg_per_bar": "3.57",
    }


@pytest.fixture
def exit_event():
    """Close alert for a trade that ran to its second target."""
    return {
        "event": "EXIT",
        "result": "TP2 hit",
        "pnl_ticks": "50",
        "duration_bars": "18",
        "type": "2-2 Reversal",
        "max_profit_ticks": "55",
        "max_dd_ticks": "-6",
        "avg_per_bar": "2.78",
        "confidence": 5,
        "mtf_align": 2,
        "tp1_hit": "true",
        "tp1_bars": "7",
    }


@pytest.fixture
def test_settings():
    """
    PURPOSE: Settings override with test values.

    Both timeframe channels point at a fake Discord URL.

    Returns:
        Settings: Configuration object with test values.
    """
    from app.config.settings import Settings

    return Settings(
        DISCORD_WEBHOOK_1MIN="https://discord.test/api/webhooks/1/one-minute",
        DISCORD_WEBHOOK_15MIN="https://discord.test/api/webhooks/15/fifteen-minute",
        DISCORD_TIMEOUT_SECONDS=2.0,
        LOG_LEVEL="DEBUG",
        APP_ENV="test",
    )


@pytest.fixture
def discord_client():
    """Recording fake Discord client."""
    return RecordingDiscordClient()


@pytest.fixture
def relay(test_settings, discord_client, fixed_now):
    """AlertRelay wired to the test settings, fake client and fixed clock."""
    from app.webhook.processor import AlertRelay

    return AlertRelay(
        relay_settings=test_settings,
        client=discord_client,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def api_client(relay):
    """
    PURPOSE: TestClient for the FastAPI app with the relay dependency overridden.

    Yields:
        TestClient: Client that never reaches the real Discord API.
    """
    from app.main import app
    from app.webhook.processor import get_alert_relay

    app.dependency_overrides[get_alert_relay] = lambda: relay
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    app.dependency_overrides.clear()
