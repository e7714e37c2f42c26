"""
Tests for Discord webhook delivery and error normalization.
"""

import json

import httpx
import pytest

from app.schemas.alert import DiscordMessage
from app.webhook.discord_client import AlertDeliveryError, DiscordWebhookClient

WEBHOOK_URL = "https://discord.test/api/webhooks/1/token"


def _client_with(handler) -> DiscordWebhookClient:
    return DiscordWebhookClient(timeout=1.0, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_send_posts_wire_body() -> None:
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["url"] = str(request.url)
        captured["body"] = json.loads(request.content)
        return httpx.Response(204)

    message = DiscordMessage(content="hello")
    await _client_with(handler).send(WEBHOOK_URL, message)

    assert captured["method"] == "POST"
    assert captured["url"] == WEBHOOK_URL
    assert captured["body"] == {"content": "hello"}


@pytest.mark.asyncio
async def test_rejected_message_raises_delivery_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": "Invalid Form Body", "code": 50035})

    with pytest.raises(AlertDeliveryError) as exc_info:
        await _client_with(handler).send(WEBHOOK_URL, DiscordMessage(content="x"))

    assert "HTTP 400" in str(exc_info.value)


@pytest.mark.asyncio
async def test_connection_failure_raises_delivery_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AlertDeliveryError) as exc_info:
        await _client_with(handler).send(WEBHOOK_URL, DiscordMessage(content="x"))

    assert str(exc_info.value) == "connection refused"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_blank_error_message_gets_fallback() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("", request=request)

    with pytest.raises(AlertDeliveryError) as exc_info:
        await _client_with(handler).send(WEBHOOK_URL, DiscordMessage(content="x"))

    assert str(exc_info.value) == "Discord webhook request failed (ReadTimeout)"
