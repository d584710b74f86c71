"""Unit tests for the Groq chat-completions client."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from ezhik.config import settings
from ezhik.core.exceptions import APIKeyMissingError, ExternalAPIError
from ezhik.integrations.groq_client import GroqClient


def _transport(status_code: int, body: Any, captured: dict[str, Any] | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured["url"] = str(request.url)
            captured["headers"] = dict(request.headers)
            captured["json"] = json.loads(request.content)
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_complete_posts_messages_and_returns_first_choice() -> None:
    captured: dict[str, Any] = {}
    transport = _transport(
        200,
        {"choices": [{"message": {"content": "Idea one"}}, {"message": {"content": "Idea two"}}]},
        captured,
    )

    async with GroqClient(
        api_key="gsk-test",
        model="test-model",
        base_url="https://groq.example/v1",
        transport=transport,
    ) as client:
        content = await client.complete("Hello", system_prompt="Be brief")

    assert content == "Idea one"
    assert captured["url"] == "https://groq.example/v1/chat/completions"
    assert captured["headers"]["authorization"] == "Bearer gsk-test"
    assert captured["json"] == {
        "model": "test-model",
        "messages": [
            {"role": "system", "content": "Be brief"},
            {"role": "user", "content": "Hello"},
        ],
    }


@pytest.mark.asyncio
async def test_complete_without_system_prompt_sends_only_user_message() -> None:
    captured: dict[str, Any] = {}
    transport = _transport(200, {"choices": [{"message": {"content": "x"}}]}, captured)

    async with GroqClient(api_key="gsk-test", transport=transport) as client:
        await client.complete("Hello")

    assert captured["json"]["messages"] == [{"role": "user", "content": "Hello"}]
    assert captured["json"]["model"] == settings.groq_model


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"choices": []}, {}, {"choices": [{"message": {}}]}, ["odd"]])
async def test_complete_returns_none_without_usable_choice(body: Any) -> None:
    async with GroqClient(api_key="gsk-test", transport=_transport(200, body)) as client:
        assert await client.complete("Hello") is None


@pytest.mark.asyncio
async def test_complete_raises_on_error_status() -> None:
    transport = _transport(429, {"error": {"message": "rate limited"}})

    async with GroqClient(api_key="gsk-test", transport=transport) as client:
        with pytest.raises(ExternalAPIError) as exc_info:
            await client.complete("Hello")

    assert "HTTP 429" in exc_info.value.message
    assert exc_info.value.api_name == "Groq"


@pytest.mark.asyncio
async def test_complete_raises_on_invalid_json() -> None:
    async with GroqClient(api_key="gsk-test", transport=_transport(200, "not json")) as client:
        with pytest.raises(ExternalAPIError):
            await client.complete("Hello")


@pytest.mark.asyncio
async def test_complete_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    async with GroqClient(api_key="gsk-test", transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(ExternalAPIError):
            await client.complete("Hello")


def test_client_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "groq_api_key", None)

    with pytest.raises(APIKeyMissingError):
        GroqClient()


@pytest.mark.asyncio
async def test_client_must_be_entered_before_use() -> None:
    client = GroqClient(api_key="gsk-test")

    with pytest.raises(RuntimeError):
        await client.complete("Hello")
