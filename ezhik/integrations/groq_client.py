"""Groq chat-completions client used for idea, chat and code generation."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ezhik.config import settings
from ezhik.core.exceptions import APIKeyMissingError, ExternalAPIError

logger = logging.getLogger(__name__)

API_NAME = "Groq"


class GroqClient:
    """Minimal async Groq client (OpenAI-compatible chat completions)."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or settings.groq_api_key
        self.model = model or settings.groq_model
        self.base_url = base_url or settings.groq_base_url
        self.timeout_seconds = timeout_seconds or settings.groq_timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

        if not self.api_key:
            raise APIKeyMissingError(API_NAME)

    async def __aenter__(self) -> "GroqClient":
        self._client = httpx.AsyncClient(
            timeout=self.timeout_seconds,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            base_url=self.base_url,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("GroqClient must be used as async context manager")
        return self._client

    async def complete(self, prompt: str, system_prompt: str | None = None) -> str | None:
        """Return the first choice's content, or ``None`` when there are no choices."""
        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await self.client.post(
                "/chat/completions",
                json={"model": self.model, "messages": messages},
            )
        except httpx.HTTPError as exc:
            logger.warning("Groq request failed", extra={"error": str(exc)})
            raise ExternalAPIError(API_NAME, str(exc)) from exc

        logger.info(
            "Groq response received",
            extra={"status_code": response.status_code, "model": self.model},
        )
        if response.status_code >= 400:
            raise ExternalAPIError(
                API_NAME,
                f"HTTP {response.status_code}: {response.text[:200]}",
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ExternalAPIError(API_NAME, "invalid JSON response") from exc

        return _first_choice_content(payload)


def _first_choice_content(payload: Any) -> str | None:
    choices = payload.get("choices") if isinstance(payload, dict) else None
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else None
