from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from linguaflow.core.config import AppSettings


logger = logging.getLogger(__name__)


class UpstreamServiceError(RuntimeError):
    """Raised when the chat-completion provider cannot produce a response."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ChatCompletionClient:
    """Thin async client for an OpenAI-compatible chat-completions endpoint."""

    def __init__(
        self,
        settings: AppSettings,
        *,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._settings = settings
        self._endpoint = settings.translation_api_url
        self._model = settings.translation_model
        self._max_retries = max(settings.translation_max_retries, 0)
        self._client_factory = client_factory or (
            lambda: httpx.AsyncClient(
                timeout=httpx.Timeout(settings.translation_timeout_seconds)
            )
        )

    async def complete(
        self,
        messages: list[dict[str, str]],
        *,
        temperature: float | None = None,
    ) -> str | None:
        """Return ``choices[0].message.content`` for the conversation, if any."""
        api_key = self._settings.translation_api_key
        if api_key is None or not api_key.get_secret_value():
            raise UpstreamServiceError("Translation API credential is not configured.")

        payload = {
            "model": self._model,
            "messages": messages,
            "temperature": (
                self._settings.translation_temperature if temperature is None else temperature
            ),
        }
        headers = {
            "Authorization": f"Bearer {api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }

        response = await self._post_with_retry(payload, headers)

        if response.status_code < 200 or response.status_code >= 300:
            raise UpstreamServiceError(
                f"Chat completion request failed with status {response.status_code}.",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError:
            logger.warning("Chat completion response was not valid JSON.")
            return None
        return self._extract_content(data)

    async def _post_with_retry(
        self,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> httpx.Response:
        attempt = 0
        while True:
            try:
                async with self._client_factory() as client:
                    return await client.post(self._endpoint, json=payload, headers=headers)
            except httpx.TimeoutException as exc:
                raise UpstreamServiceError("Chat completion request timed out.") from exc
            except httpx.TransportError as exc:
                if attempt >= self._max_retries:
                    raise UpstreamServiceError(
                        "Chat completion request failed before a response was received."
                    ) from exc
                attempt += 1
                logger.warning(
                    "Chat completion transport error; retrying (%s/%s): %s",
                    attempt,
                    self._max_retries,
                    exc,
                )

    def _extract_content(self, data: Any) -> str | None:
        if not isinstance(data, dict):
            return None
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return None
        first = choices[0]
        if not isinstance(first, dict):
            return None
        message = first.get("message")
        if not isinstance(message, dict):
            return None
        content = message.get("content")
        return content if isinstance(content, str) else None
