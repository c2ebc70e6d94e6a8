from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from linguaflow.core.languages import LanguageEntry


logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Translation failed. Please try again."


class TranslationRequestError(RuntimeError):
    """Raised when the proxy does not return a translation."""


class TranslationApiClient:
    """HTTP client for the LinguaFlow translation proxy."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 35.0,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client_factory = client_factory or (
            lambda: httpx.AsyncClient(timeout=httpx.Timeout(timeout))
        )

    async def translate(self, text: str, *, source_lang: str, target_lang: str) -> str:
        payload = {"text": text, "sourceLang": source_lang, "targetLang": target_lang}
        try:
            async with self._client_factory() as client:
                response = await client.post(f"{self._base_url}/api/translate", json=payload)
        except httpx.HTTPError as exc:
            logger.warning("Translation request could not reach the proxy: %s", exc)
            raise TranslationRequestError(GENERIC_FAILURE_MESSAGE) from exc

        data = self._json_or_none(response)
        if response.status_code < 200 or response.status_code >= 300:
            raise TranslationRequestError(self._extract_error(data))

        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, str) and error:
                raise TranslationRequestError(error)
            translated = data.get("translatedText")
            if isinstance(translated, str):
                return translated
        raise TranslationRequestError(GENERIC_FAILURE_MESSAGE)

    async def fetch_languages(self) -> list[LanguageEntry]:
        async with self._client_factory() as client:
            response = await client.get(f"{self._base_url}/api/languages")
        response.raise_for_status()
        items = response.json().get("languages", [])
        return [
            LanguageEntry(code=item["code"], name=item["name"], flag=item.get("flag", ""))
            for item in items
        ]

    def _json_or_none(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    def _extract_error(self, data: Any) -> str:
        if isinstance(data, dict):
            message = data.get("error")
            if isinstance(message, str) and message:
                return message
        return GENERIC_FAILURE_MESSAGE
