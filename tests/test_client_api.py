from __future__ import annotations

import httpx
import pytest

from linguaflow.client.api import (
    GENERIC_FAILURE_MESSAGE,
    TranslationApiClient,
    TranslationRequestError,
)

from stubs import DummyAsyncClient


def _api(*outcomes) -> tuple[TranslationApiClient, DummyAsyncClient]:
    client = DummyAsyncClient(*outcomes)
    return TranslationApiClient("http://proxy.local/", client_factory=lambda: client), client


@pytest.mark.asyncio
async def test_translate_posts_camel_case_payload() -> None:
    api, client = _api(httpx.Response(200, json={"translatedText": "Hola"}))

    result = await api.translate("Hello", source_lang="en", target_lang="es")

    assert result == "Hola"
    call = client.calls[-1]
    assert call["url"] == "http://proxy.local/api/translate"
    assert call["json"] == {"text": "Hello", "sourceLang": "en", "targetLang": "es"}


@pytest.mark.asyncio
async def test_translate_surfaces_proxy_error_message() -> None:
    api, _ = _api(httpx.Response(400, json={"error": "Text too long. Maximum 5000 characters."}))

    with pytest.raises(TranslationRequestError) as excinfo:
        await api.translate("Hello", source_lang="en", target_lang="es")

    assert str(excinfo.value) == "Text too long. Maximum 5000 characters."


@pytest.mark.asyncio
async def test_translate_uses_generic_message_for_unreadable_failure() -> None:
    api, _ = _api(httpx.Response(502, text="<html>Bad gateway</html>"))

    with pytest.raises(TranslationRequestError) as excinfo:
        await api.translate("Hello", source_lang="en", target_lang="es")

    assert str(excinfo.value) == GENERIC_FAILURE_MESSAGE


@pytest.mark.asyncio
async def test_translate_wraps_transport_errors() -> None:
    api, _ = _api(httpx.ConnectError("offline"))

    with pytest.raises(TranslationRequestError) as excinfo:
        await api.translate("Hello", source_lang="en", target_lang="es")

    assert str(excinfo.value) == GENERIC_FAILURE_MESSAGE


@pytest.mark.asyncio
async def test_fetch_languages_builds_entries() -> None:
    request = httpx.Request("GET", "http://proxy.local/api/languages")
    api, client = _api(
        httpx.Response(
            200,
            json={"languages": [{"code": "en", "name": "English", "flag": "🇬🇧"}]},
            request=request,
        )
    )

    languages = await api.fetch_languages()

    assert [entry.code for entry in languages] == ["en"]
    assert client.calls[-1]["url"] == "http://proxy.local/api/languages"
