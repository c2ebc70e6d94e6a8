from __future__ import annotations

import httpx
import pytest

from linguaflow.core.config import AppSettings
from linguaflow.integrations.llm import ChatCompletionClient, UpstreamServiceError
from linguaflow.schemas.translation import TranslationRequest
from linguaflow.services.translation import (
    EmptyTranslationError,
    TranslationService,
    TranslationValidationError,
)

from stubs import DummyAsyncClient, completion_response


def _service(*outcomes) -> tuple[TranslationService, DummyAsyncClient]:
    client = DummyAsyncClient(*outcomes)
    settings = AppSettings(TRANSLATION_API_KEY="gateway-secret", TRANSLATION_MAX_RETRIES=0)
    return TranslationService(ChatCompletionClient(settings, client_factory=lambda: client)), client


def _request(text: str | None = "Hello world", source: str | None = "en", target: str | None = "es"):
    return TranslationRequest(text=text, source_lang=source, target_lang=target)


@pytest.mark.parametrize(
    "payload",
    [
        _request(text=""),
        _request(text=None),
        _request(source=""),
        _request(target=None),
    ],
)
def test_validate_rejects_missing_fields(payload: TranslationRequest) -> None:
    service, _ = _service(completion_response("unused"))

    with pytest.raises(TranslationValidationError) as excinfo:
        service.validate(payload)

    assert "Missing required fields" in str(excinfo.value)


def test_validate_checks_length_before_language_pair() -> None:
    service, _ = _service(completion_response("unused"))

    with pytest.raises(TranslationValidationError) as excinfo:
        service.validate(_request(text="a" * 5001, source="en", target="en"))

    assert str(excinfo.value) == "Text too long. Maximum 5000 characters."


def test_validate_accepts_text_at_limit() -> None:
    service, _ = _service(completion_response("unused"))

    validated = service.validate(_request(text="a" * 5000))
    assert len(validated.text) == 5000


def test_validate_rejects_identical_languages() -> None:
    service, _ = _service(completion_response("unused"))

    with pytest.raises(TranslationValidationError) as excinfo:
        service.validate(_request(source="fr", target="fr"))

    assert "must be different" in str(excinfo.value)


def test_build_messages_uses_display_names() -> None:
    service, _ = _service(completion_response("unused"))

    messages = service.build_messages("Guten Tag", source_lang="de", target_lang="ja")

    assert [message["role"] for message in messages] == ["system", "user"]
    assert "from German to Japanese" in messages[0]["content"]
    assert "Output ONLY the translated text" in messages[0]["content"]
    assert messages[1]["content"] == "Guten Tag"


def test_build_messages_passes_unknown_codes_through() -> None:
    service, _ = _service(completion_response("unused"))

    messages = service.build_messages("Hello", source_lang="xx", target_lang="es")

    assert "from xx to Spanish" in messages[0]["content"]


@pytest.mark.asyncio
async def test_translate_trims_provider_content() -> None:
    service, client = _service(completion_response("\n  Hola mundo  \n"))

    assert await service.translate(_request()) == "Hola mundo"
    assert client.calls[-1]["json"]["messages"][1]["content"] == "Hello world"


@pytest.mark.asyncio
async def test_translate_raises_when_provider_returns_blank() -> None:
    service, _ = _service(completion_response("   "))

    with pytest.raises(EmptyTranslationError):
        await service.translate(_request())


@pytest.mark.asyncio
async def test_translate_propagates_upstream_failure() -> None:
    service, _ = _service(httpx.Response(503, text="overloaded"))

    with pytest.raises(UpstreamServiceError):
        await service.translate(_request())


@pytest.mark.asyncio
async def test_translate_skips_provider_for_invalid_payload() -> None:
    service, client = _service(completion_response("unused"))

    with pytest.raises(TranslationValidationError):
        await service.translate(_request(text=""))

    assert client.calls == []
