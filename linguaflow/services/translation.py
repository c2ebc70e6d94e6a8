from __future__ import annotations

import logging
from dataclasses import dataclass

from linguaflow.core.languages import MAX_TEXT_LENGTH, display_name
from linguaflow.integrations.llm import ChatCompletionClient, UpstreamServiceError
from linguaflow.schemas.translation import TranslationRequest

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields: text, sourceLang, targetLang"
SAME_LANGUAGE_MESSAGE = "Source and target languages must be different."
SERVICE_ERROR_MESSAGE = "Translation service error. Please try again."
NO_TRANSLATION_MESSAGE = "No translation returned."
INTERNAL_ERROR_MESSAGE = "Internal server error."


def text_too_long_message(limit: int) -> str:
    return f"Text too long. Maximum {limit} characters."


class TranslationValidationError(ValueError):
    """Request payload rejected before contacting the provider."""


class EmptyTranslationError(RuntimeError):
    """Provider answered successfully but without translated content."""


@dataclass(frozen=True, slots=True)
class ValidatedTranslation:
    text: str
    source_lang: str
    target_lang: str


class TranslationService:
    """Validate proxy requests, build the translation prompt and relay the result."""

    def __init__(
        self,
        client: ChatCompletionClient,
        *,
        max_text_length: int = MAX_TEXT_LENGTH,
    ) -> None:
        self._client = client
        self._max_text_length = max_text_length

    def validate(self, payload: TranslationRequest) -> ValidatedTranslation:
        """Apply presence, length and same-language checks in that order."""
        text = payload.text
        source_lang = payload.source_lang
        target_lang = payload.target_lang
        if not text or not source_lang or not target_lang:
            raise TranslationValidationError(MISSING_FIELDS_MESSAGE)

        if len(text) > self._max_text_length:
            raise TranslationValidationError(text_too_long_message(self._max_text_length))

        if source_lang == target_lang:
            raise TranslationValidationError(SAME_LANGUAGE_MESSAGE)

        return ValidatedTranslation(text=text, source_lang=source_lang, target_lang=target_lang)

    def build_messages(self, text: str, *, source_lang: str, target_lang: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self._instructions(source_lang, target_lang)},
            {"role": "user", "content": text},
        ]

    async def translate(self, payload: TranslationRequest) -> str:
        """Return the trimmed translation or raise one of the service errors."""
        request = self.validate(payload)
        messages = self.build_messages(
            request.text,
            source_lang=request.source_lang,
            target_lang=request.target_lang,
        )

        try:
            content = await self._client.complete(messages)
        except UpstreamServiceError as exc:
            logger.error(
                "Translation provider error (status=%s): %s",
                exc.status_code,
                exc.body if exc.body is not None else exc,
            )
            raise

        translated = content.strip() if content else ""
        if not translated:
            logger.warning(
                "Translation provider returned no content (%s -> %s)",
                request.source_lang,
                request.target_lang,
            )
            raise EmptyTranslationError(NO_TRANSLATION_MESSAGE)
        return translated

    def _instructions(self, source_lang: str, target_lang: str) -> str:
        source_name = display_name(source_lang)
        target_name = display_name(target_lang)
        return (
            "You are a professional translator. "
            f"Translate the given text from {source_name} to {target_name}. "
            "Output ONLY the translated text, nothing else. "
            "No explanations, no quotes, no prefixes. "
            "Preserve formatting, line breaks, and punctuation style."
        )
