from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TranslationRequest(BaseModel):
    """Inbound proxy payload; presence and length are checked by the service."""

    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = Field(default=None, description="Text to translate.")
    source_lang: Optional[str] = Field(
        default=None,
        alias="sourceLang",
        description="Language code of the provided text, e.g. 'en'.",
    )
    target_lang: Optional[str] = Field(
        default=None,
        alias="targetLang",
        description="Language code to translate into, e.g. 'es'.",
    )


class TranslationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(
        ..., alias="translatedText", description="Translated text with surrounding whitespace trimmed."
    )


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human readable failure description.")


class LanguageItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    flag: str


class LanguageListResponse(BaseModel):
    languages: list[LanguageItem] = Field(default_factory=list)
