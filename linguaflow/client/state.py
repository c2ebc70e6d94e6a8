from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from linguaflow.core.languages import DEFAULT_SOURCE_LANG, DEFAULT_TARGET_LANG, MAX_TEXT_LENGTH


@dataclass(frozen=True, slots=True)
class Idle:
    pass


@dataclass(frozen=True, slots=True)
class Pending:
    pass


@dataclass(frozen=True, slots=True)
class Succeeded:
    text: str


@dataclass(frozen=True, slots=True)
class Failed:
    message: str


TranslationAttempt = Union[Idle, Pending, Succeeded, Failed]


def attempt_for_text(text: str) -> TranslationAttempt:
    """Result slot holding ``text``, or ``Idle`` when there is nothing to show."""
    return Succeeded(text) if text else Idle()


@dataclass(frozen=True, slots=True)
class TranslatorState:
    """Snapshot of the translator form; replaced wholesale on every change."""

    source_text: str = ""
    source_lang: str = DEFAULT_SOURCE_LANG
    target_lang: str = DEFAULT_TARGET_LANG
    attempt: TranslationAttempt = field(default_factory=Idle)
    copied: bool = False

    @property
    def translated_text(self) -> str:
        if isinstance(self.attempt, Succeeded):
            return self.attempt.text
        return ""

    @property
    def is_translating(self) -> bool:
        return isinstance(self.attempt, Pending)

    @property
    def error_message(self) -> str | None:
        if isinstance(self.attempt, Failed):
            return self.attempt.message
        return None

    @property
    def char_count(self) -> int:
        return len(self.source_text)

    @property
    def counter_label(self) -> str:
        return f"{self.char_count}/{MAX_TEXT_LENGTH}"

    @property
    def can_translate(self) -> bool:
        return not self.is_translating and bool(self.source_text.strip())
