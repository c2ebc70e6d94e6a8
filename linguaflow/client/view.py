from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from linguaflow.client.state import TranslatorState
from linguaflow.core.languages import LANGUAGES, LanguageEntry


OUTPUT_PLACEHOLDER = "Translation will appear here..."
INPUT_PLACEHOLDER = "Enter text to translate..."
TRANSLATING_LABEL = "Translating..."


@dataclass(frozen=True, slots=True)
class PanelView:
    header: str
    body: str
    is_placeholder: bool
    counter: str | None = None


@dataclass(frozen=True, slots=True)
class TranslatorView:
    """Presentation model of the two-panel translator page."""

    source_panel: PanelView
    target_panel: PanelView
    translate_label: str
    translate_disabled: bool
    copy_label: str | None
    error_message: str | None


def panel_header(code: str, languages: Sequence[LanguageEntry] = LANGUAGES) -> str:
    for entry in languages:
        if entry.code == code:
            return f"{entry.flag} {entry.name}".strip()
    return code


def render(state: TranslatorState, languages: Sequence[LanguageEntry] = LANGUAGES) -> TranslatorView:
    source_panel = PanelView(
        header=panel_header(state.source_lang, languages),
        body=state.source_text or INPUT_PLACEHOLDER,
        is_placeholder=not state.source_text,
        counter=state.counter_label,
    )

    if state.is_translating:
        target_body, target_placeholder = TRANSLATING_LABEL, False
    elif state.translated_text:
        target_body, target_placeholder = state.translated_text, False
    else:
        target_body, target_placeholder = OUTPUT_PLACEHOLDER, True

    target_panel = PanelView(
        header=panel_header(state.target_lang, languages),
        body=target_body,
        is_placeholder=target_placeholder,
    )

    copy_label = None
    if state.translated_text:
        copy_label = "Copied" if state.copied else "Copy"

    return TranslatorView(
        source_panel=source_panel,
        target_panel=target_panel,
        translate_label=TRANSLATING_LABEL if state.is_translating else "Translate",
        translate_disabled=not state.can_translate,
        copy_label=copy_label,
        error_message=state.error_message,
    )
