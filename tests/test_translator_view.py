from __future__ import annotations

from linguaflow.client.state import Failed, Pending, Succeeded, TranslatorState
from linguaflow.client.view import OUTPUT_PLACEHOLDER, render


def test_render_initial_state_shows_placeholders() -> None:
    view = render(TranslatorState())

    assert view.source_panel.header == "🇬🇧 English"
    assert view.source_panel.counter == "0/5000"
    assert view.target_panel.header == "🇪🇸 Spanish"
    assert view.target_panel.body == OUTPUT_PLACEHOLDER
    assert view.target_panel.is_placeholder
    assert view.translate_disabled
    assert view.copy_label is None


def test_render_pending_state_disables_trigger() -> None:
    view = render(TranslatorState(source_text="Hello", attempt=Pending()))

    assert view.target_panel.body == "Translating..."
    assert view.translate_label == "Translating..."
    assert view.translate_disabled


def test_render_result_offers_copy() -> None:
    state = TranslatorState(source_text="Hello", attempt=Succeeded("Hola"), copied=True)

    view = render(state)

    assert view.target_panel.body == "Hola"
    assert view.copy_label == "Copied"
    assert not view.translate_disabled
    assert view.source_panel.counter == "5/5000"


def test_render_failure_exposes_message() -> None:
    view = render(TranslatorState(source_text="Hello", attempt=Failed("Translation failed. Please try again.")))

    assert view.error_message == "Translation failed. Please try again."
    assert view.target_panel.is_placeholder


def test_render_unknown_language_uses_code() -> None:
    view = render(TranslatorState(source_lang="xx"))

    assert view.source_panel.header == "xx"
