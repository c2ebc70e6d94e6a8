from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import replace
from typing import Callable, Protocol, Sequence

from linguaflow.client.api import GENERIC_FAILURE_MESSAGE, TranslationApiClient, TranslationRequestError
from linguaflow.client.clipboard import Clipboard, ClipboardError, PyperclipClipboard
from linguaflow.client.notifications import LoggingNotifier, Notifier
from linguaflow.client.state import (
    Failed,
    Pending,
    TranslationAttempt,
    TranslatorState,
    attempt_for_text,
)
from linguaflow.client.view import TranslatorView, render
from linguaflow.core.config import AppSettings, get_settings
from linguaflow.core.languages import LANGUAGES, MAX_TEXT_LENGTH, LanguageEntry


logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter text to translate"
SAME_LANGUAGE_MESSAGE = "Source and target languages must be different"
COPIED_MESSAGE = "Copied to clipboard!"
COPY_RESET_DELAY_SECONDS = 2.0


class Cancellable(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], Cancellable]
StateListener = Callable[[TranslatorState], None]


def _default_scheduler(delay: float, callback: Callable[[], None]) -> Cancellable:
    """Run ``callback`` once after ``delay`` on the running loop, or a timer thread."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer
    return loop.call_later(delay, callback)


class TranslatorController:
    """Drive the two-panel translator form.

    Every user action produces a new ``TranslatorState`` that replaces the
    previous one in a single step, so subscribers never observe a partially
    applied change. Only one translation attempt is in flight at a time and a
    closed controller drops late results instead of applying them.
    """

    def __init__(
        self,
        api: TranslationApiClient,
        *,
        clipboard: Clipboard | None = None,
        notifier: Notifier | None = None,
        scheduler: Scheduler | None = None,
        copy_reset_delay: float = COPY_RESET_DELAY_SECONDS,
        languages: Sequence[LanguageEntry] = LANGUAGES,
        initial_state: TranslatorState | None = None,
    ) -> None:
        self._api = api
        self._clipboard = clipboard or PyperclipClipboard()
        self._notifier = notifier or LoggingNotifier()
        self._scheduler = scheduler or _default_scheduler
        self._copy_reset_delay = copy_reset_delay
        self._languages: tuple[LanguageEntry, ...] = tuple(languages)
        self._state = initial_state or TranslatorState()
        self._listeners: list[StateListener] = []
        self._copy_reset: Cancellable | None = None
        self._copy_token = 0
        self._generation = 0
        self._closed = False

    @property
    def state(self) -> TranslatorState:
        return self._state

    @property
    def languages(self) -> tuple[LanguageEntry, ...]:
        return self._languages

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for state changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def load_languages(self) -> tuple[LanguageEntry, ...]:
        """Refresh the language list from the proxy, keeping the bundled table on failure."""
        try:
            fetched = await self._api.fetch_languages()
        except Exception as exc:
            logger.warning("Falling back to bundled language table: %s", exc)
            return self._languages
        if fetched:
            self._languages = tuple(fetched)
        return self._languages

    def render(self) -> TranslatorView:
        """View model of the current state using the loaded language table."""
        return render(self._state, self._languages)

    def set_source_text(self, text: str) -> None:
        self._commit(replace(self._state, source_text=text[:MAX_TEXT_LENGTH]))

    def set_source_lang(self, code: str) -> None:
        self._commit(replace(self._state, source_lang=code))

    def set_target_lang(self, code: str) -> None:
        self._commit(replace(self._state, target_lang=code))

    def swap_languages(self) -> None:
        """Exchange both the language pair and the two panels' text."""
        state = self._state
        if state.is_translating:
            return
        self._cancel_copy_reset()
        self._commit(
            replace(
                state,
                source_lang=state.target_lang,
                target_lang=state.source_lang,
                source_text=state.translated_text,
                attempt=attempt_for_text(state.source_text),
                copied=False,
            )
        )

    async def translate(self) -> None:
        state = self._state
        if self._closed or state.is_translating:
            return
        if not state.source_text.strip():
            self._notifier.error(EMPTY_INPUT_MESSAGE)
            return
        if state.source_lang == state.target_lang:
            self._notifier.error(SAME_LANGUAGE_MESSAGE)
            return

        self._generation += 1
        generation = self._generation
        self._commit(replace(state, attempt=Pending()))

        outcome: TranslationAttempt = Failed(GENERIC_FAILURE_MESSAGE)
        try:
            translated = await self._api.translate(
                state.source_text,
                source_lang=state.source_lang,
                target_lang=state.target_lang,
            )
            outcome = attempt_for_text(translated)
        except TranslationRequestError as exc:
            outcome = Failed(str(exc) or GENERIC_FAILURE_MESSAGE)
        except Exception:
            logger.exception("Unexpected failure while translating")
        finally:
            applied = self._settle(generation, outcome)

        if applied and isinstance(outcome, Failed):
            self._notifier.error(outcome.message)

    def copy_result(self) -> bool:
        """Copy the translation to the clipboard and flag it for two seconds."""
        text = self._state.translated_text
        if self._closed or not text:
            return False

        try:
            self._clipboard.write_text(text)
        except ClipboardError as exc:
            self._notifier.error(str(exc))
            return False

        self._cancel_copy_reset()
        token = self._copy_token
        self._copy_reset = self._scheduler(
            self._copy_reset_delay, lambda: self._reset_copied(token)
        )
        self._commit(replace(self._state, copied=True))
        self._notifier.success(COPIED_MESSAGE)
        return True

    def close(self) -> None:
        """Tear down the controller; pending results and timers are discarded."""
        self._closed = True
        self._cancel_copy_reset()
        self._listeners.clear()

    def _settle(self, generation: int, outcome: TranslationAttempt) -> bool:
        if self._closed or generation != self._generation:
            logger.debug("Discarding stale translation result (generation=%s)", generation)
            return False
        self._commit(replace(self._state, attempt=outcome))
        return True

    def _cancel_copy_reset(self) -> None:
        self._copy_token += 1
        if self._copy_reset is not None:
            self._copy_reset.cancel()
            self._copy_reset = None

    def _reset_copied(self, token: int) -> None:
        if token != self._copy_token:
            return
        self._copy_reset = None
        self._commit(replace(self._state, copied=False))

    def _commit(self, state: TranslatorState) -> None:
        if self._closed or state == self._state:
            return
        self._state = state
        for listener in list(self._listeners):
            listener(state)


def create_translator_controller(
    settings: AppSettings | None = None,
    **kwargs,
) -> TranslatorController:
    """Build a controller talking to the proxy configured in ``settings``."""
    settings = settings or get_settings()
    return TranslatorController(TranslationApiClient(settings.translator_api_base_url), **kwargs)
