from __future__ import annotations

import logging
from typing import Protocol

import pyperclip


logger = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """Raised when the system clipboard rejects a write."""


class Clipboard(Protocol):
    def write_text(self, text: str) -> None: ...


class PyperclipClipboard:
    """System clipboard backed by pyperclip."""

    def write_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError("Unable to access the system clipboard.") from exc
        logger.debug("Copied %s characters to the clipboard", len(text))
