from __future__ import annotations

import logging
from typing import Protocol


logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Transient toast surface used by the translator controller."""

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingNotifier:
    """Development notifier that logs toasts instead of displaying them."""

    def success(self, message: str) -> None:
        logger.info("[toast] %s", message)

    def error(self, message: str) -> None:
        logger.warning("[toast] %s", message)
