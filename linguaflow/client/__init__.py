"""Client-side controller for the LinguaFlow translator form."""

from .api import TranslationApiClient, TranslationRequestError
from .controller import TranslatorController, create_translator_controller
from .state import Failed, Idle, Pending, Succeeded, TranslatorState
from .view import TranslatorView, render

__all__ = [
    "Failed",
    "Idle",
    "Pending",
    "Succeeded",
    "TranslationApiClient",
    "TranslationRequestError",
    "TranslatorController",
    "TranslatorState",
    "TranslatorView",
    "create_translator_controller",
    "render",
]
