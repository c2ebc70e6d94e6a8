from linguaflow.core.config import get_settings
from linguaflow.integrations.llm import ChatCompletionClient
from linguaflow.services.translation import TranslationService

_completion_client: ChatCompletionClient | None = None
_translation_service: TranslationService | None = None


async def get_translation_service() -> TranslationService:
    """Provide singleton TranslationService instance."""
    global _translation_service, _completion_client
    if _translation_service is None:
        settings = get_settings()
        if _completion_client is None:
            _completion_client = ChatCompletionClient(settings)
        _translation_service = TranslationService(_completion_client)
    return _translation_service
