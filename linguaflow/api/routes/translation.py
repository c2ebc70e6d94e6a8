from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from linguaflow.api.deps import get_translation_service
from linguaflow.core.cors import preflight_response
from linguaflow.integrations.llm import UpstreamServiceError
from linguaflow.schemas.translation import (
    ErrorResponse,
    TranslationRequest,
    TranslationResponse,
)
from linguaflow.services.translation import (
    SERVICE_ERROR_MESSAGE,
    EmptyTranslationError,
    TranslationService,
    TranslationValidationError,
)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "",
    response_model=TranslationResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    status_code=status.HTTP_200_OK,
    summary="Translate text between two languages.",
)
async def translate_text(
    payload: TranslationRequest,
    translator: TranslationService = Depends(get_translation_service),
):
    """Relay the text to the chat-completion provider and return its translation."""
    try:
        translated = await translator.translate(payload)
    except TranslationValidationError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except UpstreamServiceError:
        return _error(status.HTTP_502_BAD_GATEWAY, SERVICE_ERROR_MESSAGE)
    except EmptyTranslationError as exc:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    return JSONResponse(
        content=TranslationResponse(translated_text=translated).model_dump(by_alias=True)
    )


@router.options("", include_in_schema=False)
async def translate_preflight() -> Response:
    return preflight_response()
