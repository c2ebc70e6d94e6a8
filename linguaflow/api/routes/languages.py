from fastapi import APIRouter

from linguaflow.core.languages import LANGUAGES
from linguaflow.schemas.translation import LanguageItem, LanguageListResponse

router = APIRouter()


@router.get(
    "",
    response_model=LanguageListResponse,
    summary="List the languages offered by the translator.",
)
async def list_languages() -> LanguageListResponse:
    return LanguageListResponse(
        languages=[LanguageItem.model_validate(entry) for entry in LANGUAGES]
    )
