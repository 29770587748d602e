from fastapi import APIRouter
from pydantic import BaseModel

from models.language import Language
from services.language_service import language_state

router = APIRouter(prefix="/language", tags=["language"])


class LanguageBody(BaseModel):
    language: Language


@router.get("", response_model=LanguageBody)
async def get_language():
    return LanguageBody(language=language_state.language)


@router.put("", response_model=LanguageBody)
async def set_language(body: LanguageBody):
    language_state.set(body.language)
    return LanguageBody(language=language_state.language)
