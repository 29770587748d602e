import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from errors import FormValidationError
from models.language import Language
from models.preferences import RecommendationForm
from models.recommendation import RecommenderSnapshot
from services import country_service
from services.language_service import LanguageState, language_state
from services.recommendation_service import get_recommender
from services.recommender_controller import RecommenderController

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recommendations"])

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


class RecommendationBody(RecommendationForm):
    language: Language | None = None


@router.post("/recommendations", response_model=RecommenderSnapshot)
@limiter.limit(settings.recommendation_rate_limit)
async def get_recommendation(request: Request, body: RecommendationBody):
    lang_state = LanguageState(body.language) if body.language else language_state
    controller = RecommenderController(
        load_countries=country_service.fetch_countries,
        recommender=get_recommender(),
        language_state=lang_state,
    )
    try:
        await controller.load_countries()
        form = RecommendationForm(
            budget=body.budget,
            travel_style=body.travel_style,
            interests=body.interests,
        )
        await controller.submit(form)
        return controller.snapshot()
    except FormValidationError as e:
        raise HTTPException(status_code=422, detail={e.field: e.message})
    finally:
        controller.dispose()
