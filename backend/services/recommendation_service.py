import logging
from collections.abc import Mapping

from agents.base_agent import BaseAgent
from agents.recommender_agent import RecommenderAgent
from agents.scoring_agent import ScoringAgent
from config import settings
from errors import EmptyCountryListError, EmptyOutputError
from models.country import CountryRecord
from models.recommendation import (
    MatchedRecommendation,
    RecommendationRequest,
    RecommendationResponse,
)
from services.matcher import match_recommendation

logger = logging.getLogger(__name__)


def get_recommender(backend: str | None = None) -> BaseAgent:
    backend = backend or settings.recommender_backend
    if backend == "rules":
        return ScoringAgent()
    return RecommenderAgent()


def validate_output(raw) -> RecommendationResponse:
    """Accept the model output only as a whole: a non-blank country and reason."""
    if not isinstance(raw, Mapping):
        raise EmptyOutputError()
    country = raw.get("country")
    reason = raw.get("reason")
    if not isinstance(country, str) or not country.strip():
        raise EmptyOutputError()
    if not isinstance(reason, str) or not reason.strip():
        raise EmptyOutputError()
    return RecommendationResponse(country=country.strip(), reason=reason.strip())


async def recommend_country(
    request: RecommendationRequest,
    recommender: BaseAgent,
    countries: list[CountryRecord] | None = None,
) -> RecommendationResponse:
    if not request.country_list:
        raise EmptyCountryListError()

    result = await recommender.run({"request": request, "countries": countries or []})
    response = validate_output(result.get("output"))
    logger.info("%s recommended %s", recommender.name, response.country)
    return response


async def recommend_and_match(
    request: RecommendationRequest,
    recommender: BaseAgent,
    countries: list[CountryRecord],
) -> MatchedRecommendation:
    response = await recommend_country(request, recommender, countries)
    matched = match_recommendation(response, countries)
    if not matched.slug:
        logger.info("Recommended country %r is not in the known list", response.country)
    return matched
