from agents.base_agent import BaseAgent
from models.country import CountryRecord
from models.recommendation import RecommendationRequest
from services.matcher import find_country
from services.scoring_service import rank_countries
from utils.translations import t, t_options


def _matched_labels(country: CountryRecord, request: RecommendationRequest) -> list[str]:
    lang = request.language
    details = []
    if request.budget and country.budget_level == request.budget.value:
        details.append(t_options("budget", lang)[request.budget.value])
    if request.travel_style and request.travel_style.value in country.travel_styles:
        details.append(t_options("travel_style", lang)[request.travel_style.value])
    interest_labels = t_options("interests", lang)
    details.extend(interest_labels[i.value] for i in request.interests if i.value in country.interests)
    return details


class ScoringAgent(BaseAgent):
    """Rule-based recommender: scores the candidates against their stored attributes."""

    name = "scoring"

    async def run(self, input_data: dict) -> dict:
        request: RecommendationRequest = input_data["request"]
        countries: list[CountryRecord] = input_data.get("countries", [])

        candidates = []
        for name in request.country_list:
            country = find_country(name, countries)
            if country is not None and country not in candidates:
                candidates.append(country)
        if not candidates:
            return {"output": None}

        best, _ = rank_countries(candidates, request, top_n=1)[0]
        display = best.display_name(request.language)
        details = _matched_labels(best, request)
        if details:
            reason = t("rule_reason", request.language, country=display, details=", ".join(details))
        else:
            reason = t("rule_reason_generic", request.language, country=display)
        return {"output": {"country": display, "reason": reason}}
