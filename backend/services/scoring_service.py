from models.country import CountryRecord
from models.recommendation import RecommendationRequest

_BUDGET_ORDER = ["low", "medium", "high"]

BUDGET_WEIGHT = 2.0
STYLE_WEIGHT = 1.5
INTEREST_WEIGHT = 1.0


def _budget_score(country: CountryRecord, budget: str) -> float:
    if not country.budget_level or country.budget_level not in _BUDGET_ORDER:
        return 0.0
    distance = abs(_BUDGET_ORDER.index(country.budget_level) - _BUDGET_ORDER.index(budget))
    # Exact match gets full weight, one step away half
    return max(0.0, BUDGET_WEIGHT - distance * BUDGET_WEIGHT / 2)


def score_country(country: CountryRecord, request: RecommendationRequest) -> float:
    total = 0.0
    if request.budget:
        total += _budget_score(country, request.budget.value)
    if request.travel_style and request.travel_style.value in country.travel_styles:
        total += STYLE_WEIGHT
    total += INTEREST_WEIGHT * sum(1 for i in request.interests if i.value in country.interests)
    return round(total, 2)


def rank_countries(
    countries: list[CountryRecord], request: RecommendationRequest, top_n: int = 5
) -> list[tuple[CountryRecord, float]]:
    scored = [(c, score_country(c, request)) for c in countries]
    # sort is stable, so ties keep data-store order
    scored.sort(key=lambda x: x[1], reverse=True)
    return scored[:top_n]
