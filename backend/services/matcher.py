"""Resolve the model's free-form country name back to a known country record."""

from models.country import CountryRecord
from models.recommendation import MatchedRecommendation, RecommendationResponse


def _normalize(value: str | None) -> str:
    return value.strip().casefold() if value else ""


def _candidate_names(country: CountryRecord) -> list[str]:
    # Canonical name first, then English, then Russian
    return [country.name, country.name_en, country.name_ru]


def find_country(name: str, countries: list[CountryRecord]) -> CountryRecord | None:
    target = _normalize(name)
    if not target:
        return None
    for country in countries:
        if any(_normalize(n) == target for n in _candidate_names(country) if n):
            return country
    return None


def match_recommendation(
    response: RecommendationResponse, countries: list[CountryRecord]
) -> MatchedRecommendation:
    """Never fails: an unknown country yields an empty slug (text-only result)."""
    country = find_country(response.country, countries)
    return MatchedRecommendation(
        country=response.country.strip(),
        reason=response.reason,
        slug=country.slug if country else "",
    )
