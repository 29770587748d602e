from enum import Enum

from pydantic import BaseModel, field_validator


class Budget(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TravelStyle(str, Enum):
    ADVENTURE = "adventure"
    RELAX = "relax"
    FAMILY = "family"
    CULTURE = "culture"


class Interest(str, Enum):
    BEACH = "beach"
    NATURE = "nature"
    HISTORY = "history"
    CITY = "city"
    FOOD = "food"


def unique_in_order(values: list) -> list:
    seen = set()
    result = []
    for v in values:
        if v not in seen:
            seen.add(v)
            result.append(v)
    return result


class RecommendationForm(BaseModel):
    """What the user picks in the recommender dialog. Budget is required at submit time."""

    budget: Budget | None = None
    travel_style: TravelStyle | None = None
    interests: list[Interest] = []

    @field_validator("interests")
    @classmethod
    def drop_duplicate_interests(cls, v: list[Interest]) -> list[Interest]:
        return unique_in_order(v)
