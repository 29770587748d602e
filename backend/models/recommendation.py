from pydantic import BaseModel, Field, field_validator

from models.language import Language
from models.preferences import Budget, Interest, TravelStyle, unique_in_order


class RecommendationRequest(BaseModel):
    budget: Budget | None = None
    travel_style: TravelStyle | None = None
    interests: list[Interest] = []
    language: Language = Language.AZ
    country_list: list[str] = []

    @field_validator("interests")
    @classmethod
    def drop_duplicate_interests(cls, v: list[Interest]) -> list[Interest]:
        return unique_in_order(v)


class RecommendationResponse(BaseModel):
    country: str = Field(description="The name of the single best recommended country.")
    reason: str = Field(
        description="A brief, 2-3 sentence explanation for why this country was recommended "
                    "based on the user's preferences, in the user's language."
    )


class MatchedRecommendation(BaseModel):
    country: str
    reason: str
    slug: str = ""

    @property
    def link(self) -> str | None:
        return f"/{self.slug}" if self.slug else None


class RecommendationView(BaseModel):
    country: str
    reason: str
    slug: str = ""
    link: str | None = None


class RecommenderSnapshot(BaseModel):
    state: str
    language: Language
    recommendation: RecommendationView | None = None
    error: str | None = None
    labels: dict[str, str] = {}
