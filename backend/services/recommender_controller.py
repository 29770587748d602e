import logging
from enum import Enum
from typing import Awaitable, Callable

from agents.base_agent import BaseAgent
from errors import FormValidationError, SubmissionInProgressError
from models.country import CountryRecord
from models.language import Language
from models.preferences import RecommendationForm
from models.recommendation import (
    MatchedRecommendation,
    RecommendationRequest,
    RecommendationView,
    RecommenderSnapshot,
)
from services.language_service import LanguageState
from services.recommendation_service import recommend_and_match
from utils.translations import labels, t

logger = logging.getLogger(__name__)

CountryLoader = Callable[[], Awaitable[list[CountryRecord]]]


class RecommenderState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


class RecommenderController:
    """Drives one recommender dialog session.

    idle -> loading -> result | error -> idle (try again or close).
    Only one submission runs at a time and it is always awaited to the end.
    """

    def __init__(self, load_countries: CountryLoader, recommender: BaseAgent,
                 language_state: LanguageState):
        self._load_countries = load_countries
        self._recommender = recommender
        self._language_state = language_state
        self._language = language_state.language
        self._unsubscribe = language_state.subscribe(self._on_language_change)

        self.state = RecommenderState.IDLE
        self.form = RecommendationForm()
        self.recommendation: MatchedRecommendation | None = None
        self.error: str | None = None
        self._countries: list[CountryRecord] | None = None

    @property
    def language(self) -> Language:
        return self._language

    @property
    def countries(self) -> list[CountryRecord]:
        return self._countries or []

    def _on_language_change(self, language: Language) -> None:
        self._language = language

    async def load_countries(self) -> list[CountryRecord]:
        """Fetch the country list once per session; failures leave it empty."""
        if self._countries:
            return self._countries
        try:
            self._countries = list(await self._load_countries())
        except Exception:
            logger.exception("Failed to load countries")
            self._countries = []
        return self._countries

    def _build_request(self, form: RecommendationForm) -> RecommendationRequest:
        return RecommendationRequest(
            budget=form.budget,
            travel_style=form.travel_style,
            interests=form.interests,
            language=self._language,
            country_list=[c.display_name(self._language) for c in self.countries],
        )

    async def submit(self, form: RecommendationForm) -> RecommenderState:
        if self.state == RecommenderState.LOADING:
            raise SubmissionInProgressError()
        if form.budget is None:
            raise FormValidationError("budget", t("validation_budget", self._language))

        self.form = form
        self.recommendation = None
        self.error = None

        if not self.countries:
            self.error = t("no_countries_error", self._language)
            self.state = RecommenderState.ERROR
            return self.state

        self.state = RecommenderState.LOADING
        try:
            request = self._build_request(form)
            self.recommendation = await recommend_and_match(request, self._recommender, self.countries)
            self.state = RecommenderState.RESULT
        except Exception:
            logger.exception("Recommendation failed")
            self.recommendation = None
            self.error = t("recommendation_error", self._language)
            self.state = RecommenderState.ERROR
        return self.state

    def try_again(self) -> None:
        self.recommendation = None
        self.error = None
        self.form = RecommendationForm()
        self.state = RecommenderState.IDLE

    def close(self) -> None:
        self.try_again()

    def dispose(self) -> None:
        self._unsubscribe()

    def snapshot(self) -> RecommenderSnapshot:
        view = None
        if self.recommendation is not None:
            view = RecommendationView(
                country=self.recommendation.country,
                reason=self.recommendation.reason,
                slug=self.recommendation.slug,
                link=self.recommendation.link,
            )
        return RecommenderSnapshot(
            state=self.state.value,
            language=self._language,
            recommendation=view,
            error=self.error,
            labels=labels(self._language),
        )
