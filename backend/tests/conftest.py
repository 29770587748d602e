import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("RECOMMENDER_BACKEND", "llm")

import pytest

from agents.base_agent import BaseAgent
from models.country import CountryRecord
from services.cache_service import cache


class FakeRecommender(BaseAgent):
    name = "fake"

    def __init__(self, output=None, error: Exception | None = None):
        self.output = output
        self.error = error
        self.calls = []

    async def run(self, input_data: dict) -> dict:
        self.calls.append(input_data)
        if self.error is not None:
            raise self.error
        return {"output": self.output}


@pytest.fixture
def countries() -> list[CountryRecord]:
    return [
        CountryRecord(name="İspaniya", name_en="Spain", name_ru="Испания", slug="spain",
                      budget_level="medium", travel_styles=["relax"], interests=["beach", "food"]),
        CountryRecord(name="Yaponiya", name_en="Japan", name_ru="Япония", slug="japan",
                      budget_level="high", travel_styles=["culture"], interests=["history", "city"]),
        CountryRecord(name="Gürcüstan", name_en="Georgia", slug="georgia",
                      budget_level="low", travel_styles=["adventure"], interests=["nature", "food"]),
    ]


@pytest.fixture
def fake_recommender():
    return FakeRecommender


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()
