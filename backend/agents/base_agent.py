from abc import ABC, abstractmethod


class BaseAgent(ABC):
    """A recommender picks one candidate for a set of preferences.

    ``run`` receives ``{"request": RecommendationRequest}`` and returns
    ``{"output": {"country": ..., "reason": ...}}``, or ``{"output": None}``
    when it has nothing to offer.
    """

    name: str = "base"

    @abstractmethod
    async def run(self, input_data: dict) -> dict:
        raise NotImplementedError
