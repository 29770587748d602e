from agents.base_agent import BaseAgent
from models.recommendation import RecommendationRequest
from utils.json_helpers import parse_json_with_retry

SYSTEM_PROMPT = """You are an expert travel recommender. You recommend ONE single country from a list you are given, based on the user's preferences.

Respond with ONLY a JSON object with exactly these fields:
- "country": the name of the single best recommended country, written exactly as it appears in the list
- "reason": a brief, 2-3 sentence explanation for why this country was recommended based on the user's preferences, written in the user's language

Do not use markdown formatting."""

NOT_SPECIFIED = "Not specified"


def build_recommendation_prompt(request: RecommendationRequest) -> str:
    budget = request.budget.value if request.budget else NOT_SPECIFIED
    travel_style = request.travel_style.value if request.travel_style else NOT_SPECIFIED
    interests = ", ".join(i.value for i in request.interests) or NOT_SPECIFIED
    country_lines = "\n".join(f"- {name}" for name in request.country_list)

    return (
        "Your task is to recommend ONE single country from the provided list "
        "based on the user's preferences.\n\n"
        f"Your response MUST be in the language specified by the user's language code "
        f"({request.language.value}, {request.language.display_name}).\n\n"
        "User Preferences:\n"
        f"- Budget: {budget}\n"
        f"- Travel Style: {travel_style}\n"
        f"- Interests: {interests}\n\n"
        "Available Countries (You MUST choose one from this list):\n"
        f"{country_lines}\n\n"
        "Based on these preferences, analyze the available countries and select the single "
        "best fit. Provide the country's name and a short (2-3 sentences) justification for "
        "your choice in the user's language."
    )


class RecommenderAgent(BaseAgent):
    name = "recommender"

    async def run(self, input_data: dict) -> dict:
        request: RecommendationRequest = input_data["request"]
        output = await parse_json_with_retry(
            prompt=build_recommendation_prompt(request),
            system=SYSTEM_PROMPT,
            temperature=0.4,
            max_tokens=400,
        )
        return {"output": output}
