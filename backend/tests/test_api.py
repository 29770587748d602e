import pytest
from fastapi.testclient import TestClient

from main import app
from services.language_service import language_state

client = TestClient(app)


@pytest.fixture
def model_output(monkeypatch):
    """Replace the model call; set ``holder["output"]`` or ``holder["error"]``."""
    holder = {"output": None, "error": None, "prompts": []}

    async def fake_parse_json_with_retry(prompt, system, **kwargs):
        holder["prompts"].append(prompt)
        if holder["error"] is not None:
            raise holder["error"]
        return holder["output"]

    monkeypatch.setattr("agents.recommender_agent.parse_json_with_retry", fake_parse_json_with_retry)
    return holder


@pytest.fixture
def restore_language():
    original = language_state.language
    yield
    language_state.set(original)


def test_root_and_health():
    assert "/recommendations" in client.get("/").json()["endpoints"]
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["countries"] == 10


def test_list_countries_keeps_order():
    response = client.get("/countries")
    assert response.status_code == 200
    slugs = [c["slug"] for c in response.json()]
    assert slugs[:2] == ["spain", "japan"]


def test_get_country_by_slug():
    response = client.get("/countries/JAPAN")
    assert response.status_code == 200
    assert response.json()["name_en"] == "Japan"


def test_invalid_country():
    response = client.get("/countries/atlantis")
    assert response.status_code == 404
    assert response.json() == {"detail": "Country not found"}


def test_recommendation_result(model_output):
    model_output["output"] = {"country": "Japan", "reason": "Temples, trains and sushi."}

    response = client.post("/recommendations", json={
        "budget": "low", "interests": ["beach"], "language": "en",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["state"] == "result"
    assert body["recommendation"]["slug"] == "japan"
    assert body["recommendation"]["link"] == "/japan"
    assert body["error"] is None
    assert "- Spain\n- Japan\n" in model_output["prompts"][0]


def test_recommendation_unknown_country(model_output):
    model_output["output"] = {"country": "Atlantis", "reason": "Sunken wonders."}

    body = client.post("/recommendations", json={"budget": "high", "language": "en"}).json()

    assert body["state"] == "result"
    assert body["recommendation"]["slug"] == ""
    assert body["recommendation"]["link"] is None


def test_recommendation_empty_output_is_generic_error(model_output):
    model_output["output"] = None

    body = client.post("/recommendations", json={"budget": "medium", "language": "ru"}).json()

    assert body["state"] == "error"
    assert body["recommendation"] is None
    assert body["error"] == "Произошла ошибка при получении рекомендации."


def test_recommendation_model_failure_hides_details(model_output):
    model_output["error"] = RuntimeError("upstream 502 from provider")

    body = client.post("/recommendations", json={"budget": "medium", "language": "en"}).json()

    assert body["state"] == "error"
    assert "502" not in body["error"]


def test_recommendation_requires_budget(model_output):
    response = client.post("/recommendations", json={"interests": ["food"], "language": "en"})

    assert response.status_code == 422
    assert response.json() == {"detail": {"budget": "Budget selection is required."}}
    assert model_output["prompts"] == []


def test_recommendation_rejects_unknown_option(model_output):
    response = client.post("/recommendations", json={"budget": "free"})
    assert response.status_code == 422


def test_recommendation_uses_current_language(model_output, restore_language):
    model_output["output"] = {"country": "İspaniya", "reason": "Günəşli çimərliklər."}
    client.put("/language", json={"language": "az"})

    body = client.post("/recommendations", json={"budget": "low"}).json()

    assert body["language"] == "az"
    assert body["recommendation"]["slug"] == "spain"
    assert "- İspaniya\n" in model_output["prompts"][0]


def test_language_endpoints(restore_language):
    response = client.put("/language", json={"language": "ru"})
    assert response.status_code == 200
    assert client.get("/language").json() == {"language": "ru"}

    assert client.put("/language", json={"language": "fr"}).status_code == 422


def test_chat(monkeypatch):
    async def fake_chat_completion(prompt, system="", **kwargs):
        assert "Hacktivities" in system
        return " To find hotels in Spain, select Spain on the home page. "

    monkeypatch.setattr("routers.chat.chat_completion", fake_chat_completion)

    response = client.post("/chat", json={"prompt": "Tell me about hotels in Spain"})

    assert response.status_code == 200
    assert response.json() == {"response": "To find hotels in Spain, select Spain on the home page."}


def test_chat_rejects_blank_prompt():
    response = client.post("/chat", json={"prompt": "   "})
    assert response.status_code == 400


def test_chat_failure_is_generic(monkeypatch):
    async def failing_chat_completion(prompt, system="", **kwargs):
        raise RuntimeError("secret upstream detail")

    monkeypatch.setattr("routers.chat.chat_completion", failing_chat_completion)

    response = client.post("/chat", json={"prompt": "Hello"})

    assert response.status_code == 500
    assert "secret" not in response.json()["detail"]
