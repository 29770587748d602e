import asyncio
import json

import httpx
import pytest

from config import settings
from utils import llm_client
from utils.json_helpers import clean_json_response, parse_json_with_retry


@pytest.fixture
def mock_transport(monkeypatch):
    requests = []
    responses = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return responses.pop(0)

    monkeypatch.setattr(llm_client, "_client", httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    yield requests, responses
    monkeypatch.setattr(llm_client, "_client", None)


def _completion(content) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})


def test_chat_completion_sends_system_and_json_mode(mock_transport):
    requests, responses = mock_transport
    responses.append(_completion('{"country": "Spain"}'))

    reply = asyncio.run(llm_client.chat_completion("prompt", system="sys", json_mode=True))

    assert reply == '{"country": "Spain"}'
    payload = json.loads(requests[0].content)
    assert payload["messages"][0] == {"role": "system", "content": "sys"}
    assert payload["response_format"] == {"type": "json_object"}


def test_rate_limited_primary_falls_back(mock_transport, monkeypatch):
    requests, responses = mock_transport
    monkeypatch.setattr(settings, "fallback_api_key", "fallback-key")
    responses.extend([httpx.Response(429), _completion("hello")])

    assert asyncio.run(llm_client.chat_completion("hi")) == "hello"
    assert requests[1].headers["Authorization"] == "Bearer fallback-key"


def test_http_error_propagates(mock_transport):
    _, responses = mock_transport
    responses.append(httpx.Response(500, text="boom"))

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(llm_client.chat_completion("hi"))


def test_missing_content_is_empty_string(mock_transport):
    _, responses = mock_transport
    responses.append(_completion(None))

    assert asyncio.run(llm_client.chat_completion("hi")) == ""


def test_clean_json_response_strips_fences():
    assert clean_json_response('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert clean_json_response('  {"a": 1} ') == '{"a": 1}'


def test_parse_json_retries_with_feedback(monkeypatch):
    replies = ["not json", '```json\n{"country": "Spain", "reason": "Sun."}\n```']
    prompts = []

    async def fake_chat_completion(prompt, **kwargs):
        prompts.append(prompt)
        return replies.pop(0)

    monkeypatch.setattr("utils.json_helpers.chat_completion", fake_chat_completion)

    result = asyncio.run(parse_json_with_retry("pick one", system="sys", max_retries=1))

    assert result == {"country": "Spain", "reason": "Sun."}
    assert "not valid JSON" in prompts[1]


def test_parse_json_gives_up_after_retries(monkeypatch):
    async def fake_chat_completion(prompt, **kwargs):
        return "still not json"

    monkeypatch.setattr("utils.json_helpers.chat_completion", fake_chat_completion)

    with pytest.raises(json.JSONDecodeError):
        asyncio.run(parse_json_with_retry("pick one", system="sys", max_retries=1))


def test_parse_json_empty_reply_is_none(monkeypatch):
    async def fake_chat_completion(prompt, **kwargs):
        return "   "

    monkeypatch.setattr("utils.json_helpers.chat_completion", fake_chat_completion)

    assert asyncio.run(parse_json_with_retry("pick one", system="sys")) is None
