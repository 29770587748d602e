import logging

import httpx

from config import settings

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def get_client() -> httpx.AsyncClient:
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=60.0,
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        )
    return _client


async def close_client():
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


async def _call_llm(client: httpx.AsyncClient, base_url: str, api_key: str,
                    model: str, messages: list[dict],
                    temperature: float, max_tokens: int,
                    json_mode: bool = False) -> httpx.Response:
    """Single LLM call to any OpenAI-compatible endpoint."""
    payload = {
        "model": model,
        "messages": messages,
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    if json_mode:
        payload["response_format"] = {"type": "json_object"}
    return await client.post(
        f"{base_url}/chat/completions",
        headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        },
        json=payload,
    )


# OpenRouter free models to try in order when primary is rate-limited
_FALLBACK_MODELS = [
    "google/gemma-3-27b-it:free",
    "mistralai/mistral-small-3.1-24b-instruct:free",
    "meta-llama/llama-3.3-70b-instruct:free",
]


async def _call_with_fallback(client: httpx.AsyncClient, messages: list[dict],
                              temperature: float, max_tokens: int,
                              model: str | None = None,
                              json_mode: bool = False) -> httpx.Response:
    """Try the primary model, fall back to the configured fallback provider on 429."""
    primary_model = model or settings.default_model
    response = await _call_llm(
        client, settings.openrouter_base_url, settings.openrouter_api_key,
        primary_model, messages, temperature, max_tokens, json_mode,
    )

    if response.status_code != 429:
        return response

    if not settings.fallback_api_key:
        logger.error("Primary LLM rate-limited and no fallback API key configured")
        return response

    logger.warning("Primary model %s rate-limited, trying fallbacks...", primary_model)

    # Configured fallback first, then the others
    fallbacks = [settings.fallback_model] + [m for m in _FALLBACK_MODELS if m != settings.fallback_model]

    for fb_model in fallbacks:
        logger.info("Trying fallback: %s", fb_model)
        response = await _call_llm(
            client, settings.fallback_base_url, settings.fallback_api_key,
            fb_model, messages, temperature, max_tokens, json_mode,
        )
        if response.status_code == 200:
            logger.info("Fallback %s succeeded", fb_model)
            return response
        if response.status_code != 429:
            return response
        logger.warning("Fallback %s also rate-limited, trying next...", fb_model)

    logger.error("All fallback models exhausted")
    return response


async def chat_completion(
    prompt: str,
    system: str = "",
    model: str | None = None,
    temperature: float = 0.7,
    max_tokens: int = 1024,
    json_mode: bool = False,
) -> str:
    messages = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})

    client = get_client()
    response = await _call_with_fallback(client, messages, temperature, max_tokens, model, json_mode)
    if response.status_code != 200:
        logger.error("LLM error %s: %s", response.status_code, response.text)
    response.raise_for_status()
    data = response.json()
    choices = data.get("choices") or []
    if not choices:
        return ""
    return choices[0].get("message", {}).get("content") or ""
