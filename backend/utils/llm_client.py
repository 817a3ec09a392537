import logging

import httpx

from config import settings
from utils.http_client import get_client

logger = logging.getLogger(__name__)


async def _call_llm(client: httpx.AsyncClient, base_url: str, api_key: str,
                    model: str, messages: list[dict],
                    temperature: float, max_tokens: int | None) -> httpx.Response:
    """Single LLM call to any OpenAI-compatible endpoint."""
    body = {
        "model": model,
        "messages": messages,
        "temperature": temperature,
    }
    if max_tokens:
        body["max_tokens"] = max_tokens
    return await client.post(
        f"{base_url}/chat/completions",
        headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        },
        json=body,
    )


async def chat_completion_response(
    prompt: str,
    system: str = "",
    model: str | None = None,
    temperature: float = 0.7,
    max_tokens: int | None = None,
) -> httpx.Response:
    """Send one completion request and hand back the raw provider response."""
    messages = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": prompt})

    client = get_client()
    response = await _call_llm(
        client, settings.openai_base_url, settings.openai_api_key,
        model or settings.translate_model, messages, temperature, max_tokens,
    )
    if not response.is_success:
        logger.error("LLM error %s: %s", response.status_code, response.text)
    return response


def extract_content(payload) -> str | None:
    """Pull choices[0].message.content out of a completion payload, if present."""
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) else None
