import json
import logging
from typing import Any

from config import settings
from utils.json_helpers import clean_json_response, response_payload
from utils.llm_client import chat_completion_response, extract_content

logger = logging.getLogger(__name__)

TRANSLATE_SYSTEM = """You are a professional resume translator. You translate resumes faithfully, keeping names, emails, phone numbers, URLs and dates unchanged.

Return ONLY valid JSON with exactly the same structure and keys as the input. Translate values only. No markdown, no explanation."""


class TranslationError(Exception):
    def __init__(self, status_code: int, message: str, raw: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.raw = raw


def build_prompt(resume: Any, target_language: str) -> str:
    return (
        f"Translate the following resume into {target_language}.\n"
        "Respond with the translated resume as a JSON object only.\n\n"
        f"{json.dumps(resume, ensure_ascii=False)}"
    )


async def translate_resume(resume: Any, target_language: str) -> Any:
    """Translate a resume with one LLM call and return the parsed JSON reply."""
    if not settings.openai_api_key:
        raise TranslationError(500, "OPENAI_API_KEY is not configured")

    response = await chat_completion_response(
        prompt=build_prompt(resume, target_language),
        system=TRANSLATE_SYSTEM,
        temperature=settings.translate_temperature,
    )
    payload = response_payload(response)
    if not response.is_success:
        raise TranslationError(502, f"LLM provider error: {response.status_code}", payload)

    content = extract_content(payload)
    if content is None:
        raise TranslationError(500, "Invalid response from LLM provider", payload)

    try:
        return json.loads(clean_json_response(content))
    except json.JSONDecodeError:
        logger.warning("Failed to parse translated resume: %.200s", content)
        raise TranslationError(500, "Failed to parse translated resume", payload)
