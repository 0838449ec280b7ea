"""
Gemini integration for prompt generation.

Calls the Gemini `generateContent` REST endpoint with a single text part and
a fixed sampling configuration, and pulls the generated text out of the first
candidate.
"""

from typing import Any, Dict, Optional

import httpx

from landing_core.logger import get_logger

logger = get_logger(__name__)

# Model configuration
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash-exp"
DEFAULT_TEMPERATURE = 0.9
DEFAULT_TOP_K = 40
DEFAULT_TOP_P = 0.95
DEFAULT_MAX_OUTPUT_TOKENS = 300


class GenerationError(Exception):
    """Base class for failures talking to the Gemini API."""


class UpstreamStatusError(GenerationError):
    """Gemini answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Gemini API returned status {status_code}")
        self.status_code = status_code
        self.body = body


class EmptyGenerationError(GenerationError):
    """Gemini answered successfully but without any generated text."""


def generate_content_url(model: str = DEFAULT_MODEL) -> str:
    """URL of the generateContent method for `model` (the API key goes in the query string)."""
    return f"{GEMINI_API_BASE}/models/{model}:generateContent"


def build_request_body(prompt: str) -> Dict[str, Any]:
    """
    Build the generateContent request payload.

    Args:
        prompt: The full prompt text, sent as the only content part

    Returns:
        Dict[str, Any]: JSON-serializable request body
    """
    return {
        "contents": [
            {
                "parts": [
                    {"text": prompt},
                ],
            },
        ],
        "generationConfig": {
            "temperature": DEFAULT_TEMPERATURE,
            "topK": DEFAULT_TOP_K,
            "topP": DEFAULT_TOP_P,
            "maxOutputTokens": DEFAULT_MAX_OUTPUT_TOKENS,
        },
    }


def extract_text(data: Any) -> Optional[str]:
    """
    Return the text of the first part of the first candidate.

    Any missing level (no candidates, no content, no parts, no text) or a
    non-string text yields None.
    """
    if not isinstance(data, dict):
        return None
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    candidate = candidates[0]
    if not isinstance(candidate, dict):
        return None
    content = candidate.get("content")
    if not isinstance(content, dict):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) else None


async def generate_text(client: httpx.AsyncClient, api_key: str, prompt: str) -> str:
    """
    Generate text for `prompt` with the default Gemini model.

    Args:
        client: HTTP client used for the single outbound call
        api_key: Gemini API key
        prompt: The full prompt text

    Returns:
        str: The generated text, stripped of surrounding whitespace

    Raises:
        UpstreamStatusError: Gemini answered with a non-2xx status
        EmptyGenerationError: The response held no generated text
        httpx.HTTPError: The request could not be completed
        ValueError: The response body was not valid JSON
    """
    logger.debug(f"Gemini request - Model: {DEFAULT_MODEL}, prompt length: {len(prompt)}")

    response = await client.post(
        generate_content_url(),
        params={"key": api_key},
        json=build_request_body(prompt),
    )

    if not response.is_success:
        logger.error(f"Gemini API error: {response.status_code} {response.text}")
        raise UpstreamStatusError(response.status_code, response.text)

    text = extract_text(response.json())
    if not text:
        logger.error("No text generated from Gemini")
        raise EmptyGenerationError("Gemini response contained no generated text")

    return text.strip()
