"""
FastAPI application for the landing page.

This module provides the prompt generation endpoint, backed by Gemini, and
the newsletter signup endpoint, backed by a Google Sheets web app.
"""

import json
from typing import Any, Dict

from fastapi import Depends, FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from landing_core.config import GEMINI_API_KEY_ENV, SHEETS_URL_ENV, ServerConfig, get_config
from landing_core.cors import ROUTED_METHODS, cors_json, error_response, method_gate
from landing_core.http_client import ClientFactory, get_client_factory
from landing_core.llm import EmptyGenerationError, UpstreamStatusError, generate_text
from landing_core.logger import error, exception, warning
from landing_core.models import PromptResult, SubscriptionResult
from landing_core.sheets import save_subscription
from landing_core.validation import (
    InvalidRequest,
    parse_prompt_request,
    parse_subscription_request,
)

CONFIG_ERROR = "Server configuration error"
AI_GENERATION_FAILED = "AI generation failed. Please try again."
PROMPT_GENERATION_FAILED = "Failed to generate prompt. Please try again."
SUBSCRIPTION_FAILED = "Failed to save email. Please try again."

GENERATE_PATH = "/api/generate"
SUBSCRIBE_PATH = "/api/subscribe"
GATED_PATHS = frozenset([GENERATE_PATH, SUBSCRIBE_PATH])

app = FastAPI(
    title="Landing Page API",
    description="Prompt generation and newsletter signup endpoints",
    version="1.0.0"
)


async def read_json_body(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    An empty body, or JSON that is not an object, reads as `{}` so the
    field checks report what is missing. Malformed JSON raises.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    data = json.loads(raw)
    return data if isinstance(data, dict) else {}


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed(request: Request, exc: StarletteHTTPException) -> Response:
    """Send methods the router does not dispatch on the gated paths through the method gate."""
    if exc.status_code == 405 and request.url.path in GATED_PATHS:
        gated = method_gate(request.method)
        if gated is not None:
            return gated
    return await http_exception_handler(request, exc)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.api_route(GENERATE_PATH, methods=ROUTED_METHODS)
async def generate(
    request: Request,
    config: ServerConfig = Depends(get_config),
    client_factory: ClientFactory = Depends(get_client_factory),
) -> Response:
    """
    Generate text from a user query and an optional system prompt.

    Body: `{"systemPrompt"?: str, "userQuery": str}`. Answers `{"text": ...}`
    on success and `{"error": ...}` otherwise.
    """
    gated = method_gate(request.method)
    if gated is not None:
        return gated

    try:
        prompt_request = parse_prompt_request(await read_json_body(request))

        if not config.gemini_api_key:
            error(f"{GEMINI_API_KEY_ENV} not configured", variable=GEMINI_API_KEY_ENV)
            return error_response(CONFIG_ERROR, 500)

        async with client_factory() as client:
            text = await generate_text(client, config.gemini_api_key, prompt_request.full_prompt())
        return cors_json(PromptResult(text=text).model_dump())

    except InvalidRequest as e:
        return error_response(e.message, 400)
    except UpstreamStatusError:
        return error_response(AI_GENERATION_FAILED, 500)
    except EmptyGenerationError:
        return error_response(PROMPT_GENERATION_FAILED, 500)
    except Exception as e:
        exception("Generation error", exc=e)
        return error_response(PROMPT_GENERATION_FAILED, 500)


@app.api_route(SUBSCRIBE_PATH, methods=ROUTED_METHODS)
async def subscribe(
    request: Request,
    config: ServerConfig = Depends(get_config),
    client_factory: ClientFactory = Depends(get_client_factory),
) -> Response:
    """
    Record a newsletter signup.

    Body: `{"email": str}`. Once the address passes validation the caller is
    told it was saved, even if the spreadsheet rejects it.
    """
    gated = method_gate(request.method)
    if gated is not None:
        return gated

    try:
        subscription = parse_subscription_request(await read_json_body(request))

        if not config.sheets_url:
            error(f"{SHEETS_URL_ENV} not configured", variable=SHEETS_URL_ENV)
            return error_response(CONFIG_ERROR, 500)

        async with client_factory() as client:
            saved = await save_subscription(client, config.sheets_url, subscription.email)
        if not saved:
            warning("Signup not stored; reporting success to caller")

        return cors_json(SubscriptionResult().model_dump())

    except InvalidRequest as e:
        return error_response(e.message, 400)
    except Exception as e:
        exception("Subscription error", exc=e)
        return error_response(SUBSCRIPTION_FAILED, 500)
