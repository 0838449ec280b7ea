"""
Cross-origin and HTTP method handling shared by every public endpoint.

Both endpoints pass their request method through `method_gate` before any
other work and build every response with the helpers below, so the two can
never disagree on headers or allowed methods.
"""

from typing import Any, Dict, Optional

from fastapi import Response
from fastapi.responses import JSONResponse

from landing_core.models import ErrorResponse

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}

# Methods routed to the gated endpoints. Anything else is answered by
# `method_not_allowed` in api.main, which also goes through `method_gate`.
ROUTED_METHODS = ["GET", "HEAD", "OPTIONS", "PATCH", "DELETE", "POST", "PUT"]


def apply_cors_headers(response: Response) -> Response:
    """Set the CORS headers on `response` and return it."""
    response.headers.update(CORS_HEADERS)
    return response


def cors_json(content: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    """A JSON response carrying the CORS headers."""
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


def error_response(message: str, status_code: int) -> JSONResponse:
    """A `{"error": message}` response carrying the CORS headers."""
    return cors_json(ErrorResponse(error=message).model_dump(), status_code=status_code)


def method_gate(method: str) -> Optional[Response]:
    """
    Decide whether a request may reach the endpoint's business logic.

    Args:
        method: The inbound HTTP method

    Returns:
        None for POST; otherwise the finished response (an empty 200 for
        preflight OPTIONS requests, a 405 for anything else).
    """
    method = method.upper()
    if method == "OPTIONS":
        return apply_cors_headers(Response(status_code=200))
    if method != "POST":
        return error_response("Method not allowed", 405)
    return None
