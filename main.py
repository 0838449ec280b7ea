# main.py
"""
Entry point for Google Cloud Functions v2.

Each Flask request handed over by the Functions Framework is replayed
against the FastAPI application in `api.main`, and the ASGI response is
converted back into a Flask response.
"""

import asyncio
import os
from typing import Any, Dict, List, Tuple

import functions_framework
from flask import Request, Response

from api.main import app
from landing_core.logger import info


async def _call_app(request: Request) -> Tuple[int, List[Tuple[str, str]], bytes]:
    """Run one request through the ASGI app and collect status, headers and body."""
    body = request.get_data()
    path = request.path or "/"

    scope: Dict[str, Any] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": request.method,
        "scheme": request.scheme,
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": request.query_string,
        "headers": [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in request.headers.items()],
        "client": (request.remote_addr or "", 0),
        "server": (request.host.split(":")[0], 0),
    }

    body_sent = False

    async def receive():
        nonlocal body_sent
        if body_sent:
            return {"type": "http.disconnect"}
        body_sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    status_code = 500
    response_headers: List[Tuple[str, str]] = []
    chunks: List[bytes] = []

    async def send(message):
        nonlocal status_code, response_headers
        if message["type"] == "http.response.start":
            status_code = message["status"]
            response_headers = [(k.decode("latin-1"), v.decode("latin-1")) for k, v in message.get("headers", [])]
        elif message["type"] == "http.response.body":
            chunks.append(message.get("body", b""))

    await app(scope, receive, send)
    return status_code, response_headers, b"".join(chunks)


@functions_framework.http
def handle_request(request: Request) -> Response:
    """
    Cloud Function entry point that forwards requests to the FastAPI application.
    """
    info("Incoming request", method=request.method, path=request.path)

    status_code, headers, body = asyncio.run(_call_app(request))

    info("Sending response", status_code=status_code, content_length=len(body))

    # Flask recomputes Content-Length for the body it is given
    headers = [(k, v) for k, v in headers if k.lower() != "content-length"]
    return Response(response=body, status=status_code, headers=headers)


if __name__ == "__main__":
    # For local development
    import uvicorn
    port = int(os.environ.get("PORT", 8080))
    uvicorn.run(app, host="0.0.0.0", port=port)
