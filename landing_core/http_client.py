"""Outbound HTTP client shared by the upstream adapters."""

from typing import Callable, Optional

import httpx

# Upper bound for a single upstream call (connect + read), in seconds
HTTP_TIMEOUT_SECONDS = 30.0

ClientFactory = Callable[[], httpx.AsyncClient]


def build_async_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the service's timeout and redirect policy."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(HTTP_TIMEOUT_SECONDS),
        follow_redirects=True,
        transport=transport,
    )


def get_client_factory() -> ClientFactory:
    """
    FastAPI dependency returning the client constructor.

    Handlers open a client only once a request has passed the method gate
    and validation, so preflights and rejected requests make no connections.
    """
    return build_async_client
