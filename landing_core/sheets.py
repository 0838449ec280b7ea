"""
Newsletter signup storage via a Google Apps Script web app.

The web app appends each posted `{email, timestamp}` pair to a spreadsheet.
"""

from datetime import datetime, timezone
from typing import Optional

import httpx

from landing_core.logger import get_logger

logger = get_logger(__name__)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. `2024-05-01T12:00:00.000Z`."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def save_subscription(
    client: httpx.AsyncClient,
    sheets_url: str,
    email: str,
    timestamp: Optional[str] = None,
) -> bool:
    """
    Post a signup to the spreadsheet web app.

    A non-2xx answer is logged and reported through the return value; it is
    never raised. Transport failures propagate.

    Args:
        client: HTTP client used for the single outbound call
        sheets_url: The web app URL
        email: The address exactly as submitted
        timestamp: Signup time; defaults to now

    Returns:
        bool: True if the web app accepted the signup
    """
    payload = {
        "email": email,
        "timestamp": timestamp or utc_timestamp(),
    }
    response = await client.post(sheets_url, json=payload)

    if not response.is_success:
        logger.error(f"Google Sheets submission failed: {response.status_code}")
        logger.error(f"Error details: {response.text}")
        return False

    return True
