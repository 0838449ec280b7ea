"""
Field checks for inbound request bodies.

Each check raises `InvalidRequest` carrying the message returned to the
caller; the first failing check wins.
"""

import re
from typing import Any, Dict

from landing_core.models import PromptRequest, SubscriptionRequest

# Deliberately loose: something@something.something with no whitespace and a single @
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class InvalidRequest(ValueError):
    """The request body failed validation; `message` is safe to return to the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def parse_prompt_request(body: Dict[str, Any]) -> PromptRequest:
    user_query = body.get("userQuery")
    if not user_query or not isinstance(user_query, str):
        raise InvalidRequest("User query is required")
    if not user_query.strip():
        raise InvalidRequest("User query cannot be empty")

    # Any truthy system prompt is kept; non-string values are stringified
    system_prompt = body.get("systemPrompt")
    system_prompt = str(system_prompt) if system_prompt else None

    return PromptRequest(systemPrompt=system_prompt, userQuery=user_query)


def parse_subscription_request(body: Dict[str, Any]) -> SubscriptionRequest:
    email = body.get("email")
    if not email or not isinstance(email, str):
        raise InvalidRequest("Email is required")
    if not is_valid_email(email):
        raise InvalidRequest("Invalid email format")

    return SubscriptionRequest(email=email)
