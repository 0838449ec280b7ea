"""Tests for request body validation."""

import pytest

from landing_core.validation import (
    InvalidRequest,
    is_valid_email,
    parse_prompt_request,
    parse_subscription_request,
)


@pytest.mark.parametrize("email", ["a@b.com", "x+tag@sub.domain.org", "ünï@cödé.de", "a@b.c.d"])
def test_accepts_loose_addresses(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["", "plain", "a@b", "a@@b.com", "a @b.com", "a@b.com ", "a@b."])
def test_rejects_malformed_addresses(email):
    assert not is_valid_email(email)


def test_prompt_request_keeps_query_verbatim():
    request = parse_prompt_request({"userQuery": "  spaced  ", "systemPrompt": "sys"})
    assert request.user_query == "  spaced  "
    assert request.full_prompt() == "sys\n\nUser request:   spaced  "


def test_non_string_system_prompt_is_stringified():
    request = parse_prompt_request({"userQuery": "q", "systemPrompt": 12})
    assert request.system_prompt == "12"
    assert request.full_prompt() == "12\n\nUser request: q"


@pytest.mark.parametrize("system_prompt", [None, "", 0, False, []])
def test_falsy_system_prompt_is_ignored(system_prompt):
    request = parse_prompt_request({"userQuery": "q", "systemPrompt": system_prompt})
    assert request.system_prompt is None
    assert request.full_prompt() == "q"


def test_first_failure_wins():
    with pytest.raises(InvalidRequest) as exc_info:
        parse_subscription_request({"email": 5})
    assert exc_info.value.message == "Email is required"
