"""Shared test fixtures for the Slack message actions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.actions.conversation import REQUIRED_SCOPES
from src.models import (
    AuthTestResponse,
    ChatPostMessageResponse,
    ConversationsListResponse,
)
from src.slack.web_client import SlackWebClient

MESSAGE = "Hello, world!"


class StaticConfig:
    """Config store answering from a flat key map, with an optional fallback."""

    def __init__(self, values: dict[str, str] | None = None, default: str | None = None) -> None:
        self._values = values or {}
        self._default = default

    def get_optional_string(self, key: str) -> str | None:
        return self._values.get(key, self._default)


@pytest.fixture
def mock_logger() -> MagicMock:
    return MagicMock(spec=logging.Logger)


# --- Factory functions for test data ---


def make_auth_test_response(
    scopes: Iterable[str] | None = REQUIRED_SCOPES, **kwargs: Any,
) -> AuthTestResponse:
    defaults: dict[str, Any] = {"ok": True, "team": "test-team", "user": "test-bot"}
    if scopes is not None:
        defaults["response_metadata"] = {"scopes": list(scopes)}
    defaults.update(kwargs)
    return AuthTestResponse.model_validate(defaults)


def make_conversations_list(
    channels: list[dict[str, Any]] | None, **kwargs: Any,
) -> ConversationsListResponse:
    defaults: dict[str, Any] = {"ok": True, "channels": channels}
    defaults.update(kwargs)
    return ConversationsListResponse.model_validate(defaults)


def make_post_message_response(**kwargs: Any) -> ChatPostMessageResponse:
    defaults: dict[str, Any] = {"ok": True, "channel": "C123", "ts": "1700000000.000100"}
    defaults.update(kwargs)
    return ChatPostMessageResponse.model_validate(defaults)


def make_slack_client(
    auth: AuthTestResponse | None = None,
    listing: ConversationsListResponse | None = None,
    post: ChatPostMessageResponse | None = None,
) -> MagicMock:
    """SlackWebClient stand-in with async methods returning canned responses."""
    client = MagicMock(spec=SlackWebClient)
    client.auth_test = AsyncMock(
        return_value=auth if auth is not None else make_auth_test_response(),
    )
    client.conversations_list = AsyncMock(
        return_value=listing if listing is not None else make_conversations_list([]),
    )
    client.chat_post_message = AsyncMock(
        return_value=post if post is not None else make_post_message_response(),
    )
    return client
