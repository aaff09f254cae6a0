"""Slack Web API client for the conversation action.

Wraps ``slack_sdk``'s ``AsyncWebClient`` and covers the three methods the
action needs: auth.test, conversations.list and chat.postMessage. The SDK
raises ``SlackApiError`` for ``ok: false`` and for non-2xx statuses; when
the error body carries an ``error`` code it is returned in the parsed
response so the action can classify it. Errors without one, and transport
failures (aiohttp, timeouts), propagate unwrapped.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient
from slack_sdk.web.async_slack_response import AsyncSlackResponse

from src.models import (
    AuthTestResponse,
    ChatPostMessageResponse,
    ConversationsListResponse,
)

logger = logging.getLogger(__name__)

SLACK_API_BASE = "https://slack.com/api/"
_SCOPES_HEADER = "x-oauth-scopes"


class SlackWebClient:
    """Token-bound Slack Web API client. Constructing it makes no network call."""

    def __init__(
        self,
        token: str,
        base_url: str = SLACK_API_BASE,
        web_client: AsyncWebClient | None = None,
        timeout: int | None = None,
    ) -> None:
        if web_client is None:
            extra: dict[str, Any] = {}
            if timeout is not None:
                extra["timeout"] = timeout
            web_client = AsyncWebClient(token=token, base_url=base_url, **extra)
        self._client = web_client
        self._base_url = base_url

    def __repr__(self) -> str:
        return f"SlackWebClient(base_url={self._base_url!r})"

    async def auth_test(self) -> AuthTestResponse:
        data, headers = await self._call("auth.test", self._client.auth_test)
        # Granted scopes arrive as a header; expose them like the official SDKs do
        scopes_header = _header(headers, _SCOPES_HEADER)
        if scopes_header is not None:
            metadata = data.setdefault("response_metadata", {})
            metadata["scopes"] = [s.strip() for s in scopes_header.split(",") if s.strip()]
        return AuthTestResponse.model_validate(data)

    async def conversations_list(
        self,
        types: str | None = None,
        exclude_archived: bool | None = None,
        limit: int | None = None,
    ) -> ConversationsListResponse:
        """Fetch a single page of conversations visible to the token."""
        params: dict[str, Any] = {}
        if types is not None:
            params["types"] = types
        if exclude_archived is not None:
            params["exclude_archived"] = exclude_archived
        if limit is not None:
            params["limit"] = limit
        data, _ = await self._call(
            "conversations.list", self._client.conversations_list, **params,
        )
        return ConversationsListResponse.model_validate(data)

    async def chat_post_message(self, channel: str, text: str) -> ChatPostMessageResponse:
        data, _ = await self._call(
            "chat.postMessage", self._client.chat_postMessage, channel=channel, text=text,
        )
        return ChatPostMessageResponse.model_validate(data)

    async def _call(
        self,
        name: str,
        method: Callable[..., Awaitable[AsyncSlackResponse]],
        **kwargs: Any,
    ) -> tuple[dict[str, Any], Mapping[str, Any]]:
        logger.debug("Calling Slack API method %s", name)
        try:
            response = await method(**kwargs)
        except SlackApiError as e:
            data = e.response.data if isinstance(e.response.data, dict) else {}
            if data.get("error") is None:
                raise
            logger.debug(
                "Slack API method %s returned status %s with error %s",
                name, e.response.status_code, data["error"],
            )
            response = e.response
        data = dict(response.data) if isinstance(response.data, dict) else {}
        return data, response.headers or {}


def _header(headers: Mapping[str, Any], name: str) -> str | None:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None
