"""Shared Pydantic data models for the Slack message actions."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Action inputs ---


class _ActionInput(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    message: str = Field(
        min_length=1,
        title="Message",
        description="The message to send",
    )


class WebhookMessageInput(_ActionInput):
    webhook_url: str | None = Field(
        default=None,
        title="Webhook URL",
        description=(
            "The webhook URL to send the request to. "
            "The URL in the app config takes precedence when both are set."
        ),
    )


class ConversationMessageInput(_ActionInput):
    conversation_id: str | None = Field(
        default=None,
        title="Conversation ID",
        description=(
            "The ID of the conversation to send the message to. Either this or the "
            "conversation name must be specified here or in the app configuration. "
            "If both are specified, the conversation ID will be used."
        ),
    )
    conversation_name: str | None = Field(
        default=None,
        title="Conversation Name",
        description=(
            "The name of the conversation to send the message to. "
            "This is only used if the conversation ID is not specified."
        ),
    )
    token: str | None = Field(
        default=None,
        title="Auth Token",
        description=(
            "The token to use to authenticate with the Slack API. This is only "
            "used if the token is not supplied in the app configuration."
        ),
    )


# --- Slack Web API responses ---


class _SlackResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    ok: bool = False
    error: Any | None = None


class ResponseMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    scopes: list[str] | None = None
    accepted_scopes: list[str] | None = None
    next_cursor: str | None = None
    messages: list[str] | None = None


class AuthTestResponse(_SlackResponse):
    url: str | None = None
    team: str | None = None
    user: str | None = None
    team_id: str | None = None
    user_id: str | None = None
    bot_id: str | None = None
    response_metadata: ResponseMetadata | None = None


class Conversation(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None
    is_channel: bool | None = None
    is_private: bool | None = None
    is_archived: bool | None = None


class ConversationsListResponse(_SlackResponse):
    channels: list[Conversation] | None = None
    response_metadata: ResponseMetadata | None = None


class ChatPostMessageResponse(_SlackResponse):
    channel: str | None = None
    ts: str | None = None
    response_metadata: ResponseMetadata | None = None
