"""``slack:sendMessage:conversation``: deliver a message through the Web API.

Steps run strictly in order and the first failure aborts the rest:
token resolution, one auth.test scope check, conversation resolution
(an explicit ID always wins over a name lookup), then chat.postMessage.
"""

from __future__ import annotations

from collections.abc import Callable

from src.actions.base import ActionContext, DeliveryAction
from src.config.app_config import ConfigReader
from src.config.resolver import EffectiveConfig
from src.models import ChatPostMessageResponse, ConversationMessageInput
from src.slack.errors import (
    ConfigurationError,
    DeliveryError,
    InputError,
    ScopeError,
    SetupError,
)
from src.slack.web_client import SlackWebClient

# Ordered: missing scopes are reported in this order
REQUIRED_SCOPES: tuple[str, ...] = ("chat:write", "channels:read")

_INVALID_CONVERSATION_NAME = (
    "Conversation Name is not valid. Please check the Conversation Name and try again"
)


class SendSlackMessageViaSlackApiAction(
    DeliveryAction[ConversationMessageInput, SlackWebClient],
):
    """Sends a Slack message to a specific conversation via the Web API."""

    id = "slack:sendMessage:conversation"
    description = (
        "Sends a Slack message to a specific conversation via the Slack API. "
        "This requires you to install the application in your workspace and "
        "provide a token"
    )
    input_model = ConversationMessageInput

    def __init__(
        self,
        config: ConfigReader,
        client_factory: Callable[[str], SlackWebClient] | None = None,
    ) -> None:
        super().__init__(config)
        self._client_factory = client_factory

    def resolve_params(self, effective: EffectiveConfig) -> SlackWebClient:
        if not effective.token:
            raise ConfigurationError(
                "Slack token is not specified in either the app-config or the "
                "action input. This must be specified in at least one place in "
                "order to send a message"
            )
        factory = self._client_factory or SlackWebClient
        return factory(effective.token)

    async def validate(self, params: SlackWebClient) -> None:
        """Check the token once with auth.test and compare granted scopes."""
        response = await params.auth_test()
        if not response.ok:
            raise SetupError(
                "Something isn't right with the setup of the token used to "
                "authenticate with the Slack API. Please check the token and try again."
            )

        metadata = response.response_metadata
        granted = set(metadata.scopes or []) if metadata else set()
        missing = [scope for scope in REQUIRED_SCOPES if scope not in granted]
        if missing:
            raise ScopeError(missing)

    async def resolve_conversation(
        self, client: SlackWebClient, effective: EffectiveConfig,
    ) -> str:
        conversation_id = effective.conversation_id
        conversation_name = effective.conversation_name
        if not conversation_id and not conversation_name:
            raise ConfigurationError(
                "Neither Conversation ID nor Conversation Name is specified in "
                "either the app-config or the action input. One of these must be "
                "specified in at least one place in order to send a message"
            )
        if conversation_id:
            return conversation_id

        listing = await client.conversations_list()
        if listing.channels is None:
            raise InputError(_INVALID_CONVERSATION_NAME)

        match = next(
            (c for c in listing.channels if c.name == conversation_name), None,
        )
        if match is None or match.id is None:
            raise InputError(_INVALID_CONVERSATION_NAME)
        return match.id

    async def deliver(
        self,
        ctx: ActionContext[ConversationMessageInput],
        effective: EffectiveConfig,
        params: SlackWebClient,
    ) -> None:
        channel = await self.resolve_conversation(params, effective)
        result = await params.chat_post_message(channel=channel, text=ctx.input.message)
        if result.error is not None:
            self._log_and_raise(ctx, result, effective.conversation_id)

    @staticmethod
    def _log_and_raise(
        ctx: ActionContext[ConversationMessageInput],
        result: ChatPostMessageResponse,
        conversation_id: str | None,
    ) -> None:
        message = (
            "Something went wrong while trying to send a request to the "
            f"Slack API - Error: {result.error}"
        )
        ctx.logger.error(message)
        ctx.logger.debug("Response metadata: %s", result.response_metadata)
        ctx.logger.debug("Conversation ID: %s", conversation_id)
        ctx.logger.debug("Input message: %s", ctx.input.message)
        raise DeliveryError(message, error=result.error)
