"""Config-over-input resolution shared by both delivery actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.config.app_config import ConfigReader

WEBHOOK_URL_KEY = "slack.webhookUrl"
TOKEN_KEY = "slack.token"
CONVERSATION_ID_KEY = "slack.conversationId"
CONVERSATION_NAME_KEY = "slack.conversationName"


def resolve(config: ConfigReader, key: str, input_value: str | None) -> str | None:
    """Return the config value when defined (even if empty), else the input value."""
    value = config.get_optional_string(key)
    if value is not None:
        return value
    return input_value


@dataclass(frozen=True)
class EffectiveConfig:
    """Values resolved once per invocation from app config and action input."""

    webhook_url: str | None = None
    token: str | None = None
    conversation_id: str | None = None
    conversation_name: str | None = None

    @classmethod
    def resolve(cls, config: ConfigReader, request: object) -> EffectiveConfig:
        # Only keys backing a field the action input declares are read
        declared = getattr(type(request), "model_fields", {})

        def lookup(key: str, field: str) -> str | None:
            if field not in declared:
                return None
            return resolve(config, key, getattr(request, field))

        return cls(
            webhook_url=lookup(WEBHOOK_URL_KEY, "webhook_url"),
            token=lookup(TOKEN_KEY, "token"),
            conversation_id=lookup(CONVERSATION_ID_KEY, "conversation_id"),
            conversation_name=lookup(CONVERSATION_NAME_KEY, "conversation_name"),
        )
