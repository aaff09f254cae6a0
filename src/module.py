"""Registration of the Slack actions with a host."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from src.actions.conversation import SendSlackMessageViaSlackApiAction
from src.actions.webhook import SendSlackMessageViaWebhookAction

if TYPE_CHECKING:
    from src.actions.base import DeliveryAction
    from src.config.app_config import ConfigReader

logger = logging.getLogger(__name__)


class ActionRegistry:
    """Actions available to the host, keyed by action id."""

    def __init__(self) -> None:
        self._actions: dict[str, DeliveryAction[Any, Any]] = {}

    def add_actions(self, *actions: DeliveryAction[Any, Any]) -> None:
        for action in actions:
            if action.id in self._actions:
                raise ValueError(f"Action '{action.id}' is already registered")
            self._actions[action.id] = action
            logger.debug("Registered action %s", action.id)

    def get(self, action_id: str) -> DeliveryAction[Any, Any]:
        try:
            return self._actions[action_id]
        except KeyError:
            raise KeyError(f"Unknown action '{action_id}'") from None

    def list(self) -> list[DeliveryAction[Any, Any]]:
        return list(self._actions.values())


def create_slack_actions(config: ConfigReader) -> list[DeliveryAction[Any, Any]]:
    """Both Slack actions, sharing one config store."""
    return [
        SendSlackMessageViaWebhookAction(config),
        SendSlackMessageViaSlackApiAction(config),
    ]


def register_slack_actions(registry: ActionRegistry, config: ConfigReader) -> None:
    registry.add_actions(*create_slack_actions(config))
