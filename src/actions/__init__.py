"""Slack delivery actions."""

from src.actions.base import ActionContext, DeliveryAction
from src.actions.conversation import REQUIRED_SCOPES, SendSlackMessageViaSlackApiAction
from src.actions.webhook import SendSlackMessageViaWebhookAction

__all__ = [
    "REQUIRED_SCOPES",
    "ActionContext",
    "DeliveryAction",
    "SendSlackMessageViaSlackApiAction",
    "SendSlackMessageViaWebhookAction",
]
