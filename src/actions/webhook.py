"""``slack:sendMessage``: deliver a message through an incoming webhook."""

from __future__ import annotations

import httpx

from src.actions.base import ActionContext, DeliveryAction
from src.config.resolver import EffectiveConfig
from src.models import WebhookMessageInput
from src.slack.errors import ConfigurationError, DeliveryError
from src.slack.webhook import send_webhook_message


class SendSlackMessageViaWebhookAction(DeliveryAction[WebhookMessageInput, str]):
    """Sends a Slack message via a webhook URL."""

    id = "slack:sendMessage"
    description = "Sends a Slack message via a webhook"
    input_model = WebhookMessageInput

    def resolve_params(self, effective: EffectiveConfig) -> str:
        if not effective.webhook_url:
            raise ConfigurationError(
                "Webhook URL is not specified in either the app-config or the "
                "action input. This must be specified in at least one place in "
                "order to send a message"
            )
        return effective.webhook_url

    async def deliver(
        self,
        ctx: ActionContext[WebhookMessageInput],
        effective: EffectiveConfig,
        params: str,
    ) -> None:
        resp = await send_webhook_message(params, ctx.input.message)
        if resp.status_code == 200:
            return

        message = (
            "Something went wrong while trying to send a request to the "
            f"webhook URL - StatusCode {resp.status_code}"
        )
        ctx.logger.error(message)
        ctx.logger.debug("Response body: %s", resp.text)
        # Webhook URLs are secrets; only the host is logged
        ctx.logger.debug("Webhook host: %s", httpx.URL(params).host)
        ctx.logger.debug("Input message: %s", ctx.input.message)
        raise DeliveryError(message, status_code=resp.status_code)
