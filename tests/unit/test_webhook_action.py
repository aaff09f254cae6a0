"""Tests for the slack:sendMessage webhook action."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from src.actions.base import ActionContext
from src.actions.webhook import SendSlackMessageViaWebhookAction
from src.config.app_config import AppConfig
from src.models import WebhookMessageInput
from src.slack.errors import ConfigurationError, DeliveryError
from tests.conftest import MESSAGE, StaticConfig


def _ctx(logger: MagicMock, **kwargs: str) -> ActionContext[WebhookMessageInput]:
    return ActionContext(input=WebhookMessageInput(message=MESSAGE, **kwargs), logger=logger)


def _response(status_code: int, text: str = "") -> MagicMock:
    return MagicMock(status_code=status_code, text=text)


class TestWebhookUrlResolution:
    @pytest.mark.asyncio
    async def test_missing_url_fails(self, mock_logger: MagicMock) -> None:
        action = SendSlackMessageViaWebhookAction(StaticConfig())
        with patch("src.actions.webhook.send_webhook_message", new_callable=AsyncMock) as send:
            with pytest.raises(ConfigurationError) as exc_info:
                await action.handler(_ctx(mock_logger))
        assert str(exc_info.value) == (
            "Webhook URL is not specified in either the app-config or the action "
            "input. This must be specified in at least one place in order to send "
            "a message"
        )
        send.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_config_url_fails(self, mock_logger: MagicMock) -> None:
        action = SendSlackMessageViaWebhookAction(StaticConfig({"slack.webhookUrl": ""}))
        with pytest.raises(ConfigurationError, match="Webhook URL is not specified"):
            await action.handler(_ctx(mock_logger, webhook_url="https://input.example"))

    @pytest.mark.asyncio
    async def test_sends_to_config_url(self, mock_logger: MagicMock) -> None:
        action = SendSlackMessageViaWebhookAction(StaticConfig(default="https://example.com"))
        with patch("src.actions.webhook.send_webhook_message", new_callable=AsyncMock) as send:
            send.return_value = _response(200)
            await action.handler(_ctx(mock_logger))
        send.assert_awaited_once_with("https://example.com", MESSAGE)

    @pytest.mark.asyncio
    async def test_prefers_config_url_over_input(self, mock_logger: MagicMock) -> None:
        action = SendSlackMessageViaWebhookAction(StaticConfig(default="https://example.com"))
        with patch("src.actions.webhook.send_webhook_message", new_callable=AsyncMock) as send:
            send.return_value = _response(200)
            await action.handler(_ctx(mock_logger, webhook_url="https://dontusethis.com"))
        assert send.call_args[0][0] == "https://example.com"

    @pytest.mark.asyncio
    async def test_uses_input_url_without_config(self, mock_logger: MagicMock) -> None:
        action = SendSlackMessageViaWebhookAction(StaticConfig())
        with patch("src.actions.webhook.send_webhook_message", new_callable=AsyncMock) as send:
            send.return_value = _response(200)
            await action.handler(
                _ctx(mock_logger, webhook_url="https://nevergonnagiveyouup.com"),
            )
        assert send.call_args[0][0] == "https://nevergonnagiveyouup.com"

    @pytest.mark.asyncio
    async def test_unrelated_slack_keys_ignored(self) -> None:
        config = AppConfig({
            "slack": {"webhookUrl": "https://example.com", "conversationId": 12345},
        })
        action = SendSlackMessageViaWebhookAction(config)
        with patch("src.actions.webhook.send_webhook_message", new_callable=AsyncMock) as send:
            send.return_value = _response(200)
            await action.run({"message": MESSAGE})
        send.assert_awaited_once_with("https://example.com", MESSAGE)


class TestWebhookOutcome:
    @pytest.mark.asyncio
    async def test_success_logs_nothing(self, mock_logger: MagicMock) -> None:
        action = SendSlackMessageViaWebhookAction(StaticConfig(default="https://example.com"))
        with patch("src.actions.webhook.send_webhook_message", new_callable=AsyncMock) as send:
            send.return_value = _response(200)
            await action.handler(_ctx(mock_logger))
        mock_logger.error.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [201, 204, 400, 404, 500])
    async def test_non_200_status_fails(self, mock_logger: MagicMock, status: int) -> None:
        action = SendSlackMessageViaWebhookAction(StaticConfig(default="https://example.com"))
        with patch("src.actions.webhook.send_webhook_message", new_callable=AsyncMock) as send:
            send.return_value = _response(status, text="invalid_payload")
            with pytest.raises(DeliveryError) as exc_info:
                await action.handler(_ctx(mock_logger))
        assert (
            "Something went wrong while trying to send a request to the webhook URL "
            f"- StatusCode {status}"
        ) in str(exc_info.value)
        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_failure_logs_context(self, mock_logger: MagicMock) -> None:
        action = SendSlackMessageViaWebhookAction(
            StaticConfig(default="https://hooks.slack.com/services/T/B/secret"),
        )
        with patch("src.actions.webhook.send_webhook_message", new_callable=AsyncMock) as send:
            send.return_value = _response(400, text="invalid_payload")
            with pytest.raises(DeliveryError):
                await action.handler(_ctx(mock_logger))

        mock_logger.error.assert_called_once()
        debug_args = [c.args for c in mock_logger.debug.call_args_list]
        assert ("Response body: %s", "invalid_payload") in debug_args
        assert ("Webhook host: %s", "hooks.slack.com") in debug_args
        assert ("Input message: %s", MESSAGE) in debug_args
        assert not any("secret" in str(a) for args in debug_args for a in args)

    @pytest.mark.asyncio
    async def test_transport_error_propagates_unwrapped(self, mock_logger: MagicMock) -> None:
        action = SendSlackMessageViaWebhookAction(StaticConfig(default="https://example.com"))
        with patch("src.actions.webhook.send_webhook_message", new_callable=AsyncMock) as send:
            send.side_effect = httpx.ConnectError("connection refused")
            with pytest.raises(httpx.ConnectError):
                await action.handler(_ctx(mock_logger))
        mock_logger.error.assert_not_called()


class TestWebhookActionDeclaration:
    def test_id_and_schema(self) -> None:
        action = SendSlackMessageViaWebhookAction(StaticConfig())
        assert action.id == "slack:sendMessage"
        schema = action.schema()["input"]
        assert schema["required"] == ["message"]
        assert set(schema["properties"]) == {"message", "webhookUrl"}

    @pytest.mark.asyncio
    async def test_run_parses_raw_input(self) -> None:
        action = SendSlackMessageViaWebhookAction(StaticConfig())
        with patch("src.actions.webhook.send_webhook_message", new_callable=AsyncMock) as send:
            send.return_value = _response(200)
            await action.run({"message": MESSAGE, "webhookUrl": "https://example.com"})
        send.assert_awaited_once_with("https://example.com", MESSAGE)
