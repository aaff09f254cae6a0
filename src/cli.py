"""Click CLI for sending Slack messages through either action."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import click
from pydantic import ValidationError

from src.actions.base import DeliveryAction
from src.actions.conversation import SendSlackMessageViaSlackApiAction
from src.actions.webhook import SendSlackMessageViaWebhookAction
from src.config.app_config import AppConfig
from src.slack.errors import UPSTREAM_ERRORS, SlackActionError


@click.group()
@click.option("--config", "config_path", default=None, help="Path to app config JSON.")
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Send Slack messages via a webhook or the Slack API.

    Without --config, SLACK_* environment variables act as the app config.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = (
            AppConfig.from_file(config_path) if config_path else AppConfig.from_env()
        )
    except (FileNotFoundError, ValueError, SlackActionError) as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.option("--message", required=True, help="Message text.")
@click.option("--webhook-url", default=None, help="Webhook URL (app config wins).")
@click.pass_context
def webhook(ctx: click.Context, message: str, webhook_url: str | None) -> None:
    """Send a message through an incoming webhook."""
    action = SendSlackMessageViaWebhookAction(ctx.obj["config"])
    _run(action, {"message": message, "webhookUrl": webhook_url})


@cli.command()
@click.option("--message", required=True, help="Message text.")
@click.option("--conversation-id", default=None, help="Conversation ID.")
@click.option("--conversation-name", default=None, help="Conversation name.")
@click.option("--token", default=None, help="Bot token (app config wins).")
@click.pass_context
def conversation(
    ctx: click.Context,
    message: str,
    conversation_id: str | None,
    conversation_name: str | None,
    token: str | None,
) -> None:
    """Send a message to a conversation through the Slack API."""
    action = SendSlackMessageViaSlackApiAction(ctx.obj["config"])
    _run(action, {
        "message": message,
        "conversationId": conversation_id,
        "conversationName": conversation_name,
        "token": token,
    })


def _run(action: DeliveryAction[Any, Any], data: dict[str, Any]) -> None:
    try:
        asyncio.run(action.run(data))
    except (SlackActionError, ValidationError) as e:
        raise click.ClickException(str(e)) from e
    except UPSTREAM_ERRORS as e:
        raise click.ClickException(
            f"Could not reach Slack: {type(e).__name__}: {e}",
        ) from e
    click.echo(f"Message sent via {action.id}")
