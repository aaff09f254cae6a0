"""Slack incoming webhook transport."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


async def send_webhook_message(
    url: str,
    text: str,
    timeout: float | None = None,
) -> httpx.Response:
    """POST ``{"text": text}`` to an incoming webhook URL.

    Single attempt with TLS verification. The response is returned whatever
    its status; transport failures propagate as ``httpx.TransportError``.
    """
    extra: dict[str, Any] = {}
    if timeout is not None:
        extra["timeout"] = timeout

    async with httpx.AsyncClient(verify=True) as client:
        resp = await client.post(url, json={"text": text}, **extra)
    logger.debug("Webhook responded with status %s", resp.status_code)
    return resp
