"""Errors raised by the Slack delivery actions.

Every error carries a user-facing message. Transport failures are not
wrapped: they reach the caller as raised by httpx, aiohttp or slack_sdk.
"""

from __future__ import annotations

import asyncio

import aiohttp
import httpx
from slack_sdk.errors import SlackApiError


class SlackActionError(Exception):
    """Base class for delivery failures surfaced to the caller."""


class ConfigurationError(SlackActionError):
    """Raised when a required value is in neither the app config nor the input."""


class InputError(SlackActionError):
    """Raised when an input value is present but cannot be used."""


class SetupError(SlackActionError):
    """Raised when auth.test reports the token as not ok."""


class ScopeError(SlackActionError):
    """Raised when the token lacks one or more required scopes."""

    def __init__(self, missing_scopes: list[str]) -> None:
        self.missing_scopes = missing_scopes
        super().__init__(
            "The token provided does not have the correct scopes. "
            "Please ensure that the token has the following scopes: "
            f"{', '.join(missing_scopes)}"
        )


class DeliveryError(SlackActionError):
    """Raised when a remote call completes but reports a failure."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error: object | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        super().__init__(message)


# Failures reaching Slack at all; raised by httpx, aiohttp or slack_sdk, never wrapped
UPSTREAM_ERRORS: tuple[type[Exception], ...] = (
    httpx.TransportError,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    SlackApiError,
)
