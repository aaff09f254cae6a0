"""Read-only app config store with dotted-key lookup."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from src.slack.errors import ConfigurationError

# Environment variable -> app config key
_ENV_KEYS = {
    "SLACK_WEBHOOK_URL": "slack.webhookUrl",
    "SLACK_TOKEN": "slack.token",
    "SLACK_CONVERSATION_ID": "slack.conversationId",
    "SLACK_CONVERSATION_NAME": "slack.conversationName",
}


class ConfigReader(Protocol):
    """Anything that can look up an optional string by dotted key."""

    def get_optional_string(self, key: str) -> str | None:
        ...


class AppConfig:
    """Immutable view over a nested config mapping."""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: Mapping[str, Any] = data or {}

    @classmethod
    def from_file(cls, path: str) -> AppConfig:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"App config file not found: {path}")
        raw = json.loads(config_path.read_text())
        if not isinstance(raw, dict):
            raise ConfigurationError(f"App config must be a JSON object: {path}")
        return cls(raw)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Build the ``slack`` section from SLACK_* environment variables."""
        env = os.environ if environ is None else environ
        slack: dict[str, str] = {}
        for var, key in _ENV_KEYS.items():
            if var in env:
                slack[key.split(".", 1)[1]] = env[var]
        return cls({"slack": slack})

    def get_optional_string(self, key: str) -> str | None:
        """Return the string at ``key``, or None if any path segment is missing."""
        node: Any = self._data
        for segment in key.split("."):
            if not isinstance(node, Mapping) or segment not in node:
                return None
            node = node[segment]
        if node is None:
            return None
        if not isinstance(node, str):
            raise ConfigurationError(
                f"Invalid type in config for key '{key}', "
                f"got {type(node).__name__}, wanted string"
            )
        return node
