"""FastAPI host exposing the registered Slack actions."""

from __future__ import annotations

import logging
import os
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.config.app_config import AppConfig, ConfigReader
from src.module import ActionRegistry, register_slack_actions
from src.slack.errors import (
    ConfigurationError,
    DeliveryError,
    InputError,
    ScopeError,
    SetupError,
    UPSTREAM_ERRORS,
    SlackActionError,
)

logger = logging.getLogger(__name__)

_ERROR_STATUS: dict[type[SlackActionError], int] = {
    ConfigurationError: 400,
    InputError: 400,
    SetupError: 401,
    ScopeError: 403,
    DeliveryError: 502,
}


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn --factory: reads config from the environment."""
    config_path = os.environ.get("APP_CONFIG_PATH")
    config = AppConfig.from_file(config_path) if config_path else AppConfig.from_env()
    return create_app(config)


def create_app(
    config: ConfigReader,
    registry: ActionRegistry | None = None,
) -> FastAPI:
    """Create the action host app. Registers the Slack actions unless a registry is given."""
    if registry is None:
        registry = ActionRegistry()
        register_slack_actions(registry, config)

    app = FastAPI(docs_url=None, redoc_url=None)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/actions")
    async def list_actions() -> list[dict[str, Any]]:
        return [
            {"id": a.id, "description": a.description, "schema": a.schema()}
            for a in registry.list()
        ]

    @app.post("/actions/{action_id}")
    async def invoke_action(action_id: str, request: Request) -> JSONResponse:
        try:
            action = registry.get(action_id)
        except KeyError:
            return JSONResponse(
                {"error": {"type": "NotFound", "message": f"Unknown action '{action_id}'"}},
                status_code=404,
            )

        try:
            body = await request.json()
        except ValueError:
            return JSONResponse(
                {"error": {"type": "InvalidInput", "message": "Body must be JSON"}},
                status_code=422,
            )

        try:
            await action.run(body, logging.getLogger(f"{__name__}.{action.id}"))
        except ValidationError as e:
            details = e.errors(include_url=False, include_context=False)
            return JSONResponse(
                {"error": {"type": "InvalidInput", "details": details}},
                status_code=422,
            )
        except SlackActionError as e:
            return _error_response(e, _ERROR_STATUS.get(type(e), 500))
        except UPSTREAM_ERRORS as e:
            logger.warning("Action %s failed to reach Slack: %s", action.id, e)
            return JSONResponse(
                {"error": {"type": type(e).__name__, "message": "Upstream unavailable"}},
                status_code=502,
            )

        return JSONResponse({"status": "ok"})

    return app


def _error_response(error: SlackActionError, status_code: int) -> JSONResponse:
    return JSONResponse(
        {"error": {"type": type(error).__name__, "message": str(error)}},
        status_code=status_code,
    )
