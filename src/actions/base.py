"""Common shape of a Slack delivery action.

Both actions run the same template: resolve the effective config once,
turn it into delivery parameters, validate them, then deliver. Any step
may raise; nothing is retried.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from src.config.resolver import EffectiveConfig

if TYPE_CHECKING:
    from src.config.app_config import ConfigReader

InputT = TypeVar("InputT", bound=BaseModel)
ParamsT = TypeVar("ParamsT")

logger = logging.getLogger(__name__)


@dataclass
class ActionContext(Generic[InputT]):
    """Validated action input plus the logger the host wants used."""

    input: InputT
    logger: logging.Logger | logging.LoggerAdapter[Any] = field(default=logger)


class DeliveryAction(ABC, Generic[InputT, ParamsT]):
    """Base class for actions that deliver a message to Slack."""

    id: ClassVar[str]
    description: ClassVar[str]
    input_model: ClassVar[type[BaseModel]]

    def __init__(self, config: ConfigReader) -> None:
        self._config = config

    def schema(self) -> dict[str, Any]:
        """JSON schema of the action input, as declared to the host."""
        return {"input": self.input_model.model_json_schema(by_alias=True)}

    def parse_input(self, data: Mapping[str, Any]) -> InputT:
        """Validate raw host input. Raises pydantic.ValidationError."""
        return self.input_model.model_validate(data)  # type: ignore[return-value]

    async def run(
        self,
        data: Mapping[str, Any],
        log: logging.Logger | logging.LoggerAdapter[Any] | None = None,
    ) -> None:
        """Validate raw input and run the handler."""
        ctx = ActionContext(input=self.parse_input(data), logger=log or logger)
        await self.handler(ctx)

    async def handler(self, ctx: ActionContext[InputT]) -> None:
        effective = EffectiveConfig.resolve(self._config, ctx.input)
        params = self.resolve_params(effective)
        await self.validate(params)
        await self.deliver(ctx, effective, params)

    @abstractmethod
    def resolve_params(self, effective: EffectiveConfig) -> ParamsT:
        ...

    async def validate(self, params: ParamsT) -> None:
        return None

    @abstractmethod
    async def deliver(
        self,
        ctx: ActionContext[InputT],
        effective: EffectiveConfig,
        params: ParamsT,
    ) -> None:
        ...
