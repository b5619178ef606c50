"""Data models shared by the selector, the executor and the environment."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from polymer_init.config import InitConfig


class GeneratorDescriptor(BaseModel):
    """Registry metadata for one installed generator."""

    model_config = ConfigDict(frozen=True)

    namespace: str = Field(..., min_length=1, description="Unique identifier, e.g. 'polymer-init-element:app'")
    resolved: str = Field(default="unknown", description="Where the generator was loaded from")
    description: str | None = Field(default=None)


class Choice(BaseModel):
    """One entry of the selection list, as handed to the prompt facility."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    short: str


class GeneratorEnv(Protocol):
    """The two capabilities the core needs from a generator environment."""

    def get_generators_meta(self) -> Mapping[str, GeneratorDescriptor]: ...

    async def run(self, identifier: str) -> None: ...


PromptFn = Callable[[list[dict[str, Any]]], Awaitable[dict[str, Any]]]


@dataclass
class InitContext:
    """Caller-owned context passed to the selector and the executor.

    Attributes:
        env: Generator environment queried for metadata and used to run.
        prompt: Interactive prompt facility. Defaults to ``RichPrompter``.
        supports_rich_list: Terminal capability check. Defaults to
            ``polymer_init.init.shell.supports_rich_list``.
        template_name: Name used in user-facing messages instead of the
            registry identifier.
        config: Prompt and naming settings.
    """

    env: GeneratorEnv
    prompt: PromptFn | None = None
    supports_rich_list: Callable[[], bool] | None = None
    template_name: str | None = None
    config: InitConfig | None = None

    def resolved_config(self) -> InitConfig:
        return self.config or InitConfig()
