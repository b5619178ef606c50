"""polymer-init configuration.

Typed configuration for template selection. Settings use a Pydantic v2 model
so they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_TEMPLATE_DESCRIPTIONS: dict[str, str] = {
    "element": "A blank element template",
    "application": "A blank application template",
    "shop": 'The "Shop" Progressive Web App demo',
    "starter-kit": 'A starter application template, with navigation and "PRPL pattern" loading',
}


class InitConfig(BaseModel):
    """Settings for the generator selection prompt.

    Instances are usually created once by the CLI entry point and passed
    through ``InitContext`` to the selector and the executor.
    """

    prompt_message: str = Field(default="Which starter template would you like to use?")
    answer_field: str = Field(
        default="generator_name",
        min_length=1,
        description="Name of the prompt question and of the key holding the answer",
    )
    generator_prefix: str = Field(default="polymer-init-")
    generator_suffix: str = Field(
        default=":app",
        pattern=r"^:",
        description="Namespace scope appended to a bare template name",
    )
    fallback_description: str = Field(default="no description")
    template_descriptions: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_TEMPLATE_DESCRIPTIONS),
        description="Descriptions for built-in templates, keyed by short name",
    )

    def namespace_for(self, template_name: str) -> str:
        """Return the registry identifier for a bare template name.

        Examples::

            namespace_for("element") -> "polymer-init-element:app"
        """
        return f"{self.generator_prefix}{template_name}{self.generator_suffix}"

    @classmethod
    def from_env(cls) -> "InitConfig":
        """Build an ``InitConfig`` from environment variables.

        Recognised variables (all optional):
            POLYMER_INIT_PREFIX, POLYMER_INIT_PROMPT_MESSAGE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("POLYMER_INIT_PREFIX"):
            kwargs["generator_prefix"] = os.environ["POLYMER_INIT_PREFIX"]
        if os.environ.get("POLYMER_INIT_PROMPT_MESSAGE"):
            kwargs["prompt_message"] = os.environ["POLYMER_INIT_PROMPT_MESSAGE"]
        return cls(**kwargs)
