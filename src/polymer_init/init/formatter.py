"""Turn registry entries into prompt choices."""

from __future__ import annotations

from polymer_init.config import InitConfig
from polymer_init.init.models import Choice, GeneratorDescriptor
from polymer_init.utils import dim

NAMESPACE_SEPARATOR = ":"


def display_name(identifier: str, prefix: str) -> str:
    """Return the short, human-facing name of a generator.

    Examples::

        display_name("polymer-init-element:app", "polymer-init-") -> "element"
        display_name("polymer-init-shop", "polymer-init-")        -> "shop"
        display_name("some-generator:app", "polymer-init-")       -> "some-generator:app"
    """
    if not identifier.startswith(prefix):
        return identifier
    name = identifier[len(prefix):]
    name_end = name.find(NAMESPACE_SEPARATOR)
    if name_end != -1:
        name = name[:name_end]
    return name or identifier


def describe(short_name: str, descriptor: GeneratorDescriptor | None, config: InitConfig) -> str:
    if short_name in config.template_descriptions:
        return config.template_descriptions[short_name]
    if descriptor is not None and descriptor.description:
        return descriptor.description
    return config.fallback_description


def to_choice(
    identifier: str,
    descriptor: GeneratorDescriptor | None,
    config: InitConfig | None = None,
) -> Choice:
    """Build the ``Choice`` shown for one generator.

    The label is ``"<short>: <dimmed description>"``; the value is the
    untouched identifier.
    """
    config = config or InitConfig()
    short = display_name(identifier, config.generator_prefix)
    description = describe(short, descriptor, config)
    return Choice(name=f"{short}: {dim(description)}", value=identifier, short=short)
