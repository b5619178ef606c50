"""Validate a requested generator against the registry and run it."""

from __future__ import annotations

from rich.markup import escape

from polymer_init.init.errors import TemplateNotFoundError
from polymer_init.init.models import InitContext
from polymer_init.init.registry import list_generators
from polymer_init.utils import print_info


async def run_generator(identifier: str, context: InitContext) -> None:
    """Run the generator registered under *identifier*.

    The registry is read afresh; the identifier must match one of its keys
    exactly. Failures raised by the environment's ``run`` propagate as-is.

    Args:
        identifier: Registry key, e.g. ``"polymer-init-element:app"``.
        context: Call context holding the environment.

    Raises:
        TemplateNotFoundError: If *identifier* is not registered. The
            environment's ``run`` is not called in that case.
    """
    template_name = context.template_name or identifier
    generators = list_generators(context.env)
    if identifier not in generators:
        raise TemplateNotFoundError(identifier, template_name)

    print_info(f"Running template {escape(template_name)}...")
    await context.env.run(identifier)
