"""Interactive template selection."""

from __future__ import annotations

from typing import Any

from polymer_init.init.executor import run_generator
from polymer_init.init.formatter import to_choice
from polymer_init.init.models import Choice, InitContext
from polymer_init.init.prompt import RichPrompter
from polymer_init.init.registry import list_generators
from polymer_init.init.shell import supports_rich_list


def build_choices(context: InitContext) -> list[Choice]:
    """Return one choice per registered generator, in registry order."""
    config = context.resolved_config()
    return [
        to_choice(identifier, descriptor, config)
        for identifier, descriptor in list_generators(context.env).items()
    ]


def build_question(context: InitContext, choices: list[Choice]) -> dict[str, Any]:
    detect = context.supports_rich_list or supports_rich_list
    config = context.resolved_config()
    return {
        "type": "list" if detect() else "rawlist",
        "name": config.answer_field,
        "message": config.prompt_message,
        "choices": [choice.model_dump() for choice in choices],
    }


async def prompt_generator_selection(context: InitContext) -> None:
    """Ask the user which generator to use, then run it.

    Exactly one prompt is issued, even when the registry is empty; an answer
    that is not a registered identifier is rejected by ``run_generator``.

    Raises:
        TemplateNotFoundError: If the chosen generator is not registered
            when it is validated.
    """
    choices = build_choices(context)
    question = build_question(context, choices)
    prompt = context.prompt or RichPrompter()
    answers = await prompt([question])
    await run_generator(answers.get(question["name"]) or "", context)
