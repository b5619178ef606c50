"""polymer-init command line entry point.

Usage::

    polymer-init               # choose a template interactively
    polymer-init element       # run polymer-init-element:app directly
    polymer-init --list        # show installed templates
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time

from rich.markup import escape

from polymer_init.config import InitConfig
from polymer_init.init import (
    GeneratorEnvironment,
    InitContext,
    list_generators,
    prompt_generator_selection,
    run_generator,
    to_choice,
)
from polymer_init.utils import format_duration, print_ansi, print_error, print_success, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polymer-init",
        description="Initialize a project from an installed starter template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  polymer-init\n"
            "  polymer-init element\n"
            "  polymer-init --list\n"
        ),
    )
    parser.add_argument(
        "template",
        nargs="?",
        default=None,
        help="Template to run (prompted for when omitted)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        dest="list_templates",
        help="List installed templates and exit",
    )
    return parser


def print_templates(env: GeneratorEnvironment, config: InitConfig) -> None:
    generators = list_generators(env)
    if not generators:
        print_warning("No templates installed.")
        return
    for identifier, descriptor in generators.items():
        print_ansi(f"  {to_choice(identifier, descriptor, config).name}")


async def init(template: str | None, env: GeneratorEnvironment, config: InitConfig) -> None:
    """Run *template* when given, otherwise prompt for one."""
    if template:
        context = InitContext(env=env, template_name=template, config=config)
        await run_generator(config.namespace_for(template), context)
    else:
        await prompt_generator_selection(InitContext(env=env, config=config))


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``polymer-init``."""
    args = build_parser().parse_args(argv)

    started = time.monotonic()
    try:
        config = InitConfig.from_env()
        env = GeneratorEnvironment(config)
        env.lookup()

        if args.list_templates:
            print_templates(env, config)
            return

        asyncio.run(init(args.template, env, config))
    except (KeyboardInterrupt, EOFError):
        print_error("Aborted.")
        sys.exit(1)
    except Exception as exc:
        print_error(escape(str(exc)))
        sys.exit(1)

    print_success(f"Done in {format_duration(time.monotonic() - started)}.")


if __name__ == "__main__":
    main()
