"""Default interactive prompt facility built on ``rich.prompt``.

Accepts question dictionaries of the form::

    {"type": "list" | "rawlist", "name": str, "message": str,
     "choices": [{"name": str, "value": str, "short": str}, ...]}

and resolves to ``{name: chosen value}``. ``list`` questions are answered by
typing a choice's short name (or its full value when two choices share
a short name); ``rawlist`` questions by typing its number,
which works on consoles where richer input does not.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from polymer_init.utils import console as default_console

QUESTION_TYPES = ("list", "rawlist")


class RichPrompter:
    """Asks each question on the shared console and collects the answers.

    Questions are asked on the calling thread so Ctrl-C reaches the prompt
    directly. End-of-input and interrupts propagate unchanged.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    async def __call__(self, questions: list[dict[str, Any]]) -> dict[str, Any]:
        answers: dict[str, Any] = {}
        for question in questions:
            answers[question["name"]] = self.ask(question)
        return answers

    def ask(self, question: dict[str, Any]) -> str:
        """Ask a single question synchronously and return the chosen value."""
        kind = question.get("type", "list")
        if kind not in QUESTION_TYPES:
            raise ValueError(f"Unsupported question type: {kind!r} (expected one of {QUESTION_TYPES})")

        choices: list[dict[str, str]] = question.get("choices", [])
        if not choices:
            # Nothing to pick; the caller validates the empty answer.
            return ""

        self.console.print(f"[bold]? {question['message']}[/bold]")
        if kind == "rawlist":
            return self._ask_numbered(choices)
        return self._ask_by_name(choices)

    def _ask_by_name(self, choices: list[dict[str, str]]) -> str:
        by_short = _answer_keys(choices)
        for choice in choices:
            self.console.print(Text.from_ansi(f"  {choice['name']}"))
        answer = Prompt.ask(
            "Template",
            console=self.console,
            choices=list(by_short),
            default=next(iter(by_short)),
        )
        return by_short[answer]

    def _ask_numbered(self, choices: list[dict[str, str]]) -> str:
        for index, choice in enumerate(choices, start=1):
            self.console.print(Text.from_ansi(f"  {index}) {choice['name']}"))
        answer = Prompt.ask(
            "Answer",
            console=self.console,
            choices=[str(index) for index in range(1, len(choices) + 1)],
            show_choices=False,
            default="1",
        )
        return choices[int(answer) - 1]["value"]


def _answer_keys(choices: list[dict[str, str]]) -> dict[str, str]:
    """Map typed answers to values.

    A short name shared by several choices is ambiguous; those choices are
    answered by their full value instead.
    """
    counts: dict[str, int] = {}
    for choice in choices:
        counts[choice["short"]] = counts.get(choice["short"], 0) + 1
    return {
        (choice["short"] if counts[choice["short"]] == 1 else choice["value"]): choice["value"]
        for choice in choices
    }
