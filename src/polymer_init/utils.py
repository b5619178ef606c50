"""Shared utility functions for polymer-init.

Provides the shared Rich console, coloured status helpers, ANSI dimming for
choice labels, and small formatting helpers.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

console = Console()

# SGR "faint" on / "normal intensity" off. The off code leaves any other
# active attribute (colour, underline) untouched.
DIM_ON = "\x1b[2m"
DIM_OFF = "\x1b[22m"


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def dim(text: str) -> str:
    """Wrap *text* in the ANSI escape sequences for dimmed output.

    Examples::

        dim("no description") -> "\\x1b[2mno description\\x1b[22m"
    """
    return f"{DIM_ON}{text}{DIM_OFF}"


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_ansi(label: str) -> None:
    """Print a string that already carries ANSI escapes (e.g. a choice label)."""
    console.print(Text.from_ansi(label))


def print_info(message: str) -> None:
    """Print a dimmed progress message."""
    console.print(f"[dim]{message}[/dim]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
