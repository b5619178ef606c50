"""Terminal capability detection.

Some Windows terminal emulators (MinGW / Git Bash) do not handle arrow keys
in interactive lists; there the selector falls back to a numbered list.
"""

from __future__ import annotations

import re
import subprocess
import sys

_MINGW_PATTERN = re.compile(r"^mingw", re.IGNORECASE)


def is_windows(platform: str | None = None) -> bool:
    return (platform or sys.platform).startswith("win")


def is_mingw(timeout: float = 5.0) -> bool:
    """Return ``True`` only when ``uname -s`` reports a MinGW shell.

    Any failure of the query counts as "not MinGW".
    """
    try:
        result = subprocess.run(
            ["uname", "-s"],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=True,
        )
    except (OSError, subprocess.SubprocessError):
        return False
    return bool(_MINGW_PATTERN.match(result.stdout.strip()))


def supports_rich_list() -> bool:
    """Return ``False`` only on a Windows console identified as MinGW."""
    if not is_windows():
        return True
    return not is_mingw()
