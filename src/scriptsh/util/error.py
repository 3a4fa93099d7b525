"""Error formatting utilities.

Provides functions to format errors raised by scripts into user-friendly
messages.
"""

from typing import Any

from ..shell.result import ProcessOutputError

STDERR_TAIL_LINES = 20


def format_error(error: Any) -> str | None:
    """Format known errors into user-friendly messages.

    Returns None if the error type is not recognized.
    """
    if isinstance(error, ProcessOutputError):
        lines = [f"Command failed with exit code {error.exit_code}"]
        if error.origin:
            lines.append(f"  at {error.origin}")
        tail = error.stderr.rstrip("\n").splitlines()[-STDERR_TAIL_LINES:]
        if tail:
            lines.append("")
            lines.extend(tail)
        return "\n".join(lines)
    return None

