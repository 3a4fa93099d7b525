"""Console output helpers."""

import platform
import re

from rich.console import Console
from rich.text import Text

# Use legacy_windows=True on Windows to avoid Unicode encoding issues with GBK
_is_windows = platform.system() == "Windows"

console = Console(legacy_windows=_is_windows, highlight=False)
err_console = Console(legacy_windows=_is_windows, highlight=False, stderr=True)

_LEADING_WORD = re.compile(r"^\w+\s")


def colorize(command: str) -> Text:
    """Return ``command`` with its leading word in bright green."""
    text = Text(command)
    match = _LEADING_WORD.match(command)
    if match:
        text.stylize("bright_green", 0, match.end())
    return text


def echo(command: str) -> None:
    """Print ``$ <command>`` the way verbose mode announces it."""
    line = Text("$ ")
    line.append_text(colorize(command))
    console.print(line, soft_wrap=True)


def warn(message: str) -> None:
    err_console.print(Text(message, style="yellow"), soft_wrap=True)
