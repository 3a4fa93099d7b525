"""Quoting strategies for interpolated command arguments."""

import shlex
from typing import Any, Callable

from ..core.config import config
from .template import Interpolation

QuoteFn = Callable[[str], str]


def posix_quote(value: str) -> str:
    """Quote ``value`` so a POSIX shell reads it back as one literal word."""
    return shlex.quote(value)


def identity(value: str) -> str:
    """No escaping at all; used when no POSIX shell is available."""
    return value


def quote(value: Any) -> str:
    """Quote a value with the active shell's strategy.

    Prior ``ProcessOutput`` values are replaced by their stdout minus one
    trailing newline, exactly as inside a command template.
    """
    return config().resolved_shell().quote(Interpolation.of(value).text())
