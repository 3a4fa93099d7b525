"""Interpreter detection and the quoting strategy that goes with it.

Preference order is bash, then PowerShell (``pwsh`` before the older
``powershell``). Only bash gets real quoting and the strict-mode prefix;
PowerShell and the host default shell run commands with unescaped values.
"""

import shutil
from dataclasses import dataclass
from typing import Callable, Literal, Optional, Sequence

from ..util.color import warn
from ..util.log import Log
from .quote import QuoteFn, identity, posix_quote

log = Log.create({"service": "shell.resolver"})

ShellKind = Literal["posix", "powershell", "default"]
WhichFn = Callable[[str], Optional[str]]

POSIX_SHELLS = ("bash",)
FALLBACK_SHELLS = ("pwsh", "powershell")
STRICT_PREFIX = "set -euo pipefail;"

POWERSHELL_WARNING = "Using powershell: no built-in quoting available yet."
UNKNOWN_SHELL_WARNING = "Unknown shell. Falling back to the default shell. No quoting available."


@dataclass(frozen=True)
class ResolvedShell:
    """The interpreter commands run under.

    ``path`` is None when nothing was found and the host default shell is used.
    """

    kind: ShellKind
    path: Optional[str] = None
    prefix: str = ""
    quote: QuoteFn = identity

    @property
    def quoting(self) -> bool:
        return self.kind == "posix"


def _first_found(names: Sequence[str], which: WhichFn) -> Optional[str]:
    for name in names:
        path = which(name)
        if path:
            return path
    return None


def resolve_shell(which: WhichFn = shutil.which, *, announce: bool = True) -> ResolvedShell:
    """Look up candidate interpreters on PATH and pick one.

    Args:
        which: Executable lookup returning None for missing programs
        announce: Print a warning when quoting is unavailable
    """
    path = _first_found(POSIX_SHELLS, which)
    if path:
        log.debug("resolved shell", {"kind": "posix", "path": path})
        return ResolvedShell(kind="posix", path=path, prefix=STRICT_PREFIX, quote=posix_quote)

    path = _first_found(FALLBACK_SHELLS, which)
    if path:
        shell = ResolvedShell(kind="powershell", path=path)
        message = POWERSHELL_WARNING
    else:
        shell = ResolvedShell(kind="default")
        message = UNKNOWN_SHELL_WARNING

    log.warn("shell without quoting", {"kind": shell.kind, "path": shell.path})
    if announce:
        warn(message)
    return shell


class Shell:
    """Process-wide interpreter selection, resolved once and then reused."""

    _preferred: Optional[ResolvedShell] = None

    @classmethod
    def preferred(cls) -> ResolvedShell:
        if cls._preferred is None:
            cls._preferred = resolve_shell()
        return cls._preferred

    @classmethod
    def reset(cls) -> None:
        """Forget the memoized interpreter so the next call looks it up again."""
        cls._preferred = None
