"""Shell command execution.

This module builds commands from templates with safely quoted values, picks
an interpreter for the host, and runs commands with streamed output.

Example:
    from scriptsh.shell import sh, cd

    cd("/tmp")
    result = await sh("ls -la {}", "some dir")
    print(result.stdout)

    # Get the interpreter in use
    shell = Shell.preferred()
"""

from .cwd import cd
from .origin import Origin
from .quote import identity, posix_quote, quote
from .resolver import ResolvedShell, Shell, resolve_shell
from .result import ProcessOutput, ProcessOutputError
from .runner import run, sh
from .template import Captured, CommandTemplate, Interpolation, Raw, build

__all__ = [
    "Captured",
    "CommandTemplate",
    "Interpolation",
    "Origin",
    "ProcessOutput",
    "ProcessOutputError",
    "Raw",
    "ResolvedShell",
    "Shell",
    "build",
    "cd",
    "identity",
    "posix_quote",
    "quote",
    "resolve_shell",
    "run",
    "sh",
]
