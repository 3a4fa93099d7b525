"""scriptsh - write shell scripts in Python.

Commands are built from templates whose values are quoted for the host
shell, run asynchronously, and return their captured output.

Example:
    import asyncio
    from scriptsh import sh, cd

    async def main():
        cd("/tmp")
        name = await sh("git config user.name")
        await sh("echo {}", name)

    asyncio.run(main())
"""

import shutil
from pathlib import Path
from typing import Optional, Union

from .shell import (
    ProcessOutput,
    ProcessOutputError,
    Shell,
    cd,
    quote,
    run,
    sh,
)
from .core.config import ShellConfig, config
from .question import question
from .util.color import colorize, console
from .web import fetch

__version__ = "0.1.0"


def which(name: str) -> Optional[str]:
    """Path of the executable ``name`` on PATH, or None."""
    return shutil.which(name)


def exists(path: Union[str, Path]) -> bool:
    return Path(path).exists()


__all__ = [
    "__version__",
    "ProcessOutput",
    "ProcessOutputError",
    "Shell",
    "ShellConfig",
    "cd",
    "colorize",
    "config",
    "console",
    "exists",
    "fetch",
    "question",
    "quote",
    "run",
    "sh",
    "which",
]
