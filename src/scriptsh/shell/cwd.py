"""Working-directory changes for subsequently built commands."""

import sys
from pathlib import Path
from typing import Optional, Union

from ..core.config import config
from ..util.color import echo, err_console
from ..util.log import Log
from .origin import Origin

log = Log.create({"service": "shell.cwd"})


def cd(path: Union[str, Path], *, origin: Optional[str] = None) -> None:
    """Run every later command in ``path``.

    A missing directory is fatal: the path and the calling site are printed
    to stderr and the process exits with status 1.
    """
    cfg = config()
    target = str(path)
    if cfg.verbose:
        echo(f"cd {target}")

    if not Path(target).is_dir():
        if origin is None:
            origin = Origin.capture()
        log.error("no such directory", {"path": target, "origin": origin})
        err_console.print(f"cd: {target}: No such directory", markup=False, highlight=False, soft_wrap=True)
        err_console.print(f"  at {origin}", markup=False, highlight=False, soft_wrap=True)
        sys.exit(1)

    cfg.cwd = target
