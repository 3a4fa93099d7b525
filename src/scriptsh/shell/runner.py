"""Spawning commands and collecting their output.

Example:
    from scriptsh import sh

    branch = await sh("git rev-parse --abbrev-ref HEAD")
    await sh("git push origin {}", branch)
"""

import asyncio
import codecs
import subprocess
import sys
from typing import Any, Awaitable, List, Optional, TextIO

from ..core.config import ShellConfig, config
from ..util.color import echo
from ..util.log import Log
from .origin import Origin
from .result import ProcessOutput, ProcessOutputError
from .template import CommandTemplate

log = Log.create({"service": "shell.runner"})

READ_CHUNK = 64 * 1024


class _Collector:
    """Per-invocation buffers; ``combined`` keeps chunk arrival order."""

    def __init__(self, verbose: bool):
        self.verbose = verbose
        self.stdout: List[str] = []
        self.stderr: List[str] = []
        self.combined: List[str] = []

    async def pump(self, stream: asyncio.StreamReader, target: List[str], mirror: TextIO) -> None:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            data = await stream.read(READ_CHUNK)
            chunk = decoder.decode(data, final=not data)
            if chunk:
                target.append(chunk)
                self.combined.append(chunk)
                if self.verbose:
                    mirror.write(chunk)
                    mirror.flush()
            if not data:
                return


def _spawn_options() -> dict[str, Any]:
    options: dict[str, Any] = {
        "stdin": None,
        "stdout": asyncio.subprocess.PIPE,
        "stderr": asyncio.subprocess.PIPE,
    }
    if sys.platform == "win32":
        options["creationflags"] = subprocess.CREATE_NO_WINDOW
    return options


async def run(
    command: str,
    *,
    config: Optional[ShellConfig] = None,
    origin: str = "",
) -> ProcessOutput:
    """Run a finished command string under the resolved shell.

    Returns the output when the command exits with 0.

    Raises:
        ProcessOutputError: The command exited with any other code
    """
    cfg = config or ShellConfig.current()
    shell = cfg.resolved_shell()
    options = _spawn_options()
    log.debug("executing command", {"shell": shell.path, "command": command, "cwd": cfg.cwd})

    if shell.path is None:
        proc = await asyncio.create_subprocess_shell(command, cwd=cfg.cwd, **options)
    else:
        proc = await asyncio.create_subprocess_exec(
            shell.path, "-c", shell.prefix + command, cwd=cfg.cwd, **options
        )

    collector = _Collector(cfg.verbose)
    assert proc.stdout is not None and proc.stderr is not None
    await asyncio.gather(
        collector.pump(proc.stdout, collector.stdout, sys.stdout),
        collector.pump(proc.stderr, collector.stderr, sys.stderr),
    )
    exit_code = await proc.wait()
    log.debug("command finished", {"command": command, "exit": exit_code})

    output = ProcessOutput(
        exit_code=exit_code,
        stdout="".join(collector.stdout),
        stderr="".join(collector.stderr),
        combined="".join(collector.combined),
        origin=origin,
    )
    if exit_code != 0:
        raise ProcessOutputError(output)
    return output


def sh(template: str, *args: Any, origin: Optional[str] = None, **kwargs: Any) -> Awaitable[ProcessOutput]:
    """Build a command from ``template`` and start running it.

    Values are quoted for the resolved shell; prior ``ProcessOutput`` values
    contribute their stdout minus one trailing newline. Literal braces in the
    command itself (``${VAR}``, ``awk '{print $1}'``, ``find -exec rm {} \\;``)
    must be doubled: ``{{`` and ``}}``.

    Inside a running event loop the command is spawned right away and an
    ``asyncio.Task`` is returned, so several commands can be in flight before
    any of them is awaited. Without a running loop the returned coroutine
    starts the command when it is awaited.

    Example:
        await sh("mkdir -p {}", "dir with spaces")
        count = await sh("ls {} | wc -l", "dir with spaces")
        await sh("echo ${{HOME}}")
    """
    cfg = config()
    command = CommandTemplate.parse(template, *args, **kwargs).build(cfg.resolved_shell().quote)
    if origin is None:
        origin = Origin.capture()
    if cfg.verbose:
        echo(command)

    coro = run(command, config=cfg, origin=origin)
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return coro
    return loop.create_task(coro)
