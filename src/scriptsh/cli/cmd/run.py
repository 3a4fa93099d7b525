"""Run command - execute a Python script with the scripting helpers preloaded."""

import asyncio
import inspect
import runpy
import sys
from pathlib import Path
from typing import Any, Dict, List

import typer

from ... import cd, exists, fetch, question, quote, sh, which
from ...core.config import config
from ...shell.result import ProcessOutputError
from ...util.color import console, err_console
from ...util.error import format_error
from ...util.log import Log

log = Log.create({"service": "cli.run"})


def script_globals() -> Dict[str, Any]:
    """Names every script can use without importing them."""
    return {
        "sh": sh,
        "cd": cd,
        "quote": quote,
        "question": question,
        "fetch": fetch,
        "console": console,
        "which": which,
        "exists": exists,
        "config": config,
    }


def _exit_code(error: ProcessOutputError) -> int:
    return error.exit_code if error.exit_code > 0 else 1


def run_script(script: Path, args: List[str]) -> None:
    """Execute ``script`` as ``__main__``; await its ``main()`` coroutine if it has one.

    Raises:
        typer.Exit: A command inside the script failed
    """
    argv = sys.argv
    sys.argv = [str(script), *args]
    log.info("running script", {"script": str(script), "args": args})
    try:
        namespace = runpy.run_path(str(script), init_globals=script_globals(), run_name="__main__")
        main = namespace.get("main")
        if inspect.iscoroutinefunction(main):
            asyncio.run(main())
    except ProcessOutputError as error:
        log.error("script failed", {"script": str(script), "exit": error.exit_code})
        err_console.print(format_error(error), markup=False, soft_wrap=True)
        raise typer.Exit(_exit_code(error)) from error
    finally:
        sys.argv = argv
