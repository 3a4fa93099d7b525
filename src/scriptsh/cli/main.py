"""CLI entry point for scriptsh.

``scriptsh run deploy.py`` executes a Python script with ``sh``, ``cd`` and
the other helpers already in scope.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from .. import __version__
from ..core.config import ShellConfig, ShellSettings
from ..shell.quote import quote as quote_value
from ..shell.resolver import Shell
from ..util.color import err_console
from ..util.log import Log, LogFormat, LogLevel

app = typer.Typer(
    name="scriptsh",
    help="scriptsh - write shell scripts in Python",
    no_args_is_help=True,
    add_completion=False,
)

console = Console(highlight=False)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"scriptsh {__version__}")
        raise typer.Exit()


def _configure_logging(level: Optional[str], format: Optional[str], log_file: bool) -> None:
    settings = ShellSettings.from_env()
    level = level or settings.log_level
    format = format or settings.log_format
    to_stderr = level is not None or format is not None
    if not (to_stderr or log_file):
        return
    try:
        Log.configure(
            level=LogLevel.parse(level),
            format=LogFormat.parse(format),
            console=to_stderr,
            file=log_file,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    if log_file:
        err_console.print(f"logging to {Log.file()}", markup=False, soft_wrap=True)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log to stderr at this level (debug, info, warn, error)",
    ),
    log_format: Optional[str] = typer.Option(
        None,
        "--log-format",
        help="Log line format (kv, json, pretty)",
    ),
    log_file: bool = typer.Option(
        False,
        "--log-file",
        help="Also write logs to a timestamped file in the user data directory",
    ),
):
    """scriptsh - write shell scripts in Python."""
    _configure_logging(log_level, log_format, log_file)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def run(
    script: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Python script to execute",
    ),
    args: Optional[List[str]] = typer.Argument(
        None,
        help="Arguments passed to the script as sys.argv[1:]",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Don't echo commands or mirror their output",
    ),
    cwd: Optional[Path] = typer.Option(
        None,
        "--cwd",
        file_okay=False,
        exists=True,
        help="Directory commands start in",
    ),
):
    """Run a script with sh, cd, quote, question and fetch in scope."""
    from .cmd.run import run_script

    cfg = ShellConfig.default()
    if quiet:
        cfg.verbose = False
    if cwd is not None:
        cfg.cwd = str(cwd)
    run_script(script, list(args or []))


@app.command()
def quote(
    values: List[str] = typer.Argument(..., help="Values to quote"),
):
    """Print each value quoted for the resolved shell."""
    for value in values:
        console.print(quote_value(value), markup=False)


@app.command()
def shell():
    """Show the interpreter commands run under."""
    resolved = Shell.preferred()
    console.print(f"kind:    {resolved.kind}", markup=False)
    console.print(f"path:    {resolved.path or '(host default)'}", markup=False)
    console.print(f"prefix:  {resolved.prefix or '(none)'}", markup=False)
    console.print(f"quoting: {'yes' if resolved.quoting else 'no'}", markup=False)


if __name__ == "__main__":
    app()
