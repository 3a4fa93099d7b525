"""Execution results of finished commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessOutput:
    """Snapshot of a finished command.

    ``combined`` holds stdout and stderr chunks in the order they arrived.
    ``origin`` describes the call site that issued the command.
    """

    exit_code: int
    stdout: str = ""
    stderr: str = ""
    combined: str = ""
    origin: str = ""

    def __str__(self) -> str:
        return self.combined


class ProcessOutputError(Exception):
    """Raised when a command exits with a non-zero code."""

    def __init__(self, output: ProcessOutput):
        self._output = output
        message = f"command failed with exit code {output.exit_code}"
        if output.origin:
            message += f" at {output.origin}"
        super().__init__(message)

    @property
    def output(self) -> ProcessOutput:
        return self._output

    @property
    def exit_code(self) -> int:
        return self._output.exit_code

    @property
    def stdout(self) -> str:
        return self._output.stdout

    @property
    def stderr(self) -> str:
        return self._output.stderr

    @property
    def combined(self) -> str:
        return self._output.combined

    @property
    def origin(self) -> str:
        return self._output.origin
