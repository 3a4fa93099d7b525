"""Runtime configuration for command execution.

``ShellSettings`` holds the environment-derived defaults. ``ShellConfig`` is
the object the builder and runner read: a process-wide default that ``cd()``
and scripts mutate, plus optional per-context overrides installed with
``ShellConfig.scoped``.
"""

from __future__ import annotations

import dataclasses
import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .context import Context

if TYPE_CHECKING:
    from ..shell.resolver import ResolvedShell

_FALSE_VALUES = {"0", "false", "no", "off"}


class ShellSettings(BaseModel):
    """Defaults read from ``SCRIPTSH_*`` environment variables."""

    verbose: bool = True
    cwd: Optional[str] = None
    log_level: Optional[str] = None
    log_format: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("verbose", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() not in _FALSE_VALUES
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellSettings":
        env = os.environ if environ is None else environ
        values = {
            "verbose": env.get("SCRIPTSH_VERBOSE"),
            "cwd": env.get("SCRIPTSH_CWD") or None,
            "log_level": env.get("SCRIPTSH_LOG_LEVEL"),
            "log_format": env.get("SCRIPTSH_LOG_FORMAT"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})


@dataclass
class ShellConfig:
    """Settings every built command is issued with.

    Attributes:
        verbose: Echo commands before running them and mirror their output live
        cwd: Working directory for spawned commands; None inherits ours
        shell: Interpreter override; None uses ``Shell.preferred()``
    """

    verbose: bool = True
    cwd: Optional[str] = None
    shell: Optional["ResolvedShell"] = None

    _default = None  # type: Optional[ShellConfig]

    def resolved_shell(self) -> "ResolvedShell":
        if self.shell is not None:
            return self.shell
        from ..shell.resolver import Shell

        return Shell.preferred()

    def replace(self, **changes: Any) -> "ShellConfig":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_settings(cls, settings: ShellSettings) -> "ShellConfig":
        return cls(verbose=settings.verbose, cwd=settings.cwd)

    @classmethod
    def default(cls) -> "ShellConfig":
        """The process-wide configuration, created from the environment on first use."""
        if cls._default is None:
            cls._default = cls.from_settings(ShellSettings.from_env())
        return cls._default

    @classmethod
    def current(cls) -> "ShellConfig":
        """The configuration of the running context, falling back to the default."""
        return _scope.get() or cls.default()

    @classmethod
    @contextmanager
    def scoped(cls, **changes: Any) -> Iterator["ShellConfig"]:
        """Run a block with a private copy of the current configuration.

        Mutations of the yielded object (``cd()`` included) stay inside the
        block and the tasks started from it.
        """
        with _scope.provide(cls.current().replace(**changes)) as scoped:
            yield scoped

    @classmethod
    def reset(cls) -> None:
        """Forget the process-wide default; the next access re-reads the environment."""
        cls._default = None


_scope: Context[ShellConfig] = Context.create("scriptsh.config")


def config() -> ShellConfig:
    """Return the active ``ShellConfig``."""
    return ShellConfig.current()
