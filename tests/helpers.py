"""Shared test helpers."""

from __future__ import annotations

import shutil
from typing import Dict, Optional

import pytest

from scriptsh.shell.quote import posix_quote
from scriptsh.shell.resolver import STRICT_PREFIX, ResolvedShell

BASH = shutil.which("bash")

requires_bash = pytest.mark.skipif(BASH is None, reason="bash is not installed")


def bash_shell() -> ResolvedShell:
    return ResolvedShell(kind="posix", path=BASH or "/bin/bash", prefix=STRICT_PREFIX, quote=posix_quote)


def fake_which(found: Dict[str, str]):
    """Executable lookup that only knows ``found``."""

    def which(name: str) -> Optional[str]:
        return found.get(name)

    return which
