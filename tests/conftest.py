from collections.abc import Iterator

import pytest

from scriptsh.core.config import ShellConfig
from scriptsh.shell.resolver import Shell
from scriptsh.util.log import Log

_ENV_KEYS = ("SCRIPTSH_VERBOSE", "SCRIPTSH_CWD", "SCRIPTSH_LOG_LEVEL", "SCRIPTSH_LOG_FORMAT")


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def shell_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    ShellConfig.reset()
    try:
        yield
    finally:
        ShellConfig.reset()
        Shell.reset()
        Log.reset()
