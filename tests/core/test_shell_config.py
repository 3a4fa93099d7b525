import asyncio

import pytest

from scriptsh.core.config import ShellConfig, ShellSettings, config
from scriptsh.core.context import Context
from tests.helpers import bash_shell


@pytest.mark.parametrize(
    ("value", "expected"),
    [("0", False), ("false", False), ("Off", False), ("no", False), ("1", True), ("yes", True)],
)
def test_verbose_flag_from_environment(value: str, expected: bool) -> None:
    assert ShellSettings.from_env({"SCRIPTSH_VERBOSE": value}).verbose is expected


def test_settings_defaults() -> None:
    settings = ShellSettings.from_env({})

    assert settings.verbose is True
    assert settings.cwd is None
    assert settings.log_level is None


def test_default_config_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("SCRIPTSH_VERBOSE", "false")
    monkeypatch.setenv("SCRIPTSH_CWD", str(tmp_path))
    ShellConfig.reset()

    cfg = ShellConfig.default()

    assert cfg.verbose is False
    assert cfg.cwd == str(tmp_path)
    assert ShellConfig.default() is cfg
    assert config() is cfg


def test_scoped_config_does_not_leak() -> None:
    default = ShellConfig.default()

    with ShellConfig.scoped(verbose=False) as scoped:
        scoped.cwd = "/somewhere"
        assert config() is scoped
        assert config().verbose is False

    assert config() is default
    assert default.verbose is True
    assert default.cwd is None


def test_scoped_config_copies_current_values() -> None:
    with ShellConfig.scoped(shell=bash_shell()):
        with ShellConfig.scoped(verbose=False) as inner:
            assert inner.shell == bash_shell()


def test_scoped_config_is_visible_to_spawned_tasks() -> None:
    async def read_verbose() -> bool:
        return config().verbose

    async def main() -> bool:
        with ShellConfig.scoped(verbose=False):
            return await asyncio.create_task(read_verbose())

    assert asyncio.run(main()) is False


def test_context_provides_value_for_block() -> None:
    ctx: Context[str] = Context.create("name")
    assert ctx.get() is None

    with ctx.provide("outer"):
        with ctx.provide("inner"):
            assert ctx.get() == "inner"
        assert ctx.get() == "outer"
    assert ctx.get() is None
