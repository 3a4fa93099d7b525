from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from scriptsh.core.global_paths import GlobalPath
from scriptsh.util.log import Log, LogFormat, LogLevel


def test_log_writes_console_and_file(monkeypatch, tmp_path: Path, capsys) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    Log.configure(level=LogLevel.INFO, format=LogFormat.KV, console=True, file=True)

    log = Log.create({"service": "test.log"})
    log.info("hello", {"value": 7})
    Log.close()

    stderr = capsys.readouterr().err
    log_path = Path(Log.file())
    text = log_path.read_text(encoding="utf-8")

    assert log_path.parent == tmp_path
    assert log_path.suffix == ".log"
    assert "msg=hello" in stderr
    assert "service=test.log" in stderr
    assert "value=7" in text


def test_log_supports_json_format(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    Log.configure(level=LogLevel.INFO, format=LogFormat.JSON, console=False, file=True)

    log = Log.create({"service": "test.json"})
    log.info("hello world", {"meta": {"k": "v"}})
    Log.close()

    line = Path(Log.file()).read_text(encoding="utf-8").strip()
    payload = json.loads(line)

    assert payload["level"] == "info"
    assert payload["msg"] == "hello world"
    assert payload["service"] == "test.json"
    assert payload["meta"] == {"k": "v"}


def test_log_prunes_old_files_before_opening(monkeypatch, tmp_path: Path) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setattr(GlobalPath, "log", classmethod(lambda cls: str(tmp_path)))
    old = []
    for day in range(1, 13):
        path = tmp_path / f"2020-01-{day:02d}T120000.log"
        path.write_text("old\n", encoding="utf-8")
        os.utime(path, (day * 86400, day * 86400))
        old.append(path)
    notes = tmp_path / "notes.txt"
    notes.write_text("keep\n", encoding="utf-8")

    Log.configure(file=True)
    Log.close()

    remaining = sorted(p.name for p in tmp_path.glob("*.log"))
    assert not old[0].exists()
    assert not old[1].exists()
    assert old[2].exists()
    assert Path(Log.file()).name in remaining
    assert len(remaining) == 11
    assert notes.exists()


def test_log_is_silent_until_configured(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.create({"service": "test.silent"}).error("nobody hears this")

    assert capsys.readouterr().err == ""


def test_log_level_filters_lower_levels(capsys) -> None:  # type: ignore[no-untyped-def]
    Log.configure(level=LogLevel.WARN, format=LogFormat.PRETTY, console=True, file=False)
    log = Log.create({"service": "test.level"})

    log.debug("skip me")
    log.warn("keep me")

    stderr = capsys.readouterr().err
    assert "skip me" not in stderr
    assert "WARN keep me (service=test.level)" in stderr


def test_level_and_format_parsing() -> None:
    assert LogLevel.parse("warning") is LogLevel.WARN
    assert LogLevel.parse(None) is LogLevel.INFO
    assert LogFormat.parse("JSON") is LogFormat.JSON
    with pytest.raises(ValueError):
        LogLevel.parse("loud")
    with pytest.raises(ValueError):
        LogFormat.parse("xml")
