import dataclasses

import pytest

from scriptsh.shell.result import ProcessOutput, ProcessOutputError


def make_output(**overrides) -> ProcessOutput:  # type: ignore[no-untyped-def]
    values = {
        "exit_code": 2,
        "stdout": "out\n",
        "stderr": "boom\n",
        "combined": "out\nboom\n",
        "origin": "deploy.py:12 in main",
    }
    values.update(overrides)
    return ProcessOutput(**values)


def test_string_conversion_is_combined_stream() -> None:
    assert str(make_output()) == "out\nboom\n"


def test_output_is_read_only() -> None:
    output = make_output()

    with pytest.raises(dataclasses.FrozenInstanceError):
        output.stdout = "changed"  # type: ignore[misc]


def test_error_exposes_output_fields() -> None:
    output = make_output()
    error = ProcessOutputError(output)

    assert error.output is output
    assert error.exit_code == 2
    assert error.stdout == "out\n"
    assert error.stderr == "boom\n"
    assert error.combined == "out\nboom\n"
    assert error.origin == "deploy.py:12 in main"
    assert str(error) == "command failed with exit code 2 at deploy.py:12 in main"


def test_error_message_without_origin() -> None:
    assert str(ProcessOutputError(make_output(origin=""))) == "command failed with exit code 2"
