"""Command templates: literal segments interleaved with quoted values.

A template such as ``"echo {} > {out}"`` is split into literal segments and
interpolation slots. Only the interpolated values are ever quoted; literal
text reaches the shell untouched, so it can carry pipes, redirections and
other shell syntax written by the script author.
"""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence, Tuple

from .result import ProcessOutput


class Interpolation(ABC):
    """A value substituted into one template slot."""

    @abstractmethod
    def text(self) -> str:
        """Unquoted text for the slot."""

    @staticmethod
    def of(value: Any) -> "Interpolation":
        """Tag a raw value; prior outputs become ``Captured``, anything else ``Raw``."""
        if isinstance(value, Interpolation):
            return value
        if isinstance(value, ProcessOutput):
            return Captured(value)
        return Raw(value)


@dataclass(frozen=True)
class Raw(Interpolation):
    """A plain scalar, substituted as ``str(value)``."""

    value: Any

    def text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Captured(Interpolation):
    """A previous command's output, substituted as its stdout.

    Exactly one trailing newline is dropped, so ``"42\\n\\n"`` becomes
    ``"42\\n"``.
    """

    output: ProcessOutput

    def text(self) -> str:
        stdout = self.output.stdout
        if stdout.endswith("\n"):
            return stdout[:-1]
        return stdout


@dataclass(frozen=True)
class CommandTemplate:
    """Literal segments with one interpolation value between each pair."""

    segments: Tuple[str, ...]
    values: Tuple[Interpolation, ...] = field(default=())

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        values = tuple(Interpolation.of(v) for v in self.values)
        if len(segments) != len(values) + 1:
            raise ValueError(
                f"template needs exactly one more segment than values, "
                f"got {len(segments)} segments and {len(values)} values"
            )
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "values", values)

    @classmethod
    def parse(cls, template: str, *args: Any, **kwargs: Any) -> "CommandTemplate":
        """Split a ``str.format``-style template and bind its slots.

        Slots may be automatic (``{}``), positional (``{0}``) or named
        (``{name}``); ``{{`` and ``}}`` stand for literal braces. Format specs,
        conversions and attribute access are not allowed in a slot, and every
        positional or named value must fill at least one slot.
        """
        segments: List[str] = []
        values: List[Any] = []
        current = ""
        auto_index = 0
        used: set[int] = set()
        used_names: set[str] = set()
        mode = None

        for literal, name, spec, conversion in string.Formatter().parse(template):
            current += literal
            if name is None:
                continue
            if spec or conversion:
                raise ValueError(f"format specs and conversions are not supported in slot {{{name}}}")

            if name == "" or name.isdigit():
                slot_mode = "auto" if name == "" else "manual"
                if mode is not None and mode != slot_mode:
                    raise ValueError("cannot mix automatic and manual slot numbering")
                mode = slot_mode
                if name == "":
                    index = auto_index
                    auto_index += 1
                else:
                    index = int(name)
                if index >= len(args):
                    raise ValueError(f"no value for slot {index}, only {len(args)} given")
                used.add(index)
                values.append(args[index])
            elif name.isidentifier():
                if name not in kwargs:
                    raise ValueError(f"no value for slot {{{name}}}")
                used_names.add(name)
                values.append(kwargs[name])
            else:
                raise ValueError(f"unsupported slot {{{name}}}")

            segments.append(current)
            current = ""

        segments.append(current)
        unused = set(range(len(args))) - used
        if unused:
            raise ValueError(f"{len(unused)} positional value(s) not used by the template")
        unused_names = sorted(set(kwargs) - used_names)
        if unused_names:
            raise ValueError(f"named value(s) not used by the template: {', '.join(unused_names)}")
        return cls(tuple(segments), tuple(values))

    def build(self, quote: Callable[[str], str]) -> str:
        """Interleave segments with quoted values."""
        return build(self.segments, self.values, quote)


def build(segments: Sequence[str], values: Sequence[Any], quote: Callable[[str], str]) -> str:
    """Return ``segments[0] + quote(v0) + segments[1] + ... + segments[n]``."""
    if len(segments) != len(values) + 1:
        raise ValueError(f"{len(segments)} segments cannot hold {len(values)} values")
    parts: List[str] = [segments[0]]
    for value, segment in zip(values, segments[1:]):
        parts.append(quote(Interpolation.of(value).text()))
        parts.append(segment)
    return "".join(parts)

