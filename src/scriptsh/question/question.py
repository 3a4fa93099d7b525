"""Interactive prompts for scripts."""

from __future__ import annotations

import asyncio
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

from pydantic import BaseModel, Field
from rich.console import Console

from ..util.color import console as default_console
from ..util.log import Log

try:
    import readline
except ImportError:  # Windows builds ship without readline
    readline = None  # type: ignore[assignment]

log = Log.create({"service": "question"})


class QuestionInfo(BaseModel):
    """A prompt shown to the user."""

    query: str = Field(..., description="Text printed before the cursor")
    choices: List[str] = Field(default_factory=list, description="Tab-completion candidates")


def complete(line: str, choices: Sequence[str]) -> List[str]:
    """Choices starting with ``line``; every choice when none match."""
    hits = [choice for choice in choices if choice.startswith(line)]
    return hits if hits else list(choices)


class _Completer:
    """Adapter from ``complete`` to readline's ``(text, state)`` protocol."""

    def __init__(self, choices: Sequence[str]):
        self.choices = list(choices)
        self._matches: List[str] = []

    def __call__(self, text: str, state: int) -> Optional[str]:
        if state == 0:
            self._matches = complete(text, self.choices)
        if state < len(self._matches):
            return self._matches[state]
        return None


def _uses_libedit() -> bool:
    if getattr(readline, "backend", None) == "editline":
        return True
    return "libedit" in (getattr(readline, "__doc__", None) or "")


@contextmanager
def _completion(choices: Sequence[str]) -> Iterator[None]:
    """Complete the whole typed line against ``choices`` until the block exits.

    The previous completer and word delimiters come back afterwards. GNU
    readline binds Tab to completion by default; libedit only gets the binding
    for the duration of the prompt.
    """
    if readline is None or not choices:
        yield
        return
    previous = readline.get_completer()
    delims = readline.get_completer_delims()
    libedit = _uses_libedit()
    readline.set_completer(_Completer(choices))
    readline.set_completer_delims("")
    if libedit:
        readline.parse_and_bind("bind ^I rl_complete")
    try:
        yield
    finally:
        if libedit:
            readline.parse_and_bind("bind ^I ed-insert")
        readline.set_completer_delims(delims)
        readline.set_completer(previous)


async def question(
    query: str,
    choices: Optional[Sequence[str]] = None,
    *,
    console: Optional[Console] = None,
) -> str:
    """Ask ``query`` on the terminal and return the answer.

    With ``choices``, Tab completes the typed text against them. The answer
    itself is not restricted to the choices.
    """
    info = QuestionInfo(query=query, choices=list(choices or []))
    out = console or default_console
    log.debug("asking", {"query": info.query, "choices": len(info.choices)})

    with _completion(info.choices):
        return await asyncio.to_thread(out.input, info.query, markup=False)
