"""Async-safe context values built on contextvars.

A value provided with ``Context.provide`` is visible to the current task and
to every task it spawns afterwards, and to nothing else.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar('T')


class Context(Generic[T]):
    """Context container for async-safe state propagation.

    Example:
        config_context = Context.create("config")

        with config_context.provide(ShellConfig(verbose=False)):
            await sh("ls")
    """

    def __init__(self, name: str, storage: ContextVar[Optional[T]]):
        self.name = name
        self._storage = storage

    def get(self) -> Optional[T]:
        """Get the current value, or None when nothing was provided."""
        return self._storage.get(None)

    @contextmanager
    def provide(self, value: T) -> Iterator[T]:
        """Provide ``value`` until the with-block exits."""
        token = self._storage.set(value)
        try:
            yield value
        finally:
            self._storage.reset(token)

    @staticmethod
    def create(name: str) -> 'Context[T]':
        """Create a new context container.

        Args:
            name: Descriptive name for error messages
        """
        storage: ContextVar[Optional[T]] = ContextVar(name)
        return Context(name=name, storage=storage)
