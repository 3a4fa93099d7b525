"""HTTP helpers."""

from .fetch import fetch

__all__ = ["fetch"]
