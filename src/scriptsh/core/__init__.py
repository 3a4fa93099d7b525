"""Core infrastructure modules."""

from .global_paths import GlobalPath
from .context import Context
from .config import ShellConfig, ShellSettings, config

__all__ = ["GlobalPath", "Context", "ShellConfig", "ShellSettings", "config"]
