"""Per-user directories for scriptsh, following platform conventions."""

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "scriptsh"


class GlobalPath:
    """Directory lookups; nothing is created until a caller asks for it."""

    @classmethod
    def data(cls) -> str:
        """Application data directory (``SCRIPTSH_DATA_DIR`` overrides it)."""
        return os.environ.get("SCRIPTSH_DATA_DIR") or user_data_dir(APP_NAME)

    @classmethod
    def log(cls) -> str:
        """Log file directory."""
        return str(Path(cls.data()) / "log")
