"""Call-site descriptions attached to results and fatal errors."""

import os
import sys
from types import FrameType
from typing import Optional

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Origin:
    """Locate the first caller frame that lives outside this package."""

    @staticmethod
    def describe(frame: FrameType) -> str:
        code = frame.f_code
        return f"{code.co_filename}:{frame.f_lineno} in {code.co_name}"

    @classmethod
    def capture(cls, skip: int = 1) -> str:
        """Describe the calling code, or an empty string when it can't be found."""
        frame: Optional[FrameType] = sys._getframe(skip)
        while frame is not None:
            filename = os.path.abspath(frame.f_code.co_filename)
            if not filename.startswith(_PACKAGE_DIR + os.sep):
                return cls.describe(frame)
            frame = frame.f_back
        return ""
