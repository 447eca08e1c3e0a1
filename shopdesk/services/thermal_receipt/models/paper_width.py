"""
Paper width enumeration
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class PaperWidth(str, Enum):
    MM_58 = "58mm"
    MM_80 = "80mm"

    @property
    def max_chars(self) -> int:
        """Characters per printed line for this roll width."""
        return 32 if self is PaperWidth.MM_58 else 42

    @classmethod
    def coerce(cls, value) -> "PaperWidth":
        """Map any input to a paper width, falling back to 80mm for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            if value is not None:
                logger.warning("Unsupported paper width %r, using 80mm", value)
            return cls.MM_80
