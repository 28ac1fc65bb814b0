from __future__ import annotations

from enum import Enum


class Sign(Enum):
    """Represents the polarity of a monetary amount."""

    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"

    def opposite(self) -> Sign:
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        else:
            return Sign.POSITIVE
