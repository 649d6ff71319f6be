"""Value objects shared by the core layer.

All models are **frozen** dataclasses: immutable values with no
behaviour beyond data access.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Result of converting the leading part of a token.

    A converter that reads ``"12extra"`` as an integer returns
    ``ParseOutcome(value=12, consumed=2)``.
    """

    value: Any
    """The converted value."""

    consumed: int
    """Number of characters of the token that produced :attr:`value`."""

    def remainder(self, text: str) -> str:
        """Return the part of *text* the converter did not read."""
        return text[self.consumed:]

    def is_complete(self, text: str) -> bool:
        return self.consumed >= len(text)
