"""Numeric range attached to the next extraction from a cursor.

Usage::

    cursor = ArgCursor.from_argv()
    if cursor.consume() == "--jobs":
        jobs = cursor.range(1, 64).extract(int, default=1)

A value outside the range is still returned; the violation is written
to the cursor's log sink, naming the preceding token (``--jobs``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from argcursor.core.extract import extract_ranged

if TYPE_CHECKING:
    from argcursor.core.cursor import ArgCursor

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RangeParse:
    """Bounds ``[minimum, maximum]`` bound to a cursor.

    When ``minimum == maximum`` the upper bound is open and the range
    is ``[minimum, inf)``.
    """

    cursor: ArgCursor
    minimum: float
    maximum: float

    @classmethod
    def create(
        cls,
        cursor: ArgCursor,
        minimum: float,
        maximum: float | None = None,
    ) -> RangeParse:
        """Build a range; omitting *maximum* gives an open upper bound."""
        upper = minimum if maximum is None else maximum
        return cls(cursor=cursor, minimum=float(minimum), maximum=float(upper))

    @property
    def is_open(self) -> bool:
        """Whether the upper bound is unconstrained."""
        return self.minimum == self.maximum

    def extract(self, target_type: type[T], default: T | None = None) -> T | None:
        """Consume the next token as *target_type* and check the range."""
        return extract_ranged(self, target_type, default)
