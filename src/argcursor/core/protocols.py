"""Protocols and callable aliases consumed by the core layer.

The core never depends on concrete stream or converter classes: any
object that satisfies these contracts structurally can be injected.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from argcursor.core.models import ParseOutcome

Predicate = Callable[[str], bool]
"""Single-argument test used by ``slice_until`` / ``subcommand_until``."""


class LogSink(Protocol):
    """Contract for the diagnostic destination of a cursor.

    ``sys.stderr``, ``io.StringIO`` and open text files all qualify.
    The sink is owned by the caller; the cursor only writes to it.
    """

    def write(self, text: str, /) -> int:
        """Write *text* verbatim.  Diagnostics always end with ``\\n``."""
        ...  # pragma: no cover


class Converter(Protocol):
    """Contract for per-type text conversion.

    Implementations read as much of the leading text as forms a valid
    value and report how many characters they used.

    Raises
    ------
    ConversionError
        When no value can be read from the start of *text*.
    """

    def __call__(self, text: str, /) -> ParseOutcome:
        ...  # pragma: no cover
