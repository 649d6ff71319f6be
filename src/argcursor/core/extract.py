"""Typed extraction of the next token from a cursor.

:func:`extract` is the reporting, never-raising half of the library:
malformed token text is a user-input problem, so it is written to the
cursor's log sink and the caller decides whether to continue.  Only the
structural :class:`~argcursor.exceptions.OutOfRangeError` (no token left
to consume) propagates.

Diagnostic formats
------------------
* ``Error: could not parse <token>.``
* ``Warning: partially parsed string`` followed by
  ``Unparsed bit: '<suffix>'``
* ``<prefix> must be greater than <minimum>.``
* ``<prefix> must be smaller than <maximum>.``
* ``<prefix> is not a number; range not checked.``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from argcursor.core.converters import get_converter
from argcursor.exceptions import ConversionError

if TYPE_CHECKING:
    from argcursor.core.cursor import ArgCursor
    from argcursor.core.range_parse import RangeParse

T = TypeVar("T")

# Integers past this magnitude are not exact in a float bound.
_EXACT_FLOAT_LIMIT = 2 ** 53


def write_line(cursor: ArgCursor, message: str) -> None:
    """Write *message* plus a newline to the cursor's log sink."""
    cursor.get_log().write(message + "\n")


# ---------------------------------------------------------------------------
# Plain extraction
# ---------------------------------------------------------------------------

def extract(
    cursor: ArgCursor,
    target_type: type[T],
    default: T | None = None,
) -> T | None:
    """Consume the next token and convert it to *target_type*.

    Parameters
    ----------
    cursor:
        The cursor to read from.  Advanced by exactly one token.
    target_type:
        Type whose converter is looked up in
        :mod:`argcursor.core.converters`.
    default:
        Returned unchanged when the token cannot be converted at all.

    Returns
    -------
    The converted value, the parsed prefix when the token has trailing
    characters, or *default* on total failure.

    Raises
    ------
    OutOfRangeError
        When the cursor has no token left.
    """
    text = cursor.consume()
    converter = get_converter(target_type)
    try:
        outcome = converter(text)
    except ConversionError:
        write_line(cursor, f"Error: could not parse {text}.")
        return default

    if not outcome.is_complete(text):
        write_line(cursor, "Warning: partially parsed string")
        write_line(cursor, f"Unparsed bit: '{outcome.remainder(text)}'")
    return outcome.value


# ---------------------------------------------------------------------------
# Range-checked extraction
# ---------------------------------------------------------------------------

def _error_prefix(cursor: ArgCursor) -> str:
    """Name the flag that introduced the value, when there is one.

    Evaluated before the value is consumed: the token right behind the
    read position is taken as the flag.
    """
    if cursor.remaining_count() < cursor.total_count():
        return "Error: argument to " + cursor.peek(-1)
    return "Error: number"


def format_bound(bound: float, target_type: type[Any]) -> str:
    """Render a range bound the way a value of *target_type* prints."""
    if issubclass(target_type, int) and abs(bound) < _EXACT_FLOAT_LIMIT:
        return str(int(bound))
    return f"{bound:g}"


def extract_ranged(
    range_parse: RangeParse,
    target_type: type[T],
    default: T | None = None,
) -> T | None:
    """Run :func:`extract` and report values outside the range.

    The value is returned even when it violates the range; violations
    are advisory log lines only.  A value that does not order against
    the bounds (a ``str`` target, say) is reported and returned
    unchecked.
    """
    cursor = range_parse.cursor
    prefix = _error_prefix(cursor)
    value = extract(cursor, target_type, default)
    if value is None:
        return value

    try:
        below = value < range_parse.minimum
    except TypeError:
        write_line(cursor, f"{prefix} is not a number; range not checked.")
        return value

    if below:
        bound = format_bound(range_parse.minimum, target_type)
        write_line(cursor, f"{prefix} must be greater than {bound}.")
    if not range_parse.is_open and value > range_parse.maximum:
        bound = format_bound(range_parse.maximum, target_type)
        write_line(cursor, f"{prefix} must be smaller than {bound}.")
    return value
