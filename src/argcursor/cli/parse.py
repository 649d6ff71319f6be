"""``argcursor parse``: try a value against the typed-parse protocol.

Usage::

    argcursor parse int --min 2 --max 14 --value 20

prints the parsed value and echoes any diagnostics the cursor reported,
e.g. ``Error: argument to --value must be smaller than 14.``  The exit
code is ``GENERAL_ERROR`` whenever a diagnostic was written.
"""

from __future__ import annotations

import io
import sys
from typing import Any

from argcursor.cli import exit_codes
from argcursor.cli.console import console
from argcursor.core.cursor import ArgCursor
from argcursor.exceptions import ArgCursorError, UsageError

TYPES: dict[str, type[Any]] = {
    "int": int,
    "float": float,
    "bool": bool,
    "str": str,
}

_USAGE_HINT = "Usage: argcursor parse TYPE [--min N] [--max M] --value TOKEN"


def _resolve_type(name: str) -> type[Any]:
    try:
        return TYPES[name]
    except KeyError:
        raise UsageError(
            f"Unknown type: {name}",
            hint=f"Choose one of: {', '.join(TYPES)}",
        ) from None


def _read_bound(cursor: ArgCursor, flag: str) -> float:
    bound = cursor.extract(float)
    if bound is None:
        raise UsageError(f"{flag} needs a number.", hint=_USAGE_HINT)
    return bound


def parse_value(cursor: ArgCursor) -> Any:
    """Drive *cursor* through ``TYPE [--min N] [--max M] --value TOKEN``.

    Diagnostics go to the cursor's log sink.

    Raises
    ------
    UsageError
        For an unknown type or flag, ``--max`` without ``--min``, or a
        missing ``--value``.
    OutOfRangeError
        When a flag is the last token and has no value.
    """
    target_type = _resolve_type(cursor.consume())
    minimum: float | None = None
    maximum: float | None = None

    while cursor:
        flag = cursor.consume()
        if flag == "--min":
            minimum = _read_bound(cursor, flag)
        elif flag == "--max":
            maximum = _read_bound(cursor, flag)
        elif flag == "--value":
            if minimum is None:
                if maximum is not None:
                    raise UsageError("--max requires --min.", hint=_USAGE_HINT)
                return cursor.extract(target_type)
            return cursor.range(minimum, maximum).extract(target_type)
        else:
            raise UsageError(f"Unknown option: {flag}", hint=_USAGE_HINT)

    raise UsageError("Missing --value.", hint=_USAGE_HINT)


def run_parse(cursor: ArgCursor) -> int:
    """Handle ``parse``; report the value and any diagnostics."""
    diagnostics = io.StringIO()
    cursor.set_log(diagnostics)

    try:
        value = parse_value(cursor)
    except ArgCursorError:
        sys.stderr.write(diagnostics.getvalue())
        raise

    console.print(f"value: {value!r}", markup=False)
    report = diagnostics.getvalue()
    if report:
        sys.stderr.write(report)
        return exit_codes.GENERAL_ERROR
    return exit_codes.SUCCESS
