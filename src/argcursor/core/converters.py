"""Per-type text converters used by the typed-parse protocol.

Each converter reads the **longest valid prefix** of a token and returns
a :class:`~argcursor.core.models.ParseOutcome`.  Trailing characters are
not an error here: :func:`~argcursor.core.extract.extract` decides how
to report them.

Built-in rules
--------------
* ``int``: optional leading whitespace, optional sign, decimal digits.
* ``float``: decimal with optional fraction/exponent, or
  ``inf`` / ``infinity`` / ``nan`` (case-insensitive).
* ``bool``: ``true/false/yes/no/on/off/1/0`` (case-insensitive).
* ``str``: the whole token, unchanged.

Types without a registered converter fall back to ``target_type(text)``,
consuming the whole token on success.
"""

from __future__ import annotations

import re
from typing import Any

from argcursor.core.models import ParseOutcome
from argcursor.core.protocols import Converter
from argcursor.exceptions import ConversionError

_INT_PATTERN = re.compile(r"\s*[+-]?\d+")
_FLOAT_PATTERN = re.compile(
    r"\s*[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|infinity|inf|nan)",
    re.IGNORECASE,
)
_BOOL_PATTERN = re.compile(r"\s*(true|false|yes|no|on|off|1|0)", re.IGNORECASE)
_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})


# ---------------------------------------------------------------------------
# Built-in converters
# ---------------------------------------------------------------------------

def _match_prefix(pattern: re.Pattern[str], text: str) -> re.Match[str]:
    match = pattern.match(text)
    if match is None:
        raise ConversionError(f"could not parse {text}")
    return match


def convert_int(text: str) -> ParseOutcome:
    """Read a decimal integer from the start of *text*."""
    match = _match_prefix(_INT_PATTERN, text)
    return ParseOutcome(value=int(match.group()), consumed=match.end())


def convert_float(text: str) -> ParseOutcome:
    """Read a floating-point number from the start of *text*."""
    match = _match_prefix(_FLOAT_PATTERN, text)
    return ParseOutcome(value=float(match.group()), consumed=match.end())


def convert_bool(text: str) -> ParseOutcome:
    """Read a boolean word or digit from the start of *text*."""
    match = _match_prefix(_BOOL_PATTERN, text)
    word = match.group(1).lower()
    return ParseOutcome(value=word in _TRUE_WORDS, consumed=match.end())


def convert_str(text: str) -> ParseOutcome:
    """Return *text* unchanged."""
    return ParseOutcome(value=text, consumed=len(text))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_REGISTRY: dict[type[Any], Converter] = {
    int: convert_int,
    float: convert_float,
    bool: convert_bool,
    str: convert_str,
}


def register_converter(target_type: type[Any], converter: Converter) -> None:
    """Install *converter* for *target_type*, replacing any previous one."""
    _REGISTRY[target_type] = converter


def unregister_converter(target_type: type[Any]) -> None:
    """Remove a converter installed with :func:`register_converter`.

    Unknown types are ignored.
    """
    _REGISTRY.pop(target_type, None)


def get_converter(target_type: type[Any]) -> Converter:
    """Return the converter for *target_type*.

    Falls back to a whole-token converter that calls the type itself.
    """
    registered = _REGISTRY.get(target_type)
    if registered is not None:
        return registered
    return _constructor_converter(target_type)


def _constructor_converter(target_type: type[Any]) -> Converter:
    def _convert(text: str) -> ParseOutcome:
        try:
            value = target_type(text)
        except (TypeError, ValueError, ArithmeticError) as exc:
            raise ConversionError(f"could not parse {text}") from exc
        return ParseOutcome(value=value, consumed=len(text))

    return _convert
