"""Tests for the per-type converters (core/converters.py).

Every test is a pure function call.  These tests exercise:

* Longest-prefix reading for ``int`` / ``float`` / ``bool``
* Whole-token ``str`` conversion
* Total failure raising :class:`ConversionError`
* Registry lookup, registration and the constructor fallback
"""

from __future__ import annotations

import math
from decimal import Decimal
from pathlib import Path

import pytest

from argcursor.core.converters import (
    convert_bool,
    convert_float,
    convert_int,
    convert_str,
    get_converter,
    register_converter,
    unregister_converter,
)
from argcursor.core.models import ParseOutcome
from argcursor.exceptions import ConversionError


# ---------------------------------------------------------------------------
# int
# ---------------------------------------------------------------------------

class TestConvertInt:
    @pytest.mark.parametrize(
        ("text", "value", "consumed"),
        [
            ("42", 42, 2),
            ("-7", -7, 2),
            ("+3", 3, 2),
            ("  8", 8, 3),
            ("12extra", 12, 2),
            ("3.5", 3, 1),
        ],
    )
    def test_prefix(self, text: str, value: int, consumed: int) -> None:
        assert convert_int(text) == ParseOutcome(value=value, consumed=consumed)

    @pytest.mark.parametrize("text", ["abc", "", "-", "x12", " "])
    def test_failure(self, text: str) -> None:
        with pytest.raises(ConversionError):
            convert_int(text)


# ---------------------------------------------------------------------------
# float
# ---------------------------------------------------------------------------

class TestConvertFloat:
    @pytest.mark.parametrize(
        ("text", "value", "consumed"),
        [
            ("2.5", 2.5, 3),
            ("-0.25", -0.25, 5),
            (".5", 0.5, 2),
            ("1e3", 1000.0, 3),
            ("1.5E-1", 0.15, 6),
            ("7", 7.0, 1),
            ("1e", 1.0, 1),
            ("2.5kg", 2.5, 3),
        ],
    )
    def test_prefix(self, text: str, value: float, consumed: int) -> None:
        outcome = convert_float(text)
        assert outcome.value == pytest.approx(value)
        assert outcome.consumed == consumed

    def test_infinity(self) -> None:
        assert convert_float("inf").value == math.inf
        assert convert_float("-Infinity").value == -math.inf

    def test_nan(self) -> None:
        assert math.isnan(convert_float("NaN").value)

    @pytest.mark.parametrize("text", ["abc", "", ".", "-e5"])
    def test_failure(self, text: str) -> None:
        with pytest.raises(ConversionError):
            convert_float(text)


# ---------------------------------------------------------------------------
# bool / str
# ---------------------------------------------------------------------------

class TestConvertBool:
    @pytest.mark.parametrize("text", ["true", "YES", "on", "1"])
    def test_truthy(self, text: str) -> None:
        assert convert_bool(text).value is True

    @pytest.mark.parametrize("text", ["false", "No", "OFF", "0"])
    def test_falsy(self, text: str) -> None:
        assert convert_bool(text).value is False

    def test_prefix(self) -> None:
        assert convert_bool("truex") == ParseOutcome(value=True, consumed=4)

    def test_failure(self) -> None:
        with pytest.raises(ConversionError):
            convert_bool("maybe")


class TestConvertStr:
    def test_whole_token(self) -> None:
        assert convert_str("hello world") == ParseOutcome(value="hello world", consumed=11)

    def test_empty_token(self) -> None:
        assert convert_str("") == ParseOutcome(value="", consumed=0)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class TestRegistry:
    def test_builtin_lookup(self) -> None:
        assert get_converter(int) is convert_int
        assert get_converter(float) is convert_float
        assert get_converter(bool) is convert_bool
        assert get_converter(str) is convert_str

    def test_constructor_fallback(self) -> None:
        outcome = get_converter(Decimal)("1.10")
        assert outcome == ParseOutcome(value=Decimal("1.10"), consumed=4)

    def test_constructor_fallback_failure(self) -> None:
        with pytest.raises(ConversionError):
            get_converter(Decimal)("abc")

    def test_constructor_fallback_path(self) -> None:
        assert get_converter(Path)("a/b").value == Path("a/b")

    def test_register_and_unregister(self) -> None:
        def _hex(text: str) -> ParseOutcome:
            return ParseOutcome(value=int(text, 16), consumed=len(text))

        class Hex(int):
            pass

        register_converter(Hex, _hex)
        try:
            assert get_converter(Hex)("ff").value == 255
        finally:
            unregister_converter(Hex)
        with pytest.raises(ConversionError):
            get_converter(Hex)("ff")

    def test_unregister_unknown_is_ignored(self) -> None:
        unregister_converter(complex)

