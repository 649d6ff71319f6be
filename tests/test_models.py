"""Tests for core value objects (core/models.py).

Models are frozen dataclasses: these tests verify immutability,
equality semantics and the remainder helpers.
"""

from __future__ import annotations

import pytest

from argcursor.core.models import ParseOutcome


class TestParseOutcome:
    def test_fields_accessible(self) -> None:
        outcome = ParseOutcome(value=12, consumed=2)
        assert outcome.value == 12
        assert outcome.consumed == 2

    def test_remainder(self) -> None:
        outcome = ParseOutcome(value=12, consumed=2)
        assert outcome.remainder("12extra") == "extra"
        assert outcome.remainder("12") == ""

    def test_is_complete(self) -> None:
        outcome = ParseOutcome(value=12, consumed=2)
        assert not outcome.is_complete("12extra")
        assert outcome.is_complete("12")

    def test_equality(self) -> None:
        assert ParseOutcome(value=1, consumed=1) == ParseOutcome(value=1, consumed=1)
        assert ParseOutcome(value=1, consumed=1) != ParseOutcome(value=1, consumed=2)

    def test_frozen(self) -> None:
        outcome = ParseOutcome(value=1, consumed=1)
        with pytest.raises(AttributeError):
            outcome.value = 2  # type: ignore[misc]
