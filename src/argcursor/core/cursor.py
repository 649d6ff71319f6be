"""Forward-scanning cursor over a command-line argument vector.

An :class:`ArgCursor` holds an ordered list of tokens, a read position
and a name label (the executable or sub-command name).  Callers drive
dispatch with :meth:`~ArgCursor.peek` / :meth:`~ArgCursor.consume` and
carve nested invocations out with the slice family::

    cursor = ArgCursor.from_argv(["git", "remote", "add", "origin", "url"])
    command = cursor.subcommand(3)   # name "remote", tokens add/origin/url

Guarantees
----------
* Every bounds check runs before any mutation: a call that raises
  :class:`~argcursor.exceptions.OutOfRangeError` leaves the cursor
  exactly as it was.
* ``remaining_count() + position == total_count()`` at all times.
* Children produced by slicing hold copies of their tokens; mutating
  one cursor never affects another.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TypeVar

from argcursor.core.extract import extract
from argcursor.core.protocols import LogSink, Predicate
from argcursor.core.range_parse import RangeParse
from argcursor.exceptions import OutOfRangeError

T = TypeVar("T")


class ArgCursor:
    """Stateful cursor over a flat sequence of string tokens.

    Parameters
    ----------
    tokens:
        Initial tokens, in order.  Copied.
    name:
        Label for this vector; empty for slices.
    """

    def __init__(self, tokens: Iterable[str] = (), name: str = "") -> None:
        self._tokens: list[str] = list(tokens)
        self._name: str = name
        self._position: int = 0
        self._log: LogSink | None = None

    @classmethod
    def from_argv(cls, argv: Sequence[str] | None = None) -> ArgCursor:
        """Wrap a process argument list.

        ``argv[0]`` becomes the name and the rest become the tokens.
        When *argv* is ``None``, ``sys.argv`` is used.
        """
        if argv is None:
            argv = sys.argv
        if not argv:
            return cls()
        return cls(argv[1:], name=argv[0])

    # ------------------------------------------------------------------
    # Counts
    # ------------------------------------------------------------------

    @property
    def position(self) -> int:
        """Index of the next token to be consumed."""
        return self._position

    def remaining_count(self) -> int:
        """Number of tokens not consumed yet."""
        return len(self._tokens) - self._position

    def total_count(self) -> int:
        """Number of tokens held, consumed or not."""
        return len(self._tokens)

    def remaining_tokens(self) -> tuple[str, ...]:
        """Copy of the unconsumed tokens.  Does not advance."""
        return tuple(self._tokens[self._position:])

    def __len__(self) -> int:
        return self.remaining_count()

    def __bool__(self) -> bool:
        return self.remaining_count() > 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"tokens={self._tokens!r}, position={self._position})"
        )

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def peek(self, offset: int = 0) -> str:
        """Return the token at ``position + offset`` without advancing.

        A negative *offset* looks back at consumed tokens.

        Raises
        ------
        OutOfRangeError
            If the absolute index is negative or past the last token.
        """
        index = self._position + offset
        if index < 0:
            raise OutOfRangeError("The index must not become negative.")
        if index >= len(self._tokens):
            if offset == 0:
                raise OutOfRangeError("No argument left to peek.")
            raise OutOfRangeError("Argument vector too short.")
        return self._tokens[index]

    def advance(self) -> None:
        """Move past the current token.

        Raises
        ------
        OutOfRangeError
            If no token remains.
        """
        if self._position >= len(self._tokens):
            raise OutOfRangeError("No arguments left to shift.")
        self._position += 1

    def consume(self) -> str:
        """Return the current token and move past it."""
        token = self.peek()
        self._position += 1
        return token

    def push_back(self, token: str) -> None:
        """Append *token* to the end of the vector."""
        self._tokens.append(token)

    # ------------------------------------------------------------------
    # Slicing
    # ------------------------------------------------------------------

    def _child(self, tokens: list[str], name: str = "") -> ArgCursor:
        return type(self)(tokens, name=name)

    def slice(self, size: int) -> ArgCursor:
        """Move the next *size* tokens into a new, unnamed cursor.

        Raises
        ------
        ValueError
            If *size* is negative.
        OutOfRangeError
            If fewer than *size* tokens remain.
        """
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if size > self.remaining_count():
            raise OutOfRangeError("Not enough arguments to form subarg.")

        start = self._position
        child = self._child(self._tokens[start:start + size])
        self._position += size
        return child

    def slice_until(self, predicate: Predicate) -> ArgCursor:
        """Move tokens into a new cursor until *predicate* holds.

        The matching token stays in this cursor.  Without a match, all
        remaining tokens are taken.  An empty result is valid.
        """
        start = self._position
        end = start
        while end < len(self._tokens) and not predicate(self._tokens[end]):
            end += 1

        child = self._child(self._tokens[start:end])
        self._position = end
        return child

    def subcommand(self, size: int) -> ArgCursor:
        """Like :meth:`slice`, using the current token as the child's name.

        Advances by ``size + 1``.

        Raises
        ------
        ValueError
            If *size* is negative.
        OutOfRangeError
            If fewer than ``size + 1`` tokens remain.
        """
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if size + 1 > self.remaining_count():
            raise OutOfRangeError("Not enough arguments to form subcommand.")

        name = self.consume()
        child = self.slice(size)
        child.set_name(name)
        return child

    def subcommand_until(self, predicate: Predicate) -> ArgCursor:
        """Like :meth:`slice_until`, using the current token as the name.

        The name token is never tested against *predicate*.

        Raises
        ------
        OutOfRangeError
            If no token remains for the name.
        """
        name = self.consume()
        child = self.slice_until(predicate)
        child.set_name(name)
        return child

    # ------------------------------------------------------------------
    # Typed extraction
    # ------------------------------------------------------------------

    def range(self, minimum: float, maximum: float | None = None) -> RangeParse:
        """Bind a numeric range to the next extraction.

        With only *minimum*, the range is ``[minimum, inf)``.
        """
        return RangeParse.create(self, minimum, maximum)

    def extract(self, target_type: type[T], default: T | None = None) -> T | None:
        """Consume the next token as *target_type*.

        See :func:`argcursor.core.extract.extract`.
        """
        return extract(self, target_type, default)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def set_log(self, stream: LogSink) -> None:
        """Send diagnostics to *stream*.  The cursor does not own it."""
        self._log = stream

    def get_log(self) -> LogSink:
        """Return the diagnostic sink; ``sys.stderr`` unless set."""
        if self._log is None:
            return sys.stderr
        return self._log

    def set_name(self, name: str) -> None:
        self._name = name

    def get_name(self) -> str:
        return self._name
