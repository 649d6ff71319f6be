"""Custom exception hierarchy for argcursor.

Two disjoint failure classes exist in the library:

* **Structural** errors: the caller asked for a token position that
  does not exist.  These are raised as :class:`OutOfRangeError` and
  never leave a cursor half-mutated.
* **Content** errors: a token could not be converted, or converted to
  a value outside a configured range.  These are *reported* to the
  cursor's log sink and never raised past :func:`~argcursor.core.extract.extract`.

Hierarchy
---------
ArgCursorError
├── OutOfRangeError      (also an IndexError)
├── ConversionError      (also a ValueError)
├── UsageError
└── EnvironmentError
"""

from __future__ import annotations


class ArgCursorError(Exception):
    """Base exception for all argcursor errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Structural ------------------------------------------------------------

class OutOfRangeError(ArgCursorError, IndexError):
    """Raised when a token is requested beyond either end of the vector."""


# --- Content ---------------------------------------------------------------

class ConversionError(ArgCursorError, ValueError):
    """Raised by a converter when no value can be read from the token.

    :func:`~argcursor.core.extract.extract` catches it and writes a
    diagnostic line instead of propagating.
    """


# --- CLI / environment -----------------------------------------------------

class UsageError(ArgCursorError):
    """Raised when the bundled CLI is invoked with unusable arguments."""


class EnvironmentError(ArgCursorError):
    """Raised when an optional runtime dependency is not available."""
