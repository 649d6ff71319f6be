"""argcursor: a forward-scanning cursor over command-line arguments.

Peek, consume, slice into sub-commands and parse typed values with
optional range checks, reporting bad user input to a log stream.
"""

from argcursor.core import ArgCursor, RangeParse, extract, extract_ranged
from argcursor.exceptions import ArgCursorError, OutOfRangeError
from argcursor.version import __version__

__all__: list[str] = [
    "ArgCursor",
    "ArgCursorError",
    "OutOfRangeError",
    "RangeParse",
    "__version__",
    "extract",
    "extract_ranged",
]
