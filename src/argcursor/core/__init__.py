"""Core layer: the cursor, slicing and typed-parse engine.

Rules
-----
* No imports from ``cli``.
* No I/O except writing diagnostics to a cursor's injected log sink.
* Structural failures raise; content failures are logged.
"""

from argcursor.core.converters import get_converter, register_converter, unregister_converter
from argcursor.core.cursor import ArgCursor
from argcursor.core.extract import extract, extract_ranged
from argcursor.core.models import ParseOutcome
from argcursor.core.protocols import Converter, LogSink, Predicate
from argcursor.core.range_parse import RangeParse

__all__: list[str] = [
    "ArgCursor",
    "Converter",
    "LogSink",
    "ParseOutcome",
    "Predicate",
    "RangeParse",
    "extract",
    "extract_ranged",
    "get_converter",
    "register_converter",
    "unregister_converter",
]
