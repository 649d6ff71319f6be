"""Allow ``python -m argcursor`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m argcursor`` behaves identically to the ``argcursor``
console script.
"""

from __future__ import annotations

from argcursor.cli.app import cli

if __name__ == "__main__":
    cli()
