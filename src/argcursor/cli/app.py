"""CLI application entry point and command routing for argcursor.

This module is the **sole error boundary** for the command-line tool.
It catches :class:`~argcursor.exceptions.ArgCursorError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* ``argparse`` handles only the top level (``--help``, ``--version``
  and the command word).  Everything after the command word is handed
  to an :class:`~argcursor.core.cursor.ArgCursor` named after the
  command.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from argcursor.cli import exit_codes
from argcursor.cli.console import console
from argcursor.core.cursor import ArgCursor
from argcursor.exceptions import ArgCursorError, UsageError
from argcursor.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``argcursor split [--sep TOKEN] NAME ARG...``
    * ``argcursor parse TYPE [--min N] [--max M] --value TOKEN``
    * ``argcursor --version``
    """
    parser = argparse.ArgumentParser(
        prog="argcursor",
        description="Inspect how argcursor scans a command line.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        help="'split' to show sub-command groups, 'parse' to try a typed value.",
    )
    parser.add_argument(
        "rest",
        nargs=argparse.REMAINDER,
        help="Arguments handed to the command.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_split(cursor: ArgCursor) -> int:
    from argcursor.cli.split import run_split

    return run_split(cursor)


def _handle_parse(cursor: ArgCursor) -> int:
    from argcursor.cli.parse import run_parse

    return run_parse(cursor)


_COMMANDS = {
    "split": _handle_split,
    "parse": _handle_parse,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the argcursor CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    command: str = args.command.lower()
    handler = _COMMANDS.get(command)
    if handler is None:
        raise UsageError(
            f"Unknown command: {args.command}",
            hint=f"Available commands: {', '.join(_COMMANDS)}",
        )

    cursor = ArgCursor(args.rest, name=command)
    return handler(cursor)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ArgCursorError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
