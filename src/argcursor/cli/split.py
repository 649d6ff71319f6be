"""``argcursor split``: show how a token list breaks into sub-commands.

Each group starts with a sub-command name and runs until the separator
token (``+`` by default)::

    argcursor split build --release + test -k fast + deploy

renders one row per sub-command.  The groups are carved out with
:meth:`~argcursor.core.cursor.ArgCursor.subcommand_until`.
"""

from __future__ import annotations

from argcursor.cli import exit_codes
from argcursor.cli.console import console
from argcursor.core.cursor import ArgCursor

DEFAULT_SEPARATOR: str = "+"


def split_subcommands(cursor: ArgCursor, separator: str) -> list[ArgCursor]:
    """Slice every remaining group off *cursor*.

    Runs of separators produce no empty groups.
    """
    groups: list[ArgCursor] = []
    while cursor:
        if cursor.peek() == separator:
            cursor.advance()
            continue
        groups.append(cursor.subcommand_until(lambda token: token == separator))
    return groups


def run_split(cursor: ArgCursor) -> int:
    """Handle ``split [--sep TOKEN] NAME ARG...``."""
    separator = DEFAULT_SEPARATOR
    if cursor and cursor.peek() == "--sep":
        cursor.advance()
        separator = cursor.consume()

    groups = split_subcommands(cursor, separator)
    if not groups:
        console.print("[yellow]No sub-commands given.[/yellow]")
        return exit_codes.SUCCESS

    rows = [
        (group.get_name(), " ".join(group.remaining_tokens()))
        for group in groups
    ]
    console.table("Sub-commands", ("Name", "Arguments"), rows)
    return exit_codes.SUCCESS
