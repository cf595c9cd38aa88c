"""``strkit --help``: subcommand overview.

Renders the one-line summary and usage string of every registered
subcommand.  Output goes to stdout: a Rich table when Rich is
installed, plain aligned text otherwise.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from strkit.core.models import Subcommand
from strkit.core.registry import SUBCOMMANDS

TITLE: str = "strkit - manipulate strings"


def _print_plain_help(subcommands: Iterable[Subcommand], stream: TextIO) -> None:
    """Render help without Rich."""
    entries = list(subcommands)
    width = max(len(entry.name.value) for entry in entries)
    print(TITLE, file=stream)
    print(file=stream)
    for entry in entries:
        print(f"  {entry.name.value:<{width}}  {entry.summary}", file=stream)
    print(file=stream)
    print("usage:", file=stream)
    for entry in entries:
        print(f"  {entry.usage}", file=stream)


def render_help(stream: TextIO | None = None) -> None:
    """Print the subcommand overview to *stream* (stdout by default)."""
    stream = stream if stream is not None else sys.stdout
    entries = SUBCOMMANDS.values()

    try:
        from rich.console import Console
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_help(entries, stream)
        return

    table = Table(
        title=TITLE,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Subcommand", style="bold", no_wrap=True)
    table.add_column("Summary")
    table.add_column("Usage")

    for entry in entries:
        table.add_row(entry.name.value, entry.summary, entry.usage)

    Console(file=stream).print(table)
