"""Static subcommand table.

The help output and the dispatcher both read from :data:`SUBCOMMANDS`,
so adding a subcommand means adding exactly one entry here.
"""

from __future__ import annotations

from strkit.core import operations
from strkit.core.models import OptionSpec, Subcommand, SubcommandName
from strkit.core.options import signed_int
from strkit.exceptions import UnknownSubcommandError

_SUB_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("s", "start", convert=signed_int, default=1, metavar="start"),
    OptionSpec("e", "end", convert=signed_int, default=-1, metavar="end"),
)

_SUB0_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("o", "offset", convert=signed_int, default=0, metavar="offset"),
    OptionSpec("l", "length", convert=signed_int, metavar="len"),
)

_PAD_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("r", "right", takes_value=False),
    OptionSpec("c", "fill", default=" ", metavar="padchar"),
    OptionSpec("w", "width", convert=signed_int, default=0, metavar="width"),
)

_TABLE: tuple[Subcommand, ...] = (
    Subcommand(
        SubcommandName.LENGTH,
        "print string lengths",
        "strkit length [STRING...]",
        operations.length,
    ),
    Subcommand(
        SubcommandName.LOWER,
        "convert strings to lowercase",
        "strkit lower [STRING...]",
        operations.lower,
    ),
    Subcommand(
        SubcommandName.UPPER,
        "convert strings to uppercase",
        "strkit upper [STRING...]",
        operations.upper,
    ),
    Subcommand(
        SubcommandName.TRIM,
        "trim leading and trailing whitespace",
        "strkit trim [STRING...]",
        operations.trim,
    ),
    Subcommand(
        SubcommandName.ESCAPE,
        "quote strings for safe use in a shell",
        "strkit escape [STRING...]",
        operations.escape,
    ),
    Subcommand(
        SubcommandName.UNESCAPE,
        "remove one level of shell quoting",
        "strkit unescape [STRING...]",
        operations.unescape,
    ),
    Subcommand(
        SubcommandName.JOIN,
        "join strings with a separator",
        "strkit join SEP [STRING...]",
        operations.join,
    ),
    Subcommand(
        SubcommandName.JOIN0,
        "join strings with NUL bytes",
        "strkit join0 [STRING...]",
        operations.join0,
        terminator=operations.NUL,
    ),
    Subcommand(
        SubcommandName.SPLIT,
        "split strings on a separator",
        "strkit split SEP [STRING...]",
        operations.split,
    ),
    Subcommand(
        SubcommandName.SPLIT0,
        "split strings on NUL bytes",
        "strkit split0 [STRING...]",
        operations.split0,
    ),
    Subcommand(
        SubcommandName.SUB,
        "extract substrings",
        "strkit sub [-s start] [-e end] [STRING...]",
        operations.sub,
        options=_SUB_OPTIONS,
        needs_operands_after_options=True,
    ),
    Subcommand(
        SubcommandName.SUB0,
        "extract substrings using 0-based indexing",
        "strkit sub0 [-o offset] [-l len] [STRING...]",
        operations.sub0,
        options=_SUB0_OPTIONS,
        strict=False,
        needs_operands_after_options=True,
    ),
    Subcommand(
        SubcommandName.PAD,
        "pad strings to a fixed width",
        "strkit pad [-r] [-c padchar] [-w width] [STRING...]",
        operations.pad,
        options=_PAD_OPTIONS,
        needs_operands_after_options=True,
    ),
)

SUBCOMMANDS: dict[SubcommandName, Subcommand] = {entry.name: entry for entry in _TABLE}


def lookup(name: str) -> Subcommand:
    """Return the subcommand registered under exactly *name*."""
    try:
        return SUBCOMMANDS[SubcommandName(name)]
    except ValueError:
        raise UnknownSubcommandError(name) from None
