"""Subcommand dispatch.

Resolves a name to its :class:`~strkit.core.models.Subcommand`, builds
the operand list, parses flags and runs the handler.  Every precondition
is checked before the handler runs, and the handler returns all of its
records at once, so a failure never leaves partial output behind.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from strkit.core.models import Subcommand
from strkit.core.operands import collect_operands, require_operands
from strkit.core.options import parse_options
from strkit.core.protocols import OperandSource
from strkit.core.registry import lookup


def dispatch(
    name: str,
    args: Sequence[str],
    source: OperandSource | None = None,
    *,
    preset: Mapping[str, object] | None = None,
) -> tuple[Subcommand, list[str]]:
    """Run subcommand *name* over *args* plus whatever *source* provides.

    Parameters
    ----------
    name:
        Subcommand name, matched exactly.
    args:
        Arguments following the subcommand name.
    source:
        Optional provider of extra operands (piped standard input).
    preset:
        Option values that take precedence over declared defaults.

    Returns
    -------
    tuple[Subcommand, list[str]]
        The resolved subcommand (its terminator tells the caller how to
        write records) and the records to write.

    Raises
    ------
    UnknownSubcommandError
        When no subcommand is registered under *name*.
    UsageError
        When no operands are available.
    OptionParseError
        When the subcommand's flags are malformed.
    """
    subcommand = lookup(name)
    operands: Sequence[str] = collect_operands(args, source)
    require_operands(operands, name)

    options: dict[str, object] = {}
    if subcommand.options:
        options, operands = parse_options(
            operands,
            subcommand.options,
            preset=preset,
            strict=subcommand.strict,
        )
        if subcommand.needs_operands_after_options:
            require_operands(operands, name)

    return subcommand, subcommand.handler(operands, options)
