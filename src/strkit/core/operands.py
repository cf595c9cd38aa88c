"""Operand collection.

Explicit operands always come first; lines from the operand source are
appended after them.  This module never touches ``sys.stdin`` itself.
"""

from __future__ import annotations

from collections.abc import Sequence

from strkit.core.protocols import OperandSource
from strkit.exceptions import UsageError


def collect_operands(
    args: Sequence[str],
    source: OperandSource | None = None,
) -> tuple[str, ...]:
    """Merge explicit *args* with the lines offered by *source*."""
    piped = source.read_lines() if source is not None else []
    return (*args, *piped)


def require_operands(operands: Sequence[str], name: str) -> None:
    """Raise :class:`UsageError` when *operands* is empty."""
    if not operands:
        raise UsageError(f"{name}: no strings given.")
