"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols, never on concrete
implementations, so operand collection stays pure and testable
without a real pipe attached to standard input.
"""

from __future__ import annotations

from typing import Protocol


class OperandSource(Protocol):
    """Contract for anything that can contribute extra operands.

    Any object that implements :meth:`read_lines` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def read_lines(self) -> list[str]:
        """Return the extra operands, one per line, terminators stripped.

        Implementations return an empty list when they have nothing to
        contribute (e.g. standard input is an interactive terminal).
        """
        ...  # pragma: no cover
