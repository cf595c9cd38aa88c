"""Core layer: pure string logic, option parsing and dispatch.

Rules
-----
* No ``print()`` calls.
* No reads from ``sys.stdin``; extra operands arrive through
  :class:`~strkit.core.protocols.OperandSource`.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from strkit.core.dispatcher import dispatch
from strkit.core.models import OptionSpec, PadSpec, Subcommand, SubcommandName
from strkit.core.protocols import OperandSource
from strkit.core.registry import SUBCOMMANDS, lookup

__all__: list[str] = [
    "OperandSource",
    "OptionSpec",
    "PadSpec",
    "SUBCOMMANDS",
    "Subcommand",
    "SubcommandName",
    "dispatch",
    "lookup",
]
