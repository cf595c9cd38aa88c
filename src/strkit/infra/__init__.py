"""Infrastructure layer: adapters over process-level I/O.

Adapters here satisfy the protocols declared in
:mod:`strkit.core.protocols`.  They never print; the CLI layer owns all
user-facing output.
"""

from strkit.infra.stdin_source import StdinOperandSource, stdin_is_pipe

__all__: list[str] = [
    "StdinOperandSource",
    "stdin_is_pipe",
]
