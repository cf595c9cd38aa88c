"""Allow ``python -m strkit`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m strkit`` behaves identically to the ``strkit``
console script.
"""

from __future__ import annotations

from strkit.cli.app import cli

if __name__ == "__main__":
    cli()
