"""Custom exception hierarchy for strkit.

Every failure that should end an invocation with a clean message must
be raised as a subclass of :class:`StrkitError`.  The CLI error
boundary renders these and maps them to exit code 1; nothing else is
expected to reach the user as a traceback.

Hierarchy
---------
StrkitError
├── UsageError
├── UnknownSubcommandError
├── OptionParseError
├── InvalidOperandError
└── EnvironmentError
"""

from __future__ import annotations


class StrkitError(Exception):
    """Base exception for all strkit errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a single
    diagnostic line without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class UsageError(StrkitError):
    """Raised when a subcommand is invoked without the operands it needs."""


class UnknownSubcommandError(StrkitError):
    """Raised when the dispatcher has no handler registered for a name."""

    def __init__(self, name: str, *, hint: str | None = None) -> None:
        super().__init__(f"Subcommand '{name}' is not valid.", hint=hint)
        self.name: str = name
        """The subcommand name exactly as the user typed it."""


class OptionParseError(StrkitError):
    """Raised when a subcommand's flags cannot be parsed.

    ``silent`` errors still fail the invocation but print no diagnostic;
    they come from subcommands that do not declare strict parsing.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        silent: bool = False,
    ) -> None:
        super().__init__(message, hint=hint)
        self.silent: bool = silent


# --- Operands --------------------------------------------------------------

class InvalidOperandError(StrkitError):
    """Raised when an operand cannot be transformed (e.g. bad quoting)."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(StrkitError):
    """Raised when an optional runtime dependency is not available."""
