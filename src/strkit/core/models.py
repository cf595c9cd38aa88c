"""Domain models for strkit.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O and are built either
once at import time (the subcommand registry) or fresh per invocation.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

Handler = Callable[[Sequence[str], Mapping[str, object]], list[str]]
"""Signature shared by every subcommand: operands + options → records."""


# ---------------------------------------------------------------------------
# Subcommand names
# ---------------------------------------------------------------------------

class SubcommandName(str, Enum):
    """Every subcommand the dispatcher knows about."""

    LENGTH = "length"
    LOWER = "lower"
    UPPER = "upper"
    TRIM = "trim"
    ESCAPE = "escape"
    UNESCAPE = "unescape"
    JOIN = "join"
    JOIN0 = "join0"
    SPLIT = "split"
    SPLIT0 = "split0"
    SUB = "sub"
    SUB0 = "sub0"
    PAD = "pad"


# ---------------------------------------------------------------------------
# Option declarations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSpec:
    """A single short flag recognised by a subcommand."""

    flag: str
    """Flag letter without the leading dash (e.g. ``"s"``)."""

    dest: str
    """Key under which the parsed value is stored."""

    takes_value: bool = True
    """``False`` for presence-only switches such as ``-r``."""

    convert: Callable[[str], object] = str
    """Converter applied to the raw value (``str`` or ``int``)."""

    default: object = None
    """Value used when the flag is omitted.  ``None`` means absent."""

    metavar: str = "VALUE"
    """Label used in usage strings."""

    @property
    def switch(self) -> str:
        """The flag as typed on the command line (``-s``)."""
        return f"-{self.flag}"


# ---------------------------------------------------------------------------
# Subcommand descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Subcommand:
    """Static description of one subcommand and its handler."""

    name: SubcommandName
    summary: str
    """One-line description shown by ``--help``."""

    usage: str
    """Usage string shown by ``--help``."""

    handler: Handler
    options: tuple[OptionSpec, ...] = ()
    strict: bool = True
    """Whether unknown flags produce a diagnostic (``True``) or fail silently."""

    terminator: str = "\n"
    """Written after every record the handler returns."""

    needs_operands_after_options: bool = False


# ---------------------------------------------------------------------------
# Padding descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PadSpec:
    """Fill unit, target width and direction for the padding engine."""

    fill: str = " "
    width: int = 0
    """Minimum target width; ``0`` means derive from the operands."""

    right: bool = False
    """Pad after the content instead of before it."""
