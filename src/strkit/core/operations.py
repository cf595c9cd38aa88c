"""Subcommand handlers.

Every handler shares one signature, ``(operands, options) -> records``,
and is a pure function of its inputs.  Handlers assume operand and
option preconditions were already checked by the dispatcher.
"""

from __future__ import annotations

import shlex
from collections.abc import Mapping, Sequence
from typing import cast

from strkit.core.indexing import substring, substring0
from strkit.core.models import PadSpec
from strkit.core.padding import pad_all
from strkit.exceptions import InvalidOperandError, OptionParseError

WHITESPACE: str = " \t\n\r"
NUL: str = "\0"


# ---------------------------------------------------------------------------
# Per-operand pass-throughs
# ---------------------------------------------------------------------------

def length(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    return [str(len(operand)) for operand in operands]


def lower(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    return [operand.lower() for operand in operands]


def upper(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    return [operand.upper() for operand in operands]


def trim(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    return [operand.strip(WHITESPACE) for operand in operands]


def escape(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    """Quote each operand so a POSIX shell reads it back as one word."""
    return [shlex.quote(operand) for operand in operands]


def unescape(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    """Remove one level of shell quoting from each operand.

    Unquoted whitespace separates words; the words are re-joined with a
    single space.
    """
    records: list[str] = []
    for operand in operands:
        try:
            words = shlex.split(operand)
        except ValueError as exc:
            raise InvalidOperandError(
                f"cannot unescape {operand!r}: {exc}",
            ) from exc
        records.append(" ".join(words))
    return records


# ---------------------------------------------------------------------------
# Joining and splitting
# ---------------------------------------------------------------------------

def join(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    """Join every operand after the first using the first as separator."""
    separator, *rest = operands
    return [separator.join(rest)]


def join0(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    # The NUL after each record is the subcommand's terminator.
    return list(operands)


def _split_fields(text: str, separator: str) -> list[str]:
    if not separator:
        return list(text)
    return text.split(separator)


def split(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    """Split every operand after the first on the first, keeping empty fields."""
    separator, *rest = operands
    return [field for operand in rest for field in _split_fields(operand, separator)]


def split0(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    """Split every operand on NUL, ignoring exactly one trailing NUL."""
    records: list[str] = []
    for operand in operands:
        if operand.endswith(NUL):
            operand = operand[:-1]
        records.extend(operand.split(NUL))
    return records


# ---------------------------------------------------------------------------
# Substrings and padding
# ---------------------------------------------------------------------------

def sub(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    start = cast(int, options["start"])
    end = cast(int, options["end"])
    return [substring(operand, start, end) for operand in operands]


def sub0(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    offset = cast(int, options["offset"])
    count = cast("int | None", options.get("length"))
    return [substring0(operand, offset, count) for operand in operands]


def pad(operands: Sequence[str], options: Mapping[str, object]) -> list[str]:
    fill = cast(str, options["fill"])
    if not fill:
        raise OptionParseError("pad: the fill given to -c must not be empty")
    spec = PadSpec(
        fill=fill,
        width=cast(int, options["width"]),
        right=bool(options["right"]),
    )
    return pad_all(operands, spec)
