"""Infrastructure: standard input as an operand source.

Standard input only contributes operands when it is a pipe.  An
interactive terminal, a closed stream, a redirected regular file or a
stream without a file descriptor contributes nothing.

Rules
-----
* The stream is read once, to end-of-stream, before anything is
  processed.
* Trailing newlines are dropped the way shell command substitution
  drops them; every remaining line is one operand.
* No ``print()``: callers handle user-facing output.
"""

from __future__ import annotations

import io
import os
import stat
import sys
from typing import TextIO


def stdin_is_pipe(stream: TextIO | None) -> bool:
    """Return ``True`` when *stream* is a non-TTY pipe."""
    if stream is None or stream.closed:
        return False
    try:
        if stream.isatty():
            return False
        mode = os.fstat(stream.fileno()).st_mode
    except (io.UnsupportedOperation, OSError, ValueError):
        return False
    return stat.S_ISFIFO(mode)


def split_piped_text(text: str) -> list[str]:
    """Turn piped text into operands, one per line."""
    text = text.rstrip("\n")
    if not text:
        return []
    return text.split("\n")


class StdinOperandSource:
    """Operand source backed by a text stream, ``sys.stdin`` by default.

    Satisfies :class:`~strkit.core.protocols.OperandSource`.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def read_lines(self) -> list[str]:
        if not stdin_is_pipe(self._stream):
            return []
        return split_piped_text(self._stream.read())
