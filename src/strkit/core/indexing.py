"""Substring position normalisation.

Two flavours are supported, both of which clamp out-of-range values
instead of raising:

* **1-based inclusive** ``(start, end)``: used by ``sub``.  Negative
  positions count from the end, ``-1`` being the last character.
* **0-based** ``(offset, length)``: used by ``sub0``.  A negative
  offset counts back from the end; ``length`` only counts forward.
"""

from __future__ import annotations


def resolve_inclusive(size: int, start: int, end: int) -> tuple[int, int]:
    """Map a 1-based inclusive range onto slice bounds for a string of *size*.

    The returned ``(lo, hi)`` pair is always valid for ``text[lo:hi]``
    and is empty (``lo == hi``) when the range selects nothing.
    """
    if start < 0:
        start += size + 1
    if end < 0:
        end += size + 1
    start = max(start, 1)
    end = min(end, size)
    if start > end:
        return 0, 0
    return start - 1, end


def resolve_offset(size: int, offset: int, length: int | None) -> tuple[int, int]:
    """Map a 0-based offset/length pair onto slice bounds for a string of *size*."""
    if offset < 0:
        offset = max(size + offset, 0)
    offset = min(offset, size)
    if length is None:
        return offset, size
    return offset, min(offset + max(length, 0), size)


def substring(text: str, start: int = 1, end: int = -1) -> str:
    """Return the characters of *text* between 1-based *start* and *end*, inclusive."""
    lo, hi = resolve_inclusive(len(text), start, end)
    return text[lo:hi]


def substring0(text: str, offset: int = 0, length: int | None = None) -> str:
    """Return up to *length* characters of *text* starting at 0-based *offset*."""
    lo, hi = resolve_offset(len(text), offset, length)
    return text[lo:hi]
