"""Padding engine.

Every function here is a pure transformation.  The width is shared by
all operands: it is the larger of the requested width and the longest
operand, so the longest operand is never padded or truncated.
"""

from __future__ import annotations

from collections.abc import Sequence

from strkit.core.models import PadSpec


def derive_width(operands: Sequence[str], width: int = 0) -> int:
    """Return the effective target width for *operands*."""
    return max([width, *(len(operand) for operand in operands)])


def fill_run(fill: str, count: int) -> str:
    """Repeat *fill* left to right and cut it off at exactly *count* characters."""
    if count <= 0:
        return ""
    repeats = -(-count // len(fill))
    return (fill * repeats)[:count]


def pad_one(operand: str, width: int, spec: PadSpec) -> str:
    """Pad a single operand up to *width* using *spec*'s fill and direction."""
    missing = width - len(operand)
    if missing <= 0:
        return operand
    run = fill_run(spec.fill, missing)
    return operand + run if spec.right else run + operand


def pad_all(operands: Sequence[str], spec: PadSpec) -> list[str]:
    """Pad every operand to the shared width derived from *spec* and *operands*."""
    if not spec.fill:
        raise ValueError("fill unit must not be empty")
    width = derive_width(operands, spec.width)
    return [pad_one(operand, width, spec) for operand in operands]
