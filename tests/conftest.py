"""Shared pytest fixtures and configuration for the strkit test suite.

Guidelines
----------
* No test reads the real standard input; piped lines come from
  :class:`FakeSource`.
* Core tests must be pure: no side effects.
* Tests must not depend on whether the runner has a TTY attached.
"""

from __future__ import annotations

import io

import pytest


class FakeSource:
    """Operand source returning a fixed list of piped lines."""

    def __init__(self, lines: list[str] | None = None) -> None:
        self.lines = list(lines or [])
        self.reads = 0

    def read_lines(self) -> list[str]:
        self.reads += 1
        return list(self.lines)


@pytest.fixture()
def no_pipe() -> FakeSource:
    """A source that contributes nothing, like an interactive terminal."""
    return FakeSource()


@pytest.fixture()
def out() -> io.StringIO:
    """Capture buffer for records written by ``main``."""
    return io.StringIO()
