"""CLI application entry point and subcommand routing for strkit.

This module is the **sole error boundary** for the entire application.
It catches :class:`~strkit.exceptions.StrkitError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering a diagnostic on stderr and
returning well-defined exit codes.

Architecture notes
------------------
* No string logic lives here: subcommands are resolved and run by
  :func:`strkit.core.dispatcher.dispatch`.
* Records are written to stdout verbatim; diagnostics go through the
  console proxy on stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, TextIO

from strkit.cli import exit_codes
from strkit.cli.console import console, escape_markup
from strkit.core.dispatcher import dispatch
from strkit.core.protocols import OperandSource
from strkit.exceptions import OptionParseError, StrkitError, UsageError
from strkit.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports failures as :class:`UsageError`."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Only the first argument is interpreted here; everything after the
    subcommand name is handed to the subcommand untouched, including
    arguments that look like flags:

    * ``strkit``                       : subcommand overview
    * ``strkit -h`` / ``--help``       : subcommand overview
    * ``strkit -V`` / ``--version``
    * ``strkit <subcommand> [ARG...]``
    """
    parser = _ArgumentParser(
        prog="strkit",
        description="Manipulate strings.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="List subcommands with their usage.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "subcommand",
        nargs="?",
        default=None,
        help="Subcommand to run.",
    )
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="Flags and strings for the subcommand.",
    )
    return parser


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _write_records(records: list[str], terminator: str, stream: TextIO) -> None:
    for record in records:
        stream.write(record)
        stream.write(terminator)
    stream.flush()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    source: OperandSource | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the strkit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    source:
        Provider of extra operands.  Defaults to standard input, which
        only contributes when it is a pipe.
    stdout:
        Stream receiving the records.  Defaults to ``sys.stdout``.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.help or args.subcommand is None:
        from strkit.cli.help import render_help

        render_help(stdout)
        return exit_codes.SUCCESS

    if source is None:
        from strkit.infra.stdin_source import StdinOperandSource

        source = StdinOperandSource()

    subcommand, records = dispatch(args.subcommand, args.args, source)
    _write_records(records, subcommand.terminator, stdout or sys.stdout)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except OptionParseError as exc:
        if not exc.silent:
            _report(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except StrkitError as exc:
        _report(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)


def _report(exc: StrkitError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
