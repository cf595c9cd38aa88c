"""End-to-end tests for the CLI layer (cli/app.py).

``main`` is exercised with explicit argv, a fake operand source and a
``StringIO`` stdout.  ``cli`` is exercised through ``sys.argv`` to check
the error boundary's exit codes and diagnostics.
"""

from __future__ import annotations

import io
import sys

import pytest
from conftest import FakeSource

from strkit.cli import exit_codes
from strkit.cli.app import cli, main
from strkit.exceptions import OptionParseError, UnknownSubcommandError, UsageError


def _run(argv: list[str], piped: list[str] | None = None) -> str:
    out = io.StringIO()
    code = main(argv, source=FakeSource(piped), stdout=out)
    assert code == exit_codes.SUCCESS
    return out.getvalue()


# ---------------------------------------------------------------------------
# main: records
# ---------------------------------------------------------------------------

class TestMain:
    def test_length(self) -> None:
        assert _run(["length", "", "a", "ab", "abc"]) == "0\n1\n2\n3\n"

    def test_piped_length_matches_explicit(self) -> None:
        piped = _run(["length"], ["a", "bb", "ccc"])
        explicit = _run(["length", "a", "bb", "ccc"])
        assert piped == explicit == "1\n2\n3\n"

    def test_explicit_then_piped(self) -> None:
        assert _run(["upper", "a"], ["b"]) == "A\nB\n"

    def test_case(self) -> None:
        assert _run(["lower", "ABC"]) == "abc\n"
        assert _run(["upper", "abc"]) == "ABC\n"

    def test_trim(self) -> None:
        assert _run(["trim", "  x  ", "\ty\r"]) == "x\ny\n"

    def test_escape(self) -> None:
        assert _run(["escape", "a b"]) == "'a b'\n"

    def test_unescape(self) -> None:
        assert _run(["unescape", "'a b'"]) == "a b\n"

    def test_join_emits_one_line(self) -> None:
        assert _run(["join", ",", "a", "b", "c"]) == "a,b,c\n"

    def test_join0_nul_terminated(self) -> None:
        assert _run(["join0", "a", "b"]) == "a\0b\0"

    def test_split(self) -> None:
        assert _run(["split", ",", "a,,b"]) == "a\n\nb\n"

    def test_split0(self) -> None:
        assert _run(["split0", "a\0b\0"]) == "a\nb\n"

    def test_sub(self) -> None:
        assert _run(["sub", "-s", "-100", "-e", "-3", "abcde"]) == "abc\n"
        assert _run(["sub", "-s", "-50", "-e", "-100", "abcde"]) == "\n"
        assert _run(["sub", "-s", "2", "-e", "-5", "abcde"]) == "\n"

    def test_sub_attached_negative(self) -> None:
        assert _run(["sub", "-s-3", "abcde"]) == "cde\n"

    def test_sub0(self) -> None:
        assert _run(["sub0", "-o", "-6", "-l", "2", "abcde"]) == "ab\n"

    def test_pad_derived_width(self) -> None:
        assert _run(["pad", "long", "longer", "longest"]) == "   long\n longer\nlongest\n"

    def test_pad_right_fixed_width(self) -> None:
        output = _run(["pad", "-r", "-c_", "-w5", "a", "ccc", "bb", "dddd"])
        assert output == "a____\nccc__\nbb___\ndddd_\n"

    def test_duplicates_processed_independently(self) -> None:
        assert _run(["length", "ab", "ab"]) == "2\n2\n"

    @pytest.mark.parametrize(
        "items",
        [["a", "b", "c"], ["one two", "three"], ["", "x"]],
    )
    def test_split_reverses_join(self, items: list[str]) -> None:
        joined = _run(["join", ":", *items]).rstrip("\n")
        assert _run(["split", ":", joined]).split("\n")[:-1] == items


# ---------------------------------------------------------------------------
# main: failures
# ---------------------------------------------------------------------------

class TestMainFailures:
    def test_unknown_subcommand(self, out: io.StringIO) -> None:
        with pytest.raises(UnknownSubcommandError, match="foo"):
            main(["foo", "x"], source=FakeSource(), stdout=out)
        assert out.getvalue() == ""

    def test_no_operands(self, out: io.StringIO) -> None:
        with pytest.raises(UsageError):
            main(["length"], source=FakeSource(), stdout=out)
        assert out.getvalue() == ""

    def test_bad_flag_writes_nothing(self, out: io.StringIO) -> None:
        with pytest.raises(OptionParseError):
            main(["pad", "-w", "wide", "x"], source=FakeSource(), stdout=out)
        assert out.getvalue() == ""

    def test_unknown_top_level_flag(self, out: io.StringIO) -> None:
        with pytest.raises(UsageError):
            main(["-x"], source=FakeSource(), stdout=out)

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-V"])
        assert exc_info.value.code == 0
        assert "strkit" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Help
# ---------------------------------------------------------------------------

class TestHelp:
    @pytest.mark.parametrize("argv", [[], ["-h"], ["--help"]])
    def test_lists_every_subcommand(self, argv: list[str], out: io.StringIO) -> None:
        code = main(argv, source=FakeSource(), stdout=out)
        text = out.getvalue()
        assert code == exit_codes.SUCCESS
        for name in ("length", "lower", "upper", "trim", "escape", "unescape",
                     "join0", "split0", "sub0", "pad"):
            assert name in text

    def test_help_does_not_read_input(self, out: io.StringIO) -> None:
        source = FakeSource(["a"])
        main(["--help"], source=source, stdout=out)
        assert source.reads == 0

    def test_help_after_subcommand_is_an_operand(self) -> None:
        assert _run(["length", "-h"]) == "2\n"


# ---------------------------------------------------------------------------
# cli: error boundary
# ---------------------------------------------------------------------------

@pytest.fixture()
def run_cli(monkeypatch: pytest.MonkeyPatch):  # type: ignore[no-untyped-def]
    """Invoke ``cli()`` with *argv* and return its exit code."""
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))

    def invoke(*argv: str) -> object:
        monkeypatch.setattr(sys, "argv", ["strkit", *argv])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return exc_info.value.code

    return invoke


class TestErrorBoundary:
    def test_success(self, run_cli, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
        assert run_cli("upper", "a") == exit_codes.SUCCESS
        assert capsys.readouterr().out == "A\n"

    def test_unknown_subcommand(self, run_cli, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
        assert run_cli("foo") == exit_codes.GENERAL_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "foo" in captured.err

    def test_no_operands(self, run_cli, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
        assert run_cli("length") == exit_codes.GENERAL_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "no strings" in captured.err

    def test_strict_option_error_reported(self, run_cli, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
        assert run_cli("pad", "-x", "a") == exit_codes.GENERAL_ERROR
        assert "-x" in capsys.readouterr().err

    def test_lenient_option_error_is_silent(self, run_cli, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
        assert run_cli("sub0", "-x", "abc") == exit_codes.GENERAL_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_unexpected_error(
        self, run_cli, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],  # type: ignore[no-untyped-def]
    ) -> None:
        from strkit.cli import app as app_module

        def boom(*args: object, **kwargs: object) -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr(app_module, "dispatch", boom)
        assert run_cli("length", "a") == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError" in capsys.readouterr().err

    def test_keyboard_interrupt(
        self, run_cli, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],  # type: ignore[no-untyped-def]
    ) -> None:
        from strkit.cli import app as app_module

        def interrupt(*args: object, **kwargs: object) -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "dispatch", interrupt)
        assert run_cli("length", "a") == exit_codes.KEYBOARD_INTERRUPT
        assert "Aborted" in capsys.readouterr().err


class TestDiagnosticRendering:
    def test_long_name_stays_on_one_line(self, run_cli, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
        name = "x" * 150
        assert run_cli(name) == exit_codes.GENERAL_ERROR
        lines = capsys.readouterr().err.splitlines()
        assert len(lines) == 1
        assert f"'{name}'" in lines[0]

    def test_emoji_code_printed_as_typed(self, run_cli, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
        assert run_cli(":smile:") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert err.count("\n") == 1
        assert "':smile:'" in err

    def test_bracketed_name_printed_as_typed(self, run_cli, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
        assert run_cli("[red]") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert err.count("\n") == 1
        assert "'[red]'" in err

    def test_console_soft_wraps(self) -> None:
        pytest.importorskip("rich")
        from strkit.cli.console import get_rich_console

        rich_console = get_rich_console()
        assert rich_console.soft_wrap is True
