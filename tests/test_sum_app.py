"""Tests for the ``numsum`` command line (cli/sum_app.py).

``main`` is called with explicit argv; ``cli`` is exercised through the
error boundary and ``SystemExit``.
"""

from __future__ import annotations

import pytest

from numplay.cli import exit_codes
from numplay.cli.sum_app import cli, main
from numplay.exceptions import ParseError, SumOverflowError


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    def test_prints_total(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["10", "-3"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == "Total: 7\n"

    def test_no_tokens_sum_to_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == "Total: 0\n"

    def test_bad_token_raises(self) -> None:
        with pytest.raises(ParseError, match="nope"):
            main(["1", "nope"])

    def test_option_like_token_is_a_token(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            main(["1", "-x", "2"])
        assert exc_info.value.token == "-x"

    @pytest.mark.parametrize("token", ["-vx", "-V1", "--verbose=1", "--help=no", "-hv"])
    def test_text_glued_to_flag_is_a_token(self, token: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            main(["1", token])
        assert exc_info.value.token == token

    def test_flags_anywhere_keep_token_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["4", "--verbose", "-1", "-v", "2"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == "Total: 5\n"

    def test_verbose_flag_is_not_a_token(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-v", "2", "3"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == "Total: 5\n"

    def test_overflow_raises(self) -> None:
        with pytest.raises(SumOverflowError):
            main(["2147483647", "1"])


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestCli:
    def test_success_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.argv", ["numsum", "1", "2", "3"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "Total: 6\n"

    def test_parse_error_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.argv", ["numsum", "4", "nope"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Could not parse 'nope' as an integer" in captured.err

    def test_markup_in_token_is_literal(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.argv", ["numsum", "[bold]"])
        with pytest.raises(SystemExit):
            cli()
        assert "'[bold]'" in capsys.readouterr().err

    @pytest.mark.parametrize("token", [":smile:", "a\tb", "x\x07y", "café"])
    def test_token_bytes_are_echoed_unchanged(
        self,
        token: str,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        pytest.importorskip("rich")
        monkeypatch.setattr("sys.argv", ["numsum", token])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == f"Error: Could not parse '{token}' as an integer\n"

    @pytest.mark.parametrize("token", ["-vx", "--verbose=1", "-V1"])
    def test_glued_flag_exit_code(
        self,
        token: str,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.argv", ["numsum", token])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == f"Error: Could not parse '{token}' as an integer\n"

    def test_overflow_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.argv", ["numsum", "-2147483648", "-1"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error: Sum overflows" in err
        assert "Hint:" in err
