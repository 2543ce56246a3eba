"""
Tests for soltok - Sol Tokenizer CLI
====================================

These tests run the soltok command through click's CliRunner.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from sol.cli.errors import ExitCode
from sol.cli.soltok import format_token, main
from sol.lexer import Token, TokenType


@pytest.fixture
def runner():
    return CliRunner()


def run(runner, source: str, *args):
    """Write source to main.sol in an isolated directory and run soltok."""
    with runner.isolated_filesystem():
        Path("main.sol").write_text(source, encoding="utf-8")
        return runner.invoke(main, [*args, "main.sol"])


class TestFormatToken:
    """Test the per-token output line."""

    def test_with_location(self):
        token = Token(TokenType.IDENT, "a", line=2, column=5)
        assert format_token(token) == "2:5\tIDENT\ta"

    def test_without_location(self):
        token = Token(TokenType.LT_EQ, line=1, column=1)
        assert format_token(token, show_location=False) == "LT_EQ\t<="


class TestSoltok:
    """Test the soltok command."""

    def test_lists_tokens(self, runner):
        result = run(runner, "decl a = 42;")
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "1:1\tDECL\tdecl",
            "1:6\tIDENT\ta",
            "1:8\tASSIGN\t=",
            "1:10\tINTEGER\t42",
            "1:12\tSEMICOLON\t;",
        ]

    def test_no_location(self, runner):
        result = run(runner, "a != b", "--no-location")
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["IDENT\ta", "NOT_EQ\t!=", "IDENT\tb"]

    def test_count(self, runner):
        result = run(runner, "fn f() { return 1; } // done\n", "--count")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "9"

    def test_invalid_tokens_listed_by_default(self, runner):
        result = run(runner, "^&~ b", "--no-location")
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "INVALID\tInvalid",
            "INVALID\tInvalid",
            "INVALID\tInvalid",
            "IDENT\tb",
        ]

    def test_strict_rejects_invalid_token(self, runner):
        result = run(runner, "decl a = 4 ^ 2;", "--strict")
        assert result.exit_code == ExitCode.SOURCE_ERROR
        assert "main.sol:1:12: error: unrecognized lexeme '^'" in result.output

    def test_strict_accepts_clean_source(self, runner):
        result = run(runner, "decl a = 4;", "--strict", "--count")
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "5"

    def test_verbose_summary(self, runner):
        result = run(runner, "a ~", "--verbose")
        assert result.exit_code == 0, result.output
        assert "Scanned 3 characters: 2 tokens, 1 invalid" in result.output

    def test_missing_file(self, runner):
        result = runner.invoke(main, ["does-not-exist.sol"])
        assert result.exit_code == 2

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "soltok" in result.output

    def test_non_utf8_source(self, runner):
        with runner.isolated_filesystem():
            Path("main.sol").write_bytes(b"decl \xff;")
            result = runner.invoke(main, ["main.sol"])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "'main.sol' is not UTF-8 text (byte 0xFF at offset 5)" in result.output
