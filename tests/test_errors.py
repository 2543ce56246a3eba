"""
Tests for the sol error hierarchy
=================================

These tests verify error message formatting and how INVALID tokens are
promoted into UnrecognizedLexemeError.
"""

import pytest
from sol.errors import (
    SolError,
    SolSyntaxError,
    SourceLocation,
    UnrecognizedLexemeError,
)
from sol.lexer import Scanner


def first_invalid(source: str):
    return next(t for t in Scanner(source, "main.sol") if t.is_invalid)


class TestSourceLocation:
    """Test SourceLocation formatting."""

    def test_str(self):
        assert str(SourceLocation("main.sol", 3, 14)) == "main.sol:3:14"


class TestSolSyntaxError:
    """Test the formatted error message."""

    def test_message_only(self):
        assert str(SolSyntaxError("bad input")) == "error: bad input"

    def test_location_source_line_and_hint(self):
        error = SolSyntaxError(
            "bad input",
            SourceLocation("main.sol", 2, 3),
            hint="try again",
            source_line="a ^ b",
        )
        assert str(error).split("\n") == [
            "main.sol:2:3: error: bad input",
            "    a ^ b",
            "      ^",
            "hint: try again",
        ]

    def test_hierarchy(self):
        assert issubclass(UnrecognizedLexemeError, SolSyntaxError)
        assert issubclass(SolSyntaxError, SolError)


class TestUnrecognizedLexemeError:
    """Test promotion of INVALID tokens into errors."""

    def test_from_stray_character(self):
        source = "decl a = 4 ^ 2;"
        error = UnrecognizedLexemeError.from_token(first_invalid(source), source, "main.sol")
        assert error.lexeme == "^"
        assert error.location == SourceLocation("main.sol", 1, 12)
        assert error.source_line == source
        assert str(error).startswith("main.sol:1:12: error: unrecognized lexeme '^'")
        assert error.hint is None

    def test_from_overflowing_literal(self):
        source = "decl a;\nx = 99999999999;"
        error = UnrecognizedLexemeError.from_token(first_invalid(source), source, "main.sol")
        assert error.lexeme == "99999999999"
        assert error.location == SourceLocation("main.sol", 2, 5)
        assert "32-bit" in error.hint

    def test_can_be_raised_and_caught_as_sol_error(self):
        with pytest.raises(SolError, match="unrecognized lexeme '~'"):
            raise UnrecognizedLexemeError("~")

    def test_from_token_with_starting_line_offset(self):
        """Tokens from a scanner started past line 1 find their source line."""
        source = "decl a;\nb = ~;"
        token = next(t for t in Scanner(source, "inc.sol", line_number=10) if t.is_invalid)
        error = UnrecognizedLexemeError.from_token(token, source, "inc.sol", first_line=10)
        assert error.lexeme == "~"
        assert error.source_line == "b = ~;"
        assert str(error).startswith("inc.sol:11:5: error: unrecognized lexeme '~'")

    def test_from_non_ascii_digits(self):
        source = "x = ٣;"
        error = UnrecognizedLexemeError.from_token(first_invalid(source), source, "main.sol")
        assert error.lexeme == "٣"
        assert "ASCII" in error.hint
