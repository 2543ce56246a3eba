"""
Sol Error Hierarchy
===================

This module defines the exception hierarchy for the sol toolkit.
All exceptions inherit from SolError, allowing callers to catch all
toolkit-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
SolError (base)
└── SolSyntaxError - lexical and syntactic errors in source
    └── UnrecognizedLexemeError - character or digit run with no token class

The scanner itself never raises: malformed input is reported as an
INVALID token so that callers can keep scanning, collect every invalid
span, or give up. UnrecognizedLexemeError is how a higher layer (the
soltok --strict mode, a parser) promotes such a token into an error.

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from sol.lexer.tokens import Token


# =============================================================================
# Base Exception Class
# =============================================================================

class SolError(Exception):
    """
    Base exception for all sol errors.

        try:
            check_source(text)
        except SolError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Syntax Errors
# =============================================================================

class SolSyntaxError(SolError):
    """
    Syntax error in sol source code.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            main.sol:3:13: error: unrecognized lexeme '^'
                decl a = 4 ^ 2;
                           ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnrecognizedLexemeError(SolSyntaxError):
    """
    A character or character sequence that no token category accepts.

    Covers both stray characters (e.g. '^', '~') and digit runs that do
    not fit a signed 32-bit integer.
    """

    def __init__(
        self,
        lexeme: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.lexeme = lexeme
        hint = None
        lead = lexeme[:1]
        if lead.isascii() and lead.isdigit():
            hint = "integer literals must fit in a signed 32-bit value"
        elif lead.isnumeric():
            hint = "integer literals are written with ASCII digits 0-9"
        super().__init__(
            f"unrecognized lexeme {lexeme!r}",
            location=location,
            hint=hint,
            source_line=source_line,
        )

    @classmethod
    def from_token(
        cls,
        token: "Token",
        source: str,
        filename: str = "<input>",
        first_line: int = 1,
    ) -> "UnrecognizedLexemeError":
        """
        Build an error for an INVALID token scanned from `source`.

        The lexeme is recovered from the token's position: a run of digits
        for an overflowing literal, otherwise the single offending character.

        Args:
            token: The INVALID token
            source: The text the token was scanned from
            filename: Name reported in the location
            first_line: Line number the scanner gave the first source line
                (its `line_number` argument)
        """
        line = token.line or first_line
        column = token.column or 1
        lines = source.split("\n")
        index = line - first_line
        source_line = lines[index] if 0 <= index < len(lines) else None

        lexeme = "?"
        if source_line is not None and 0 < column <= len(source_line):
            rest = source_line[column - 1:]
            lexeme = rest[0]
            if lexeme.isnumeric():
                end = 1
                while end < len(rest) and rest[end].isnumeric():
                    end += 1
                lexeme = rest[:end]

        return cls(lexeme, SourceLocation(filename, line, column), source_line)
