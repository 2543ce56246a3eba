"""
Sol Token Model
===============

Token categories and the immutable Token value produced by the scanner.

Token Categories
----------------
- Literals: identifiers (source text), integers (signed 32-bit)
- Operators: = + - ! * / < <= > >= == !=
- Delimiters: , ; ( ) { } [ ]
- Keywords: decl (let), fun (fn), if, else, return, while, for
- INVALID: recovery sentinel for anything the scanner cannot classify

There is no end-of-file token; the scanner signals end of input by
returning None.

Example Usage
-------------
>>> from sol.lexer.tokens import Token, TokenType
>>> str(Token.of(TokenType.LT_EQ))
'<='
>>> Token.ident("a") == Token(TokenType.IDENT, "a", line=3, column=7)
True
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from sol.errors import SourceLocation


# Range of an integer literal
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the sol language.

    The enum value of each fixed token is its display text; literal-bearing
    categories and INVALID use a descriptive name instead.
    """

    # === Sentinel ===
    INVALID = "Invalid"

    # === Literals ===
    IDENT = "identifier"
    INTEGER = "integer"

    # === Operators ===
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    LT_EQ = "<="
    GT = ">"
    GT_EQ = ">="
    EQ = "=="
    NOT_EQ = "!="

    # === Delimiters ===
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"

    # === Keywords ===
    DECL = "decl"
    FUN = "fun"
    IF = "if"
    ELSE = "else"
    RETURN = "return"
    WHILE = "while"
    FOR = "for"

    @property
    def symbol(self) -> Optional[str]:
        """Fixed display text, or None for literal-bearing categories."""
        if self in _VALUE_CARRYING:
            return None
        return self.value

    @property
    def is_keyword(self) -> bool:
        return self in _KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        return self in _OPERATOR_TYPES

    @property
    def is_delimiter(self) -> bool:
        return self in _DELIMITER_TYPES


_VALUE_CARRYING = frozenset({TokenType.IDENT, TokenType.INTEGER})

_KEYWORD_TYPES = frozenset({
    TokenType.DECL,
    TokenType.FUN,
    TokenType.IF,
    TokenType.ELSE,
    TokenType.RETURN,
    TokenType.WHILE,
    TokenType.FOR,
})

_OPERATOR_TYPES = frozenset({
    TokenType.ASSIGN,
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.BANG,
    TokenType.ASTERISK,
    TokenType.SLASH,
    TokenType.LT,
    TokenType.LT_EQ,
    TokenType.GT,
    TokenType.GT_EQ,
    TokenType.EQ,
    TokenType.NOT_EQ,
})

_DELIMITER_TYPES = frozenset({
    TokenType.COMMA,
    TokenType.SEMICOLON,
    TokenType.LPAREN,
    TokenType.RPAREN,
    TokenType.LBRACE,
    TokenType.RBRACE,
    TokenType.LBRACKET,
    TokenType.RBRACKET,
})


# =============================================================================
# Dispatch Tables
# =============================================================================

# Keyword spellings, aliases included
KEYWORDS: dict[str, TokenType] = {
    "decl": TokenType.DECL,
    "let": TokenType.DECL,
    "fun": TokenType.FUN,
    "fn": TokenType.FUN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
}

# Tokens decided by the lead character alone
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "!": TokenType.BANG,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}

# (lead, peeked) pairs that always form one token
TWO_CHAR_TOKENS: dict[tuple[str, str], TokenType] = {
    ("=", "="): TokenType.EQ,
    ("!", "="): TokenType.NOT_EQ,
    ("<", "="): TokenType.LT_EQ,
    (">", "="): TokenType.GT_EQ,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit of sol source code.

    Tokens compare and hash by (type, value) only. The position of the
    lead character is kept for diagnostics but is not part of the value,
    so a token scanned on line 12 equals one built by hand.

    Attributes:
        type: The TokenType classification
        value: Identifier text, integer value, or None
        line: Line of the lead character (1-indexed), if known
        column: Column of the lead character (1-indexed), if known
        filename: Name of the source the token came from
    """
    type: TokenType
    value: str | int | None = None
    line: Optional[int] = field(default=None, compare=False)
    column: Optional[int] = field(default=None, compare=False)
    filename: str = field(default="<input>", compare=False)

    @classmethod
    def of(cls, token_type: TokenType) -> "Token":
        """Build a fixed (valueless) token."""
        return cls(token_type)

    @classmethod
    def ident(cls, name: str) -> "Token":
        return cls(TokenType.IDENT, name)

    @classmethod
    def integer(cls, value: int) -> "Token":
        return cls(TokenType.INTEGER, value)

    @classmethod
    def invalid(cls) -> "Token":
        return cls(TokenType.INVALID)

    def __str__(self) -> str:
        """Canonical display form, e.g. '<=', 'while', 'foo', '42'."""
        if self.type in _VALUE_CARRYING:
            return str(self.value)
        return self.type.value

    def __repr__(self) -> str:
        """Format token for debugging output."""
        position = ""
        if self.line is not None:
            position = f", {self.line}:{self.column}"
        if self.value is not None:
            if isinstance(self.value, int):
                return f"Token({self.type.name}, {self.value}{position})"
            return f"Token({self.type.name}, {self.value!r}{position})"
        return f"Token({self.type.name}{position})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line or 1, self.column or 1)

    @property
    def is_invalid(self) -> bool:
        return self.type is TokenType.INVALID
