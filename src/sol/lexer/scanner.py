"""
Sol Scanner
===========

This module implements the lexical scanner for sol source code. It walks
the source one character at a time and produces one Token per call.

Scanning Rules
--------------
- Whitespace is skipped and never produces a token.
- Comments are skipped: `// ...` up to and including the newline,
  `/* ... */` up to and including the closing marker. An unterminated
  block comment silently runs to the end of input.
- `== != <= >=` are recognized with a one-character peek and are never
  split; without the trailing `=` they scan as `= ! < >`.
- An alphabetic lead starts an identifier (letters, digits, underscore);
  identifiers spelled like a keyword become that keyword.
- A numeric lead starts an integer literal. Literals that do not fit in
  a signed 32-bit integer become INVALID.
- Any other character becomes one INVALID token.

The scanner never raises for malformed input. INVALID tokens are ordinary
values and the caller decides what to do with them.

Example Usage
-------------
>>> from sol.lexer.scanner import Scanner
>>> scanner = Scanner("decl a = 42;", "main.sol")
>>> for token in scanner:
...     print(repr(token))
Token(DECL, 1:1)
Token(IDENT, 'a', 1:6)
Token(ASSIGN, 1:8)
Token(INTEGER, 42, 1:10)
Token(SEMICOLON, 1:12)
"""

from typing import Iterator, Optional
import logging

from sol.errors import SourceLocation
from sol.lexer.tokens import (
    INT32_MAX,
    INT32_MIN,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    TWO_CHAR_TOKENS,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Lead Character Classification
# =============================================================================

def classify_operator(lead: str, peeked: str) -> tuple[Optional[TokenType], int]:
    """
    Classify an operator or delimiter from its lead and the peeked character.

    Args:
        lead: The character that starts the token
        peeked: The following character, or "" at end of input

    Returns:
        (token type, characters consumed), or (None, 0) if `lead` does
        not start an operator or delimiter
    """
    token_type = TWO_CHAR_TOKENS.get((lead, peeked))
    if token_type is not None:
        return token_type, 2

    token_type = SINGLE_CHAR_TOKENS.get(lead)
    if token_type is not None:
        return token_type, 1

    return None, 0


# str.isspace() also accepts these, but they are separators, not whitespace
_NON_WHITESPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(char: str) -> bool:
    """True for characters skipped between tokens (space, tab, CR, LF, ...)."""
    return char.isspace() and char not in _NON_WHITESPACE_SEPARATORS


def parse_int32(digits: str) -> Optional[int]:
    """
    Parse a digit run as a signed 32-bit integer.

    Only ASCII digits form a literal; other numeric characters (e.g. '٣',
    '１', '½') and values outside the 32-bit range give None.
    """
    if not (digits.isascii() and digits.isdigit()):
        return None
    # int() refuses very long digit strings; anything past 10 digits overflows
    if len(digits.lstrip("0")) > 10:
        return None
    value = int(digits)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes sol source code.

    The scanner owns the complete source text and keeps a single forward
    cursor plus line/column counters. It can be driven two ways:

        scanner = Scanner(source, filename)
        while (token := scanner.next_token()) is not None:
            ...

        tokens = list(Scanner(source, filename))

    Both produce the same sequence. A scanner cannot be rewound; scan the
    same text again by constructing a new Scanner.

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for diagnostics)
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        line_number: int = 1,
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: The sol source code to tokenize
            filename: Name of the source file (for diagnostics)
            line_number: Line number of the first source line
        """
        self.source = source
        self.filename = filename

        # Index of the next unconsumed character
        self._pos = 0
        self._line = line_number
        self._column = 1

    # =========================================================================
    # Public Interface
    # =========================================================================

    def next_token(self) -> Optional[Token]:
        """
        Scan and return the next token.

        Returns:
            The next Token (INVALID included), or None once the input is
            exhausted. Every call after the first None returns None again.
        """
        self._skip_whitespace_and_comments()

        if self._at_end():
            return None

        start_line = self._line
        start_column = self._column
        lead = self._advance()

        token_type, width = classify_operator(lead, self._peek())
        if token_type is not None:
            if width == 2:
                self._advance()
            return self._make_token(token_type, None, start_line, start_column)

        if lead.isalpha():
            return self._scan_identifier(lead, start_line, start_column)

        if lead.isnumeric():
            return self._scan_number(lead, start_line, start_column)

        logger.debug(
            "unrecognized character %r at %s:%d:%d",
            lead, self.filename, start_line, start_column,
        )
        return self._make_token(TokenType.INVALID, None, start_line, start_column)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate the remaining tokens from the source code.

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def __iter__(self) -> "Scanner":
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    @property
    def at_end(self) -> bool:
        """True once every character of the source has been consumed."""
        return self._at_end()

    @property
    def position(self) -> int:
        """Number of characters consumed so far."""
        return self._pos

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def location(self) -> SourceLocation:
        """Location of the next unconsumed character."""
        return SourceLocation(self.filename, self._line, self._column)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """
        Consume and return the current character, advancing position.

        Updates line and column tracking.
        """
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1

        return char

    def _make_token(
        self,
        token_type: TokenType,
        value: str | int | None,
        start_line: int,
        start_column: int,
    ) -> Token:
        return Token(
            type=token_type,
            value=value,
            line=start_line,
            column=start_column,
            filename=self.filename,
        )

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        """Skip all whitespace and comments before the next lead character."""
        while not self._at_end():
            char = self._peek()

            if is_whitespace(char):
                self._advance()
                continue

            if char == "/" and self._peek(1) == "/":
                self._skip_line_comment()
                continue

            if char == "/" and self._peek(1) == "*":
                self._skip_block_comment()
                continue

            break

    def _skip_line_comment(self) -> None:
        """Skip a line comment (// ...), including its terminating newline."""
        while not self._at_end():
            if self._advance() == "\n":
                return

    def _skip_block_comment(self) -> None:
        """
        Skip a block comment (/* ... */), including the closing marker.

        The search for the closing marker starts at the opening '*', so
        `/*/` is a complete comment. Without a closing marker the rest of
        the input is consumed.
        """
        start_line = self._line
        start_column = self._column

        self._advance()  # consume /

        while not self._at_end():
            if self._advance() == "*" and self._peek() == "/":
                self._advance()  # consume /
                return

        logger.debug(
            "unterminated block comment at %s:%d:%d absorbed to end of input",
            self.filename, start_line, start_column,
        )

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_identifier(self, lead: str, start_line: int, start_column: int) -> Token:
        """
        Scan an identifier or keyword.

        Identifiers start with a letter and continue with letters, digits
        and underscores. Exact keyword spellings become keyword tokens.
        """
        chars = [lead]
        while self._peek() and (self._peek().isalnum() or self._peek() == "_"):
            chars.append(self._advance())

        name = "".join(chars)

        if name in KEYWORDS:
            return self._make_token(KEYWORDS[name], None, start_line, start_column)

        return self._make_token(TokenType.IDENT, name, start_line, start_column)

    def _scan_number(self, lead: str, start_line: int, start_column: int) -> Token:
        """Scan a decimal integer literal."""
        chars = [lead]
        while self._peek() and self._peek().isnumeric():
            chars.append(self._advance())

        digits = "".join(chars)
        value = parse_int32(digits)

        if value is None:
            logger.debug(
                "integer literal %r at %s:%d:%d is not a 32-bit integer",
                digits, self.filename, start_line, start_column,
            )
            return self._make_token(TokenType.INVALID, None, start_line, start_column)

        return self._make_token(TokenType.INTEGER, value, start_line, start_column)


def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """Scan `source` completely and return its tokens as a list."""
    return list(Scanner(source, filename))
