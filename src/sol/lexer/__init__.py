"""
Sol Lexer
=========

Converts sol source text into a flat, ordered sequence of tokens.

- tokens: the TokenType categories and the immutable Token value
- scanner: the Scanner that produces tokens one at a time

Usage
-----
>>> from sol.lexer import tokenize
>>> [str(t) for t in tokenize("if (a >= 10) { return a; }")]
['if', '(', 'a', '>=', '10', ')', '{', 'return', 'a', ';', '}']
"""

from sol.lexer.tokens import (
    INT32_MAX,
    INT32_MIN,
    KEYWORDS,
    Token,
    TokenType,
)
from sol.lexer.scanner import Scanner, classify_operator, tokenize

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "KEYWORDS",
    "Token",
    "TokenType",
    "Scanner",
    "classify_operator",
    "tokenize",
]
