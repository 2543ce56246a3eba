"""
Sol - Lexical Toolkit for the sol Language
==========================================

sol is a small C-like language with declarations (`decl`/`let`),
functions (`fun`/`fn`), `if`/`else`, `while`, `for` and `return`,
integer arithmetic and comparisons.

Main Components
---------------
- **lexer**: the token model and the Scanner
- **errors**: the SolError hierarchy and SourceLocation
- **cli**: the `soltok` command-line tool

Quick Start
-----------
    >>> from sol import Scanner
    >>> for token in Scanner("decl a = 42;"):
    ...     print(token)
    decl
    a
    =
    42
    ;

Or from the shell:
    $ soltok main.sol
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from sol.errors import (
    SolError,
    SolSyntaxError,
    SourceLocation,
    UnrecognizedLexemeError,
)
from sol.lexer import Scanner, Token, TokenType, tokenize

__all__ = [
    "__version__",
    # Lexer
    "Scanner",
    "Token",
    "TokenType",
    "tokenize",
    # Exception hierarchy
    "SolError",
    "SolSyntaxError",
    "SourceLocation",
    "UnrecognizedLexemeError",
]
