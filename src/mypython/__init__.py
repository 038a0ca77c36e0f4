"""
MyPython - Lexical Front End for an Indentation-Structured C-like Language
=========================================================================

MyPython source looks like C expressions and operators laid out in
Python-style blocks: a deeper line opens a block, a shallower line closes
it, and ``#`` starts a line comment. This package turns such source into a
flat token stream for a later parsing stage.

Main Components
---------------
- **lexer**: Cursor, lexeme rules, indentation tracker and dispatcher
- **render**: Text and JSON formatting of token streams
- **cli**: The ``mplex`` command-line tool

Quick Start
-----------
    >>> from mypython import tokenize
    >>> tokens = tokenize("x += 0x1F")
    >>> [t.value for t in tokens]
    ['x', None, '+=', None, '0x1F', None]

Or from the terminal:
    $ mplex program.my
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from mypython.errors import (
    MyPythonError,
    SourceLocation,
    LexerError,
    UnterminatedLiteralError,
    InvalidCharacterError,
)
from mypython.lexer import (
    Lexer,
    LexerOptions,
    ScanResult,
    Token,
    TokenKind,
    scan,
    tokenize,
)
from mypython.render import render_token, render_tokens, tokens_to_json

__all__ = [
    "__version__",
    # Errors
    "MyPythonError",
    "SourceLocation",
    "LexerError",
    "UnterminatedLiteralError",
    "InvalidCharacterError",
    # Lexer
    "Lexer",
    "LexerOptions",
    "ScanResult",
    "Token",
    "TokenKind",
    "scan",
    "tokenize",
    # Rendering
    "render_token",
    "render_tokens",
    "tokens_to_json",
]
