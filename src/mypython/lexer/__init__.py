"""
MyPython Lexer
==============

Character-level scanner for MyPython, a C-like language that uses
Python-style significant indentation instead of braces.

Pipeline
--------
    Source → Cursor → Dispatcher → Lexeme Rules → Token Stream
                                       ↑
                              Indentation Tracker (on newline)

Usage
-----
>>> from mypython.lexer import tokenize
>>> [t.kind.name for t in tokenize("if x:\\n    y")]
['IDENTIFIER', 'WHITESPACE', 'IDENTIFIER', 'PUNCTUATION', 'INDENT', 'IDENTIFIER', 'EOF']
"""

from mypython.lexer.cursor import Cursor, END
from mypython.lexer.indent import IndentTracker
from mypython.lexer.scanner import Lexer, LexerOptions, ScanResult, scan, tokenize
from mypython.lexer.tokens import Token, TokenKind

__all__ = [
    "Cursor",
    "END",
    "IndentTracker",
    "Lexer",
    "LexerOptions",
    "ScanResult",
    "scan",
    "tokenize",
    "Token",
    "TokenKind",
]
