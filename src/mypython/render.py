"""
Token Rendering
===============

Formats a finished token stream for display. Nothing here feeds back into
scanning.

Text Format
-----------
One line per token:

    TOKEN["symbol" , "count"]
    TOKEN["punctuation" , "+="]
    TOKEN["integer" , 0x1F]
    TOKEN["literal" , "a\\"b"]
    TOKEN["constant literal" , "\\n"]
    TOKEN["whitespace"]
    TOKEN["INDENT" , 4]
    TOKEN["DEDENT" , 0]
    TOKEN["EOL"]
    TOKEN["INVALID" , "@"]
    TOKEN["EOF"]

Literal text is printed as scanned, so escape sequences appear exactly as
they were written in the source.
"""

import json
from typing import Iterable

from mypython.lexer.tokens import Token, TokenKind


# Label printed for each token kind
KIND_LABELS: dict[TokenKind, str] = {
    TokenKind.IDENTIFIER: "symbol",
    TokenKind.INTEGER: "integer",
    TokenKind.STRING: "literal",
    TokenKind.CHAR: "constant literal",
    TokenKind.PUNCTUATION: "punctuation",
    TokenKind.WHITESPACE: "whitespace",
    TokenKind.EOL: "EOL",
    TokenKind.INDENT: "INDENT",
    TokenKind.DEDENT: "DEDENT",
    TokenKind.EOF: "EOF",
    TokenKind.INVALID: "INVALID",
}

# Kinds whose payload is printed without quotes
_UNQUOTED = (TokenKind.INTEGER, TokenKind.INDENT, TokenKind.DEDENT)


def render_token(token: Token) -> str:
    """Format one token as a TOKEN[...] line (without newline)."""
    label = KIND_LABELS[token.kind]

    if token.value is None:
        return f'TOKEN["{label}"]'

    if token.kind in _UNQUOTED:
        return f'TOKEN["{label}" , {token.value}]'

    return f'TOKEN["{label}" , "{token.value}"]'


def render_tokens(tokens: Iterable[Token]) -> str:
    """Format a token stream, one token per line, with a trailing newline."""
    lines = [render_token(token) for token in tokens]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def token_to_dict(token: Token) -> dict:
    """
    Convert a token to a JSON-serializable dictionary.

    Returns:
        Dictionary with kind, value, line and column
    """
    return {
        "kind": token.kind.name,
        "value": token.value,
        "line": token.line,
        "column": token.column,
    }


def tokens_to_json(tokens: Iterable[Token], indent: int | None = 2) -> str:
    """Serialize a token stream as a JSON array."""
    return json.dumps([token_to_dict(t) for t in tokens], indent=indent)
