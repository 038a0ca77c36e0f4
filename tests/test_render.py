"""
Token Rendering Tests
=====================

Tests for the TOKEN[...] text listing and the JSON export.
"""

import json

from mypython.lexer import Token, TokenKind, tokenize
from mypython.render import (
    KIND_LABELS,
    render_token,
    render_tokens,
    token_to_dict,
    tokens_to_json,
)


# =============================================================================
# Single Token Formatting
# =============================================================================

class TestRenderToken:
    """Tests for render_token()."""

    def test_formats(self):
        """Each kind renders with its label and payload style."""
        cases = [
            (Token(TokenKind.IDENTIFIER, "count"), 'TOKEN["symbol" , "count"]'),
            (Token(TokenKind.INTEGER, "0x1F"), 'TOKEN["integer" , 0x1F]'),
            (Token(TokenKind.STRING, 'a\\"b'), 'TOKEN["literal" , "a\\"b"]'),
            (Token(TokenKind.CHAR, "\\n"), 'TOKEN["constant literal" , "\\n"]'),
            (Token(TokenKind.PUNCTUATION, "->*"), 'TOKEN["punctuation" , "->*"]'),
            (Token(TokenKind.WHITESPACE), 'TOKEN["whitespace"]'),
            (Token(TokenKind.EOL), 'TOKEN["EOL"]'),
            (Token(TokenKind.INDENT, 4), 'TOKEN["INDENT" , 4]'),
            (Token(TokenKind.DEDENT, 0), 'TOKEN["DEDENT" , 0]'),
            (Token(TokenKind.EOF), 'TOKEN["EOF"]'),
            (Token(TokenKind.INVALID, "@"), 'TOKEN["INVALID" , "@"]'),
        ]
        for token, expected in cases:
            assert render_token(token) == expected

    def test_every_kind_has_label(self):
        """No TokenKind is missing from the label table."""
        assert set(KIND_LABELS) == set(TokenKind)


# =============================================================================
# Stream Formatting
# =============================================================================

class TestRenderTokens:
    """Tests for render_tokens()."""

    def test_one_line_per_token(self):
        """The listing has one line per token, EOF last."""
        tokens = tokenize("x = 1\n")
        listing = render_tokens(tokens)
        lines = listing.splitlines()
        assert len(lines) == len(tokens)
        assert lines[0] == 'TOKEN["symbol" , "x"]'
        assert lines[-1] == 'TOKEN["EOF"]'
        assert listing.endswith("\n")

    def test_empty(self):
        """An empty iterable renders as an empty string."""
        assert render_tokens([]) == ""

    def test_indented_program(self):
        """INDENT and DEDENT levels appear in the listing."""
        listing = render_tokens(tokenize("a\n    b\n  c"))
        assert 'TOKEN["INDENT" , 4]' in listing
        assert 'TOKEN["DEDENT" , 2]' in listing


# =============================================================================
# JSON Export
# =============================================================================

class TestJson:
    """Tests for the JSON export."""

    def test_token_to_dict(self):
        """Dictionary fields mirror the token."""
        token = tokenize("  foo")[1]
        assert token_to_dict(token) == {
            "kind": "IDENTIFIER",
            "value": "foo",
            "line": 1,
            "column": 3,
        }

    def test_json_round_trip(self):
        """The JSON text parses back to the token dictionaries."""
        tokens = tokenize("a\n  b")
        data = json.loads(tokens_to_json(tokens))
        assert [d["kind"] for d in data] == ["IDENTIFIER", "INDENT", "IDENTIFIER", "EOF"]
        assert data[1]["value"] == 2
        assert data[-1]["value"] is None
