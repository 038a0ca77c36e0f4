"""
MyPython Scanner
================

The dispatcher that drives the lexeme rules over a source text and
collects the resulting token stream.

Dispatch Order
--------------
The next raw character selects exactly one rule, checked in this order:

1. ``#``                      line comment, yields EOL
2. letter or ``_``            identifier
3. ``\\n``                     INDENT / DEDENT / EOL
4. other whitespace           WHITESPACE
5. ``"``                      string literal
6. ``'``                      character literal
7. digit                      integer
8. punctuation                operator or separator
9. anything else              INVALID (scanning continues)

Comments and newlines are checked before generic whitespace and
punctuation, since ``#`` is itself punctuation and ``\\n`` is whitespace.

Example Usage
-------------
>>> from mypython.lexer import Lexer
>>> for token in Lexer("x = 0x1F").tokenize():
...     print(token)
Token(IDENTIFIER, 'x', 1:1)
Token(WHITESPACE, 1:2)
Token(PUNCTUATION, '=', 1:3)
Token(WHITESPACE, 1:4)
Token(INTEGER, '0x1F', 1:5)
Token(EOF, 1:9)
"""

import logging
import string
from dataclasses import dataclass, field
from typing import Optional

from mypython.errors import InvalidCharacterError, LexerError
from mypython.lexer import rules
from mypython.lexer.cursor import Cursor
from mypython.lexer.indent import IndentTracker
from mypython.lexer.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass
class LexerOptions:
    """
    Scanner configuration options.

    Attributes:
        keep_whitespace: Emit WHITESPACE tokens. When False the blanks are
                         still consumed but dropped from the stream.
        strict: Raise InvalidCharacterError on the first unrecognized
                character instead of emitting an INVALID token.
    """
    keep_whitespace: bool = True
    strict: bool = False


class Lexer:
    """
    Tokenizes MyPython source code.

    Each call to tokenize() is an independent pass with a fresh cursor and
    indentation depth, so scanning the same text twice gives equal streams.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = lexer.tokenize()

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
        options: Scanner configuration
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        options: Optional[LexerOptions] = None,
    ):
        self.source = source
        self.filename = filename
        self.options = options or LexerOptions()

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            The token stream, ending with exactly one EOF token

        Raises:
            UnterminatedLiteralError: If a string or character literal is
                left open (no tokens are returned)
            InvalidCharacterError: In strict mode only
        """
        cursor = Cursor(self.source, self.filename)
        tracker = IndentTracker()
        tokens: list[Token] = []

        logger.debug("scanning %s (%d characters)", self.filename, len(self.source))

        while not cursor.at_end():
            token = self._dispatch(cursor, tracker)

            if token.kind == TokenKind.WHITESPACE and not self.options.keep_whitespace:
                continue

            if token.kind == TokenKind.INVALID:
                self._invalid(token, cursor)

            tokens.append(token)

        tokens.append(rules.make_eof(cursor))
        logger.debug("scanned %s: %d tokens", self.filename, len(tokens))
        return tokens

    def _dispatch(self, cursor: Cursor, tracker: IndentTracker) -> Token:
        """Pick the rule for the next character and run it."""
        line = cursor.line
        column = cursor.column
        char = cursor.peek()

        if char == "#":
            return rules.scan_comment(cursor, line, column)

        if char in rules.IDENT_START:
            return rules.scan_identifier(cursor, line, column)

        if char == "\n":
            return rules.scan_newline(cursor, tracker, line, column)

        if char in rules.WHITESPACE_START:
            return rules.scan_whitespace(cursor, line, column)

        if char == '"':
            return rules.scan_string(cursor, line, column)

        if char == "'":
            return rules.scan_char(cursor, line, column)

        if char in string.digits:
            return rules.scan_integer(cursor, line, column)

        if char in rules.PUNCTUATION_CHARS:
            return rules.scan_punctuation(cursor, line, column)

        return rules.scan_invalid(cursor, line, column)

    def _invalid(self, token: Token, cursor: Cursor) -> None:
        if self.options.strict:
            raise InvalidCharacterError(
                token.value,
                token.location,
                cursor.line_text(token.line),
            )
        logger.debug("%s: invalid character %r", token.location, token.value)


# =============================================================================
# Result-Returning Interface
# =============================================================================

@dataclass
class ScanResult:
    """
    Outcome of a scan that never raises for lexical errors.

    Attributes:
        filename: Source filename
        success: True if the whole source was tokenized
        tokens: The token stream (empty on failure)
        error: The fatal error that stopped the scan, if any
    """
    filename: str = ""
    success: bool = False
    tokens: list[Token] = field(default_factory=list)
    error: Optional[LexerError] = None

    @property
    def invalid_tokens(self) -> list[Token]:
        """INVALID tokens that were recovered during the scan."""
        return [t for t in self.tokens if t.kind == TokenKind.INVALID]

    @property
    def token_count(self) -> int:
        return len(self.tokens)


def scan(
    source: str,
    filename: str = "<input>",
    options: Optional[LexerOptions] = None,
) -> ScanResult:
    """
    Tokenize source and report success or failure as a ScanResult.

    Example:
        result = scan('print("hi")')
        if not result.success:
            print(result.error)
    """
    result = ScanResult(filename=filename)
    try:
        result.tokens = Lexer(source, filename, options).tokenize()
        result.success = True
    except LexerError as e:
        logger.debug("scan of %s failed: %s", filename, e.message)
        result.error = e
    return result


def tokenize(
    source: str,
    filename: str = "<input>",
    options: Optional[LexerOptions] = None,
) -> list[Token]:
    """Convenience wrapper around Lexer(...).tokenize()."""
    return Lexer(source, filename, options).tokenize()
