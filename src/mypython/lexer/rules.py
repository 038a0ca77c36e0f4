"""
Lexeme Rules
============

One consumption function per token category. Every rule is entered with
the cursor positioned on the lead character (not yet consumed) and
returns exactly one Token; how much it consumed is visible only through
the cursor position.

Punctuation
-----------
Multi-character operators are matched longest-first within each family:

    !   !=
    %   %=
    &   &&  &=
    *   *=
    +   ++  +=
    -   --  -=  ->  ->*
    .   ..  ...
    /   /=
    :   ::
    <   <=  <<  <<=
    =   ==
    >   >=  >>  >>=
    |   ||  |=

Any other punctuation character is a token on its own. ``..`` is accepted
here; rejecting it is left to the parser.

Literals
--------
String and character literals keep their escapes verbatim: a backslash and
the character after it are both copied into the value, so ``"\\n"`` has
the two-character value ``\\n``. A newline or end of input inside a literal
raises UnterminatedLiteralError.
"""

import string
from typing import Optional

from mypython.errors import SourceLocation, UnterminatedLiteralError
from mypython.lexer.cursor import Cursor
from mypython.lexer.indent import IndentTracker
from mypython.lexer.tokens import Token, TokenKind


# Characters that can start an identifier
IDENT_START = string.ascii_letters + "_"

# Characters that can continue an identifier
IDENT_CHARS = string.ascii_letters + string.digits + "_"

# Characters that start a whitespace run (newline is dispatched separately)
WHITESPACE_START = " \t\v\f\r"

# Characters that extend a whitespace run (form feed only starts one)
WHITESPACE_RUN = " \t\v\r"

PUNCTUATION_CHARS = string.punctuation

# Second characters accepted after a lead character, for families that
# never grow past two characters
_PAIR_EXTENSIONS = {
    "!": "=",
    "%": "=",
    "&": "&=",
    "*": "=",
    "+": "+=",
    "/": "=",
    ":": ":",
    "=": "=",
    "|": "|=",
}


def _make_token(
    cursor: Cursor,
    kind: TokenKind,
    value: str | int | None,
    line: int,
    column: int,
) -> Token:
    return Token(kind=kind, value=value, line=line, column=column, filename=cursor.filename)


# =============================================================================
# Names and Numbers
# =============================================================================

def scan_identifier(cursor: Cursor, line: int, column: int) -> Token:
    """
    Scan an identifier.

    Identifiers start with a letter or underscore and continue with
    letters, digits, and underscores.
    """
    chars = [cursor.advance()]
    while cursor.peek() and cursor.peek() in IDENT_CHARS:
        chars.append(cursor.advance())
    return _make_token(cursor, TokenKind.IDENTIFIER, "".join(chars), line, column)


def scan_integer(cursor: Cursor, line: int, column: int) -> Token:
    """
    Scan an integer literal.

    Handles:
    - Decimal: 123
    - Hexadecimal: 0x7F or 0X7F (``0x`` with no digits is kept as-is)
    """
    chars = [cursor.advance()]

    if chars[0] == "0" and cursor.peek() in ("x", "X"):
        chars.append(cursor.advance())
        while cursor.peek() and cursor.peek() in string.hexdigits:
            chars.append(cursor.advance())
        return _make_token(cursor, TokenKind.INTEGER, "".join(chars), line, column)

    while cursor.peek() and cursor.peek() in string.digits:
        chars.append(cursor.advance())
    return _make_token(cursor, TokenKind.INTEGER, "".join(chars), line, column)


# =============================================================================
# Literals
# =============================================================================

def _scan_quoted(
    cursor: Cursor,
    quote: str,
    literal_kind: str,
    line: int,
    column: int,
) -> str:
    """
    Collect the raw body of a quoted literal and consume the closing quote.

    Raises:
        UnterminatedLiteralError: On newline or end of input before the quote
    """
    cursor.advance()  # consume opening quote

    chars = []
    while True:
        char = cursor.peek()

        if char == quote:
            cursor.advance()  # consume closing quote
            return "".join(chars)

        if not char or char == "\n":
            raise _unterminated(cursor, literal_kind, char, line, column)

        if char == "\\":
            chars.append(cursor.advance())
            escaped = cursor.peek()
            if not escaped or escaped == "\n":
                raise _unterminated(cursor, literal_kind, escaped, line, column)
            chars.append(cursor.advance())
            continue

        chars.append(cursor.advance())


def _unterminated(
    cursor: Cursor,
    literal_kind: str,
    char: str,
    line: int,
    column: int,
) -> UnterminatedLiteralError:
    reason = "end of line" if char == "\n" else "end of input"
    return UnterminatedLiteralError(
        literal_kind,
        reason,
        location=SourceLocation(cursor.filename, line, column),
        source_line=cursor.line_text(line),
    )


def scan_string(cursor: Cursor, line: int, column: int) -> Token:
    """Scan a double-quoted string literal."""
    text = _scan_quoted(cursor, '"', "string", line, column)
    return _make_token(cursor, TokenKind.STRING, text, line, column)


def scan_char(cursor: Cursor, line: int, column: int) -> Token:
    """
    Scan a single-quoted character literal.

    The body is not limited to one character; ``'ab'`` is scanned as the
    value ``ab`` and left for later stages to reject.
    """
    text = _scan_quoted(cursor, "'", "character", line, column)
    return _make_token(cursor, TokenKind.CHAR, text, line, column)


# =============================================================================
# Punctuation
# =============================================================================

def scan_punctuation(cursor: Cursor, line: int, column: int) -> Token:
    """Scan an operator or separator using maximal munch."""
    char = cursor.advance()
    lexeme = char

    if char in _PAIR_EXTENSIONS:
        nxt = cursor.peek()
        if nxt and nxt in _PAIR_EXTENSIONS[char]:
            lexeme += cursor.advance()

    elif char == "-":
        # Either -- / -= or -> / ->*, never both
        if cursor.peek() in ("-", "="):
            lexeme += cursor.advance()
        elif cursor.match(">"):
            lexeme += ">"
            if cursor.match("*"):
                lexeme += "*"

    elif char == ".":
        if cursor.match("."):
            lexeme += "."
            if cursor.match("."):
                lexeme += "."

    elif char in "<>":
        if cursor.match("="):
            lexeme += "="
        elif cursor.match(char):
            lexeme += char
            if cursor.match("="):
                lexeme += "="

    return _make_token(cursor, TokenKind.PUNCTUATION, lexeme, line, column)


# =============================================================================
# Layout
# =============================================================================

def scan_whitespace(cursor: Cursor, line: int, column: int) -> Token:
    """Collapse a run of blanks into a single WHITESPACE token."""
    cursor.advance()
    while cursor.peek() and cursor.peek() in WHITESPACE_RUN:
        cursor.advance()
    return _make_token(cursor, TokenKind.WHITESPACE, None, line, column)


def scan_newline(
    cursor: Cursor,
    tracker: IndentTracker,
    line: int,
    column: int,
) -> Token:
    """Consume a newline and the next line's indentation."""
    cursor.advance()  # consume \n
    spaces = tracker.measure(cursor)
    kind, level = tracker.update(spaces)
    return _make_token(cursor, kind, level, line, column)


def scan_comment(cursor: Cursor, line: int, column: int) -> Token:
    """
    Discard a ``#`` comment through the end of its line.

    The terminating newline belongs to the comment; the single EOL token
    returned stands in for both.
    """
    while True:
        char = cursor.advance()
        if not char or char == "\n":
            break
    return _make_token(cursor, TokenKind.EOL, None, line, column)


def scan_invalid(cursor: Cursor, line: int, column: int) -> Token:
    """Wrap one unrecognized character in an INVALID token."""
    return _make_token(cursor, TokenKind.INVALID, cursor.advance(), line, column)


def make_eof(cursor: Cursor, line: Optional[int] = None, column: Optional[int] = None) -> Token:
    """Create the terminating EOF token at the cursor position."""
    return _make_token(
        cursor,
        TokenKind.EOF,
        None,
        line or cursor.line,
        column or cursor.column,
    )
