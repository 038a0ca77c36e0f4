"""
Token Model
===========

The closed set of token kinds produced by the scanner and the immutable
Token record that carries one lexeme.

Token Kinds
-----------
| Kind        | Value                              |
|-------------|------------------------------------|
| IDENTIFIER  | name text                          |
| INTEGER     | digit text (``42``, ``0x1F``)      |
| STRING      | raw text between ``"`` quotes      |
| CHAR        | raw text between ``'`` quotes      |
| PUNCTUATION | operator/separator text            |
| WHITESPACE  | None                               |
| EOL         | None                               |
| INDENT      | new indentation depth (int)        |
| DEDENT      | new indentation depth (int)        |
| EOF         | None                               |
| INVALID     | the offending character            |

Literal values keep escape sequences exactly as written, so the string
literal ``"a\\"b"`` has the value ``a\\"b`` (four characters).
"""

from dataclasses import dataclass
from enum import Enum, auto

from mypython.errors import SourceLocation


class TokenKind(Enum):
    """Lexical categories recognized by the scanner."""

    # === Names and Literals ===
    IDENTIFIER = auto()     # foo, _bar, x1
    INTEGER = auto()        # 42, 0x1F
    STRING = auto()         # "..."
    CHAR = auto()           # '...'
    PUNCTUATION = auto()    # + -> <<= ...

    # === Layout ===
    WHITESPACE = auto()     # run of blanks inside a line
    EOL = auto()            # newline without a depth change
    INDENT = auto()         # newline into a deeper line
    DEDENT = auto()         # newline into a shallower line

    # === Structural ===
    EOF = auto()            # end of input, always last
    INVALID = auto()        # unrecognized character


# Kinds whose value is the lexeme text
TEXT_KINDS = frozenset({
    TokenKind.IDENTIFIER,
    TokenKind.INTEGER,
    TokenKind.STRING,
    TokenKind.CHAR,
    TokenKind.PUNCTUATION,
    TokenKind.INVALID,
})

# Kinds whose value is an indentation depth
LEVEL_KINDS = frozenset({TokenKind.INDENT, TokenKind.DEDENT})


@dataclass(frozen=True)
class Token:
    """
    A single token from MyPython source.

    Attributes:
        kind: The TokenKind classification
        value: Lexeme text, indentation depth, or None (see TokenKind)
        line: Line number of the token's first character (1-indexed)
        column: Column number of the token's first character (1-indexed)
        filename: Name of the source file
    """
    kind: TokenKind
    value: str | int | None = None
    line: int = 0
    column: int = 0
    filename: str = "<input>"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is not None:
            if isinstance(self.value, int):
                return f"Token({self.kind.name}, {self.value}, {self.line}:{self.column})"
            return f"Token({self.kind.name}, {self.value!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def text(self) -> str | None:
        """Lexeme text for text-carrying kinds, otherwise None."""
        if self.kind in TEXT_KINDS:
            return self.value
        return None

    @property
    def level(self) -> int | None:
        """Indentation depth for INDENT/DEDENT, otherwise None."""
        if self.kind in LEVEL_KINDS:
            return self.value
        return None
