"""
Source Cursor
=============

Buffered single-character access over the source text. The cursor is the
only piece of the lexer that knows about the read position; every lexeme
rule reads through it, so the amount consumed by a rule is simply how far
the cursor moved.

End of input is reported as the empty string rather than an exception:
running out of characters is a normal state, not a failure.
"""

from mypython.errors import SourceLocation


# Returned by peek() and advance() once the source is exhausted
END = ""


class Cursor:
    """
    Read/peek cursor over a source string with line and column tracking.

    Attributes:
        source: The text being scanned
        filename: Name used in locations
        line: Current line number (1-indexed)
        column: Current column number (1-indexed)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self.line = 1
        self.column = 1

        self._pos = 0

    @property
    def position(self) -> int:
        """Offset of the next unread character."""
        return self._pos

    def at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self._pos >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character at current position + offset without advancing.

        Returns END if past the end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return END
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return the current character, or END when exhausted."""
        if self.at_end():
            return END

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def match(self, expected: str) -> bool:
        """
        Consume the next character if it equals expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        if self.peek() == expected:
            self.advance()
            return True
        return False

    def location(self) -> SourceLocation:
        """Location of the next unread character."""
        return SourceLocation(self.filename, self.line, self.column)

    def line_text(self, line: int) -> str:
        """Text of an arbitrary (1-indexed) line, or "" if out of range."""
        lines = self.source.split("\n")
        if 1 <= line <= len(lines):
            return lines[line - 1]
        return ""
