"""
Indentation Tracker
===================

Turns the whitespace that follows a newline into INDENT, DEDENT or EOL.

The tracker remembers a single depth, not a stack of enclosing blocks.
Each newline is compared against the depth of the previous line only, so
at most one INDENT or DEDENT is reported per newline:

    a           EOL        depth 0
        b       INDENT(4)  depth 4
            c   INDENT(8)  depth 8
      d         DEDENT(2)  depth 2

Every space-like character counts as one column of depth; tabs are not
expanded.
"""

import logging
from typing import Optional

from mypython.lexer.cursor import Cursor
from mypython.lexer.tokens import TokenKind

logger = logging.getLogger(__name__)


# Characters counted as indentation after a newline
INDENT_CHARS = " \t\v\f\r"


class IndentTracker:
    """
    Holds the current indentation depth for one scanning pass.

    Attributes:
        current_indent: Depth of the most recent line (starts at 0)
    """

    def __init__(self) -> None:
        self.current_indent = 0

    @staticmethod
    def measure(cursor: Cursor) -> int:
        """
        Consume the indentation run at the cursor and return its length.

        Stops before the next newline or at end of input.
        """
        spaces = 0
        while cursor.peek() and cursor.peek() in INDENT_CHARS:
            cursor.advance()
            spaces += 1
        return spaces

    def update(self, spaces: int) -> tuple[TokenKind, Optional[int]]:
        """
        Compare a measured depth against the current one.

        Returns:
            (INDENT, spaces) or (DEDENT, spaces) when the depth changed,
            (EOL, None) when it did not
        """
        if spaces > self.current_indent:
            logger.debug("indent %d -> %d", self.current_indent, spaces)
            self.current_indent = spaces
            return TokenKind.INDENT, spaces

        if spaces < self.current_indent:
            logger.debug("dedent %d -> %d", self.current_indent, spaces)
            self.current_indent = spaces
            return TokenKind.DEDENT, spaces

        return TokenKind.EOL, None
