"""
MyPython Error Hierarchy
========================

This module defines the exception hierarchy for the MyPython lexer.
All exceptions inherit from MyPythonError, allowing callers to catch all
package errors with a single except clause if desired.

Exception Hierarchy
-------------------
MyPythonError (base)
└── LexerError (scanner-related)
    ├── UnterminatedLiteralError - string or character literal left open
    └── InvalidCharacterError - unrecognized character (strict mode only)

Error Message Format
--------------------
Errors carry source location information so that messages point at the
offending text:

    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MyPythonError(Exception):
    """
    Base exception for all MyPython errors.

        try:
            tokens = tokenize(source)
        except MyPythonError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(MyPythonError):
    """
    Base exception for errors raised while scanning source text.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            hello.my:3:11: error: unterminated string literal
                print("hello
                      ^
            hint: add closing '"' to complete the string
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedLiteralError(LexerError):
    """
    String or character literal not closed before end of line or input.

    This error is fatal: the scan stops and no token stream is produced.
    The ``literal_kind`` attribute names the category left open
    ("string" or "character").

    Example:
        name = "hello    # Missing closing quote
    """

    QUOTES = {"string": '"', "character": "'"}

    def __init__(
        self,
        literal_kind: str,
        reason: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.literal_kind = literal_kind
        self.reason = reason
        quote = self.QUOTES.get(literal_kind, '"')
        super().__init__(
            f"unterminated {literal_kind} literal ({reason} before closing quote)",
            location=location,
            hint=f"add closing '{quote}' to complete the {literal_kind}",
            source_line=source_line,
        )


class InvalidCharacterError(LexerError):
    """
    Invalid character in source code.

    The scanner normally records such characters as INVALID tokens and
    keeps going; this error is only raised when strict scanning is enabled.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character {char!r} (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )
