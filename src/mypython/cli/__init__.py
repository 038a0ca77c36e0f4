"""
MyPython Command-Line Interface
===============================

- **mplex**: tokenize a source file and print the token stream

Implemented as a Click application with help and error reporting.
"""

__all__ = ["mplex"]
