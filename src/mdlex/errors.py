"""Exception classes for mdlex.

Malformed Markdown never raises: the lexer degrades unknown or broken
constructs to text. The exceptions below signal misuse by the caller.
"""

from __future__ import annotations


class MdlexError(Exception):
    """Base exception for all mdlex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(MdlexError):
    """Input passed to the lexer is not a single line.

    Raised when a newline appears before the last character of the input
    and strict line checking is enabled.
    """

    def __init__(self, message: str, line: str, offset: int) -> None:
        """Initialize lex error with the offending input.

        Args:
            message: Error description
            line: The input that was passed to the lexer
            offset: Character offset of the embedded newline (0-indexed)
        """
        self.message = message
        self.line = line
        self.offset = offset
        super().__init__(f"offset {offset}: {message}")


class LinkTokenError(MdlexError, TypeError):
    """Link attributes requested from a token outside the link family.

    This is a programming error in the caller, not a malformed-input case.
    """

    def __init__(self, kind_name: str) -> None:
        """Initialize link token error.

        Args:
            kind_name: Name of the token kind that was accessed
        """
        self.kind_name = kind_name
        super().__init__(f"Token of kind {kind_name} is not a generic link")
