"""Line classification from a lexed token list.

A block assembler decides what kind of block a line belongs to by looking
at its first token. This module implements that minimal contract so
consumers do not have to repeat the mapping.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto

from mdlex.tokens import BLOCK_MARKS, Token, TokenKind


class LineKind(Enum):
    """Kind of a line, derived from its leading token."""

    BLANK = auto()
    TITLE = auto()
    LIST_ITEM = auto()
    QUOTE = auto()
    PLAIN = auto()
    UNKNOWN = auto()


_KIND_BY_MARK: dict[TokenKind, LineKind] = {
    TokenKind.BLANK_LINE: LineKind.BLANK,
    TokenKind.TITLE_MARK: LineKind.TITLE,
    TokenKind.UNORDERED_MARK: LineKind.LIST_ITEM,
    TokenKind.ORDERED_MARK: LineKind.LIST_ITEM,
    TokenKind.QUOTE_MARK: LineKind.QUOTE,
}


def classify_line(tokens: Sequence[Token]) -> LineKind:
    """Classify a line by its first non-indentation token.

    Example:
        >>> from mdlex import lex_line
        >>> classify_line(lex_line("# Title\\n"))
        <LineKind.TITLE: 2>
        >>> classify_line(lex_line("just text\\n"))
        <LineKind.PLAIN: 5>
    """
    for token in tokens:
        if token.kind is TokenKind.WHITESPACE:
            continue
        if token.kind in _KIND_BY_MARK:
            return _KIND_BY_MARK[token.kind]
        if token.kind in BLOCK_MARKS:
            # Code fences and dividing lines are assembled elsewhere
            return LineKind.UNKNOWN
        return LineKind.PLAIN
    return LineKind.UNKNOWN


__all__ = ["LineKind", "classify_line"]
