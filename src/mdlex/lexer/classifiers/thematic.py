"""Dividing line classifier mixin."""

from __future__ import annotations

from mdlex.text import DIVIDING_CHARS, is_dividing_line, strip_newline
from mdlex.tokens import Token, TokenKind


class ThematicClassifierMixin:
    """Mixin providing dividing line classification."""

    _line: str

    def _try_classify_dividing(self, word: str) -> Token | None:
        """Try to classify the whole line as a dividing line.

        Dividing lines are 3+ of the same character (-, *, _) with optional
        whitespace between them. The first word only decides whether the
        test runs; the test itself looks at the entire line.

        Args:
            word: First whitespace-delimited word of the line

        Returns:
            DIVIDING_MARK token holding the line without its newline, or None.
        """
        if not word or word[0] not in DIVIDING_CHARS:
            return None
        if not is_dividing_line(self._line):
            return None
        return Token(TokenKind.DIVIDING_MARK, strip_newline(self._line))
