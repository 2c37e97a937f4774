"""List mark classifier mixin."""

from __future__ import annotations

from mdlex.tokens import Token, TokenKind

# Ordered marks allow up to three digits (1. to 999.)
MAX_ORDERED_DIGITS = 3


class ListClassifierMixin:
    """Mixin providing list mark classification.

    Required Host Methods (from other mixins):
        - _try_classify_dividing(word) -> Token | None

    """

    def _try_classify_unordered(self, word: str) -> Token | None:
        """Try to classify the first word as an unordered list mark.

        ``+`` is always a list mark. A lone ``*`` or ``-`` is a list mark
        unless the whole line is a dividing line (``* * *``), in which case
        the dividing mark wins.
        """
        if word == "+":
            return Token(TokenKind.UNORDERED_MARK, word)
        if word in ("*", "-"):
            dividing = self._try_classify_dividing(word)
            if dividing is not None:
                return dividing
            return Token(TokenKind.UNORDERED_MARK, word)
        return None

    def _try_classify_ordered(self, word: str) -> Token | None:
        """Try to classify the first word as an ordered list mark.

        Ordered marks are one to three ASCII digits without a leading zero,
        followed by a dot: ``1.``, ``12.``, ``999.``.
        """
        number, dot = word[:-1], word[-1:]
        if dot != "." or not 1 <= len(number) <= MAX_ORDERED_DIGITS:
            return None
        if not (number.isascii() and number.isdigit()) or number[0] == "0":
            return None
        return Token(TokenKind.ORDERED_MARK, word)
