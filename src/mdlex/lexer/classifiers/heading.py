"""Title mark classifier mixin."""

from mdlex.tokens import Token, TokenKind

# Title levels 1-4
_TITLE_MARKS = frozenset({"#", "##", "###", "####"})


class HeadingClassifierMixin:
    """Mixin providing title mark classification."""

    def _try_classify_title(self, word: str) -> Token | None:
        """Try to classify the first word as a title mark.

        Only a bare run of one to four ``#`` counts; ``#title`` is text.

        Args:
            word: First whitespace-delimited word of the line

        Returns:
            TITLE_MARK token, or None.
        """
        if word in _TITLE_MARKS:
            return Token(TokenKind.TITLE_MARK, word)
        return None
