"""Quote mark classifier mixin."""

from mdlex.tokens import Token, TokenKind


class QuoteClassifierMixin:
    """Mixin providing quote mark classification."""

    def _try_classify_quote(self, word: str) -> Token | None:
        """Classify a lone ``>`` as a quote mark (``>text`` is plain text)."""
        if word == ">":
            return Token(TokenKind.QUOTE_MARK, word)
        return None
