"""Code block fence classifier mixin."""

from mdlex.tokens import Token, TokenKind

FENCE = "```"


class FenceClassifierMixin:
    """Mixin providing code block fence classification."""

    def _try_classify_fence(self, word: str) -> Token | None:
        """Try to classify the first word as a code block fence.

        Any word starting with three backticks is a fence. The token value
        is always the bare fence; whatever follows it (a language tag, more
        backticks) is left to the inline automaton.

        Args:
            word: First whitespace-delimited word of the line

        Returns:
            CODE_BLOCK_MARK token, or None.
        """
        if word.startswith(FENCE):
            return Token(TokenKind.CODE_BLOCK_MARK, FENCE)
        return None
