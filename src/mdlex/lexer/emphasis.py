"""Emphasis and code-span resolution (the tidy pass).

Rewrites the raw STAR / UNDERLINE / BACKTICK tokens produced by the inline
automaton into ITALIC / BOLD / ITALIC_BOLD / CODE marks, or demotes them
to TEXT when they find no partner.

Two steps:
1. Run-length normalization: a run longer than the previous run of the
   same kind is split so its prefix can pair with it (``**`` ... ``***``
   becomes ``**`` ... ``**`` + ``*``).
2. Stack matching: each delimiter pairs with the nearest pending delimiter
   of identical value; pending delimiters in between become text.

Tokens are immutable, so the pass works on indices into the token list
and replaces tokens in place.

"""

from __future__ import annotations

from mdlex.tokens import DELIMITER_KINDS, Token, TokenKind
from mdlex.utils.logger import get_logger

logger = get_logger(__name__)

# Runs this long never open a span
MAX_DELIMITER_RUN = 3

_EMPHASIS_BY_LENGTH: dict[int, TokenKind] = {
    1: TokenKind.ITALIC_MARK,
    2: TokenKind.BOLD_MARK,
    3: TokenKind.ITALIC_BOLD_MARK,
}


def _resolved_kind(token: Token) -> TokenKind:
    """Semantic kind for a matched pair of delimiters."""
    if token.kind is TokenKind.BACKTICK:
        return TokenKind.CODE_MARK
    return _EMPHASIS_BY_LENGTH[len(token.value)]


class EmphasisResolverMixin:
    """Mixin for the delimiter tidy pass.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _tidy(self, tokens: list[Token]) -> None:
        """Resolve raw delimiters in place."""
        self._normalize_runs(tokens, TokenKind.STAR)
        self._normalize_runs(tokens, TokenKind.UNDERLINE)
        self._match_delimiters(tokens)

    def _normalize_runs(self, tokens: list[Token], kind: TokenKind) -> None:
        """Split runs of ``kind`` that are longer than the preceding run.

        Split points are collected first and applied from the end of the
        list so earlier insertions never shift a pending index.
        """
        splits: list[tuple[int, int]] = []
        prev = 0

        for idx, token in enumerate(tokens):
            if token.kind is not kind:
                continue
            length = len(token.value)
            if prev == 0 or length < prev:
                prev = length
                continue
            rest = length - prev
            if rest > 0:
                splits.append((idx, prev))
                prev = rest
            else:
                prev = 0

        for idx, at in reversed(splits):
            token = tokens[idx]
            logger.debug("Splitting %r run at %d", token.value, at)
            tokens[idx : idx + 1] = [
                Token(kind, token.value[:at]),
                Token(kind, token.value[at:]),
            ]

    def _match_delimiters(self, tokens: list[Token]) -> None:
        """Pair delimiters of identical value using a stack of indices."""
        stack: list[int] = []

        for idx, token in enumerate(tokens):
            if token.kind not in DELIMITER_KINDS:
                continue

            opener_pos = -1
            for pos in range(len(stack) - 1, -1, -1):
                pending = tokens[stack[pos]]
                if pending.kind is token.kind and pending.value == token.value:
                    opener_pos = pos
                    break

            if opener_pos != -1:
                opener_idx = stack[opener_pos]
                kind = _resolved_kind(token)
                tokens[opener_idx] = tokens[opener_idx].with_kind(kind)
                tokens[idx] = token.with_kind(kind)
                for skipped in stack[opener_pos + 1 :]:
                    tokens[skipped] = tokens[skipped].with_kind(TokenKind.TEXT)
                del stack[opener_pos:]
            elif len(token.value) <= MAX_DELIMITER_RUN:
                stack.append(idx)
            else:
                tokens[idx] = token.with_kind(TokenKind.TEXT)

        for idx in stack:
            tokens[idx] = tokens[idx].with_kind(TokenKind.TEXT)
