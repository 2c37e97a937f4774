"""Single-line lexer with O(n) guaranteed performance.

Drives the three stages for one line of Markdown:
1. Block mark classification (first word of the line)
2. Inline automaton (one forward pass over the rest of the line)
3. Tidy pass (resolve emphasis and code delimiters)

No regex in the hot path and no backtracking over the line.

Thread Safety:
Lexer instances are single-use. Create one per line.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from mdlex.config import LexConfig, get_lex_config
from mdlex.errors import LexError
from mdlex.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
)
from mdlex.lexer.emphasis import EmphasisResolverMixin
from mdlex.lexer.links import LinkDetailMixin
from mdlex.lexer.modes import LineState
from mdlex.lexer.scanners import BlockScannerMixin, InlineScannerMixin
from mdlex.tokens import Token


class Lexer(
    # Classifiers (pure logic, no position mutation)
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    FenceClassifierMixin,
    ThematicClassifierMixin,
    # Token construction and resolution
    LinkDetailMixin,
    EmphasisResolverMixin,
    # Scanners
    BlockScannerMixin,
    InlineScannerMixin,
):
    """Lexer for one line of Markdown.

    Usage:
            >>> lexer = Lexer("# Hello **World**\\n")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(TITLE_MARK, '#')
        Token(TEXT, 'Hello ')
        Token(BOLD_MARK, '**')
        Token(TEXT, 'World')
        Token(BOLD_MARK, '**')

    Thread Safety:
        Lexer instances are single-use. Create one per line.

    """

    __slots__ = (
        "_line",
        "_config",
        "_state",
        "_tokens",
    )

    def __init__(self, line: str, *, config: LexConfig | None = None) -> None:
        """Initialize lexer with one line of text.

        Args:
            line: Line text, optionally ending in a newline
            config: Lexer configuration (defaults to the active context config)

        Raises:
            LexError: If the line holds a newline before its last character
                and ``config.strict_lines`` is set.
        """
        self._config = config if config is not None else get_lex_config()

        newline = line.find("\n")
        if newline != -1 and newline != len(line) - 1:
            if self._config.strict_lines:
                raise LexError("input must be a single line", line, newline)
            line = line[: newline + 1]

        self._line = line
        self._state = LineState.BEGIN
        self._tokens: list[Token] = []

    @property
    def state(self) -> LineState:
        """Current block-classification phase."""
        return self._state

    def tokenize(self) -> list[Token]:
        """Tokenize the line.

        Returns:
            The final token list: an optional WHITESPACE token, an optional
            block mark, then resolved inline tokens.

        Complexity: O(n) where n = len(line)
        """
        if self._state is not LineState.BEGIN:
            return list(self._tokens)

        inline_start = self._scan_block()
        if inline_start is not None:
            inline = self._scan_inline(self._line[inline_start:])
            self._tidy(inline)
            self._tokens.extend(token for token in inline if token.value)
            self._state = LineState.FINISHED

        return list(self._tokens)
