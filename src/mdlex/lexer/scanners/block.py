"""Block mark scanner mixin."""

from __future__ import annotations

from mdlex.config import LexConfig
from mdlex.lexer.classifiers.fence import FENCE
from mdlex.lexer.modes import LineState
from mdlex.tokens import Token, TokenKind


class BlockScannerMixin:
    """Mixin providing the line-leading block mark scan.

    Scans the start of the line in three phases:
    1. BEGIN: skip leading whitespace (a whitespace-only line is blank)
    2. MARK: read the first word and classify it
    3. hand off to INLINE at the right offset, or stop at FINISHED

    """

    # These will be set by the Lexer class
    _line: str
    _state: LineState
    _tokens: list[Token]
    _config: LexConfig

    # Classifier methods (provided by classifier mixins)
    def _try_classify_title(self, word: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_ordered(self, word: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_quote(self, word: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_fence(self, word: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_unordered(self, word: str) -> Token | None:
        raise NotImplementedError

    def _try_classify_dividing(self, word: str) -> Token | None:
        raise NotImplementedError

    def _classify_mark(self, word: str) -> Token | None:
        """Classify the first word of the line as a block mark.

        Returns:
            The mark token, or None if the word is ordinary text.
        """
        return (
            self._try_classify_title(word)
            or self._try_classify_ordered(word)
            or self._try_classify_quote(word)
            or self._try_classify_fence(word)
            or self._try_classify_unordered(word)
            or self._try_classify_dividing(word)
        )

    def _scan_block(self) -> int | None:
        """Emit the leading block mark, if any.

        Appends BLANK_LINE, WHITESPACE and block mark tokens to
        ``self._tokens``.

        Returns:
            Offset in the line where inline tokenizing starts, or None when
            the line is already complete (blank or dividing line).
        """
        line = self._line
        line_len = len(line)
        pos = 0

        self._state = LineState.BEGIN
        while pos < line_len and line[pos] != "\n" and line[pos].isspace():
            pos += 1

        if pos == line_len or line[pos] == "\n":
            self._tokens.append(Token(TokenKind.BLANK_LINE, line[:pos]))
            self._state = LineState.FINISHED
            return None

        # First word runs to the next whitespace or the end of input
        self._state = LineState.MARK
        word_start = pos
        while pos < line_len and not line[pos].isspace():
            pos += 1

        mark = self._classify_mark(line[word_start:pos])
        if mark is not None and mark.kind is TokenKind.DIVIDING_MARK:
            # The mark already holds the whole line, indentation included
            self._tokens.append(mark)
            self._state = LineState.FINISHED
            return None

        if word_start > 0 and self._config.emit_whitespace:
            self._tokens.append(Token(TokenKind.WHITESPACE, line[:word_start]))

        self._state = LineState.INLINE
        if mark is None:
            return word_start

        self._tokens.append(mark)
        if mark.kind is TokenKind.CODE_BLOCK_MARK:
            return word_start + len(FENCE)
        # Skip the single separator after the mark
        return pos + 1
