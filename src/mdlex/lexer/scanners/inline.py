"""Inline automaton mixin.

Walks the inline part of a line one character at a time and produces the
flat, unresolved token list: text spans, raw delimiter runs, images,
links, reference links, reference definitions and autolinks.

The walk never backtracks. Bracket constructs remember the offsets of
their opening characters in the state itself; when a construct is
abandoned its characters simply stay in the pending text span, because
text is only flushed when something else is emitted.

The character that abandons an image or bracket construct is examined
again in the Normal state rather than swallowed as text, so ``!*a*`` and
``[a]*b*`` still produce italics.

"""

from __future__ import annotations

from mdlex.config import LexConfig
from mdlex.lexer.modes import (
    NORMAL,
    SKIP,
    TERMINAL,
    AutolinkOpen,
    Continuous,
    ImageNameOpen,
    ImageOpen,
    InlineState,
    LinkNameOpen,
    LocationOpen,
    NameClosed,
    Normal,
    RefLinkDefOpen,
    RefLinkOpen,
    Skip,
)
from mdlex.text import BR_MARKER, has_line_break, strip_newline, trim_text_end
from mdlex.tokens import Token, TokenKind
from mdlex.utils.logger import get_logger

logger = get_logger(__name__)

# Characters that a backslash turns into literal text
ESCAPE_CHARS: frozenset[str] = frozenset(":*_`#+-.![]()<>\\")

_DELIMITER_KINDS: dict[str, TokenKind] = {
    "*": TokenKind.STAR,
    "_": TokenKind.UNDERLINE,
    "`": TokenKind.BACKTICK,
}


class InlineScannerMixin:
    """Mixin providing the inline tokenizing automaton.

    Required Host Attributes:
        - _config: LexConfig

    Required Host Methods (from other mixins):
        - _make_link_token(span, name, clause, kind) -> Token

    """

    _config: LexConfig

    def _make_link_token(self, span: str, name: str, clause: str, kind: TokenKind) -> Token:
        raise NotImplementedError

    def _is_autolink_target(self, target: str) -> bool:
        """Check if the text between ``<`` and ``>`` is a URL or email."""
        return self._config.url_validator(target) or self._config.email_validator(target)

    def _scan_inline(self, content: str) -> list[Token]:
        """Tokenize the inline part of a line.

        Args:
            content: The line from the inline start offset on, including
                its newline if present

        Returns:
            Unresolved tokens (may contain empty values and raw delimiters)
        """
        tokens: list[Token] = []
        emit = tokens.append
        content_len = len(content)

        def flush(end: int, *, at_line_end: bool = False) -> None:
            text = content[last:end]
            if at_line_end:
                text = trim_text_end(text)
            if text:
                emit(Token(TokenKind.TEXT, text))

        state: InlineState = NORMAL
        last = 0
        pos = 0
        line_ended = False

        while pos < content_len:
            char = content[pos]
            next_char = content[pos + 1] if pos + 1 < content_len else ""

            # A reference definition takes the rest of the line
            if isinstance(state, RefLinkDefOpen) and char != "\n":
                emit(
                    self._make_link_token(
                        strip_newline(content[last:]),
                        content[state.open + 1 : state.close],
                        strip_newline(content[pos:]),
                        TokenKind.REF_LINK_DEF,
                    )
                )
                state = TERMINAL
                line_ended = True
                break

            if char == "\n":
                flush(pos, at_line_end=True)
                line_ended = True
                break

            if isinstance(state, Skip):
                state = NORMAL
                pos += 1
                continue

            if char == "\\" and next_char in ESCAPE_CHARS:
                # Drop the backslash; the escaped char starts the next span
                flush(pos)
                last = pos + 1
                state = SKIP
                pos += 1
                continue

            match state:
                case Normal():
                    if char in _DELIMITER_KINDS:
                        flush(pos)
                        last = pos
                        if next_char == char:
                            state = Continuous(pos)
                        else:
                            emit(Token(_DELIMITER_KINDS[char], char))
                            last = pos + 1
                    elif char == "!":
                        state = ImageOpen(pos)
                    elif char == "[":
                        state = LinkNameOpen(pos)
                    elif char == "<":
                        state = AutolinkOpen(pos)

                case Continuous(start=start):
                    if next_char != char:
                        emit(Token(_DELIMITER_KINDS[char], content[start : pos + 1]))
                        last = pos + 1
                        state = NORMAL

                case ImageOpen(bang=bang):
                    if char == "[":
                        state = ImageNameOpen(bang, pos)
                    elif char == "!":
                        state = ImageOpen(pos)
                    else:
                        state = NORMAL
                        continue

                case ImageNameOpen(bang=bang, open=open_):
                    if char == "]":
                        state = NameClosed(bang, open_, pos)

                case LinkNameOpen():
                    if char == "]":
                        state = NameClosed(None, state.open, pos)
                    elif char == "[":
                        # Innermost bracket wins
                        state = LinkNameOpen(pos)

                case NameClosed(bang=bang, open=open_, close=close):
                    if char == "(":
                        state = LocationOpen(bang, open_, close, pos)
                    elif char == "]":
                        state = NameClosed(bang, open_, pos)
                    elif char == "[":
                        state = RefLinkOpen(open_, close, pos)
                    elif char == ":":
                        state = RefLinkDefOpen(open_, close, pos)
                    else:
                        state = NORMAL
                        continue

                case RefLinkOpen(open=open_, close=close, tag_open=tag_open):
                    if char == "]":
                        flush(open_)
                        emit(
                            self._make_link_token(
                                content[open_ : pos + 1],
                                content[open_ + 1 : close],
                                content[tag_open + 1 : pos],
                                TokenKind.REF_LINK,
                            )
                        )
                        last = pos + 1
                        state = NORMAL

                case LocationOpen(bang=bang, open=open_, close=close, paren=paren):
                    if char == ")":
                        begin = open_ if bang is None else bang
                        kind = TokenKind.LINK if bang is None else TokenKind.IMAGE
                        flush(begin)
                        emit(
                            self._make_link_token(
                                content[begin : pos + 1],
                                content[open_ + 1 : close],
                                content[paren + 1 : pos],
                                kind,
                            )
                        )
                        last = pos + 1
                        state = NORMAL

                case AutolinkOpen(open=open_):
                    # The target only changes after a non-space character,
                    # so it is checked once per whitespace run
                    if char.isspace() and not content[pos - 1].isspace():
                        target = content[open_ + 1 : pos].strip()
                        if target and not self._is_autolink_target(target):
                            logger.debug("Not an autolink target: %r", target)
                            state = NORMAL
                            continue
                    elif char == ">":
                        target = content[open_ + 1 : pos].strip()
                        if self._is_autolink_target(target):
                            flush(open_)
                            emit(
                                self._make_link_token(
                                    content[open_ : pos + 1],
                                    target,
                                    target,
                                    TokenKind.QUICK_LINK,
                                )
                            )
                            last = pos + 1
                        state = NORMAL

            pos += 1

        if not line_ended:
            flush(content_len, at_line_end=True)

        if has_line_break(content):
            emit(Token(TokenKind.LINE_BREAK, BR_MARKER))

        return tokens
