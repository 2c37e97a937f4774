"""Generic link detail extraction for the mdlex lexer.

Turns a matched image/link/reference span into a link-family token with
its attributes (name, location, title, ptr) populated.

Attribute schema per kind:
- IMAGE, LINK: name, location, title
- QUICK_LINK: name, location
- REF_LINK: name, ptr
- REF_LINK_DEF: ptr, location, title

Empty attribute values are omitted; a token with no attributes at all
carries ``details=None``.
"""

from __future__ import annotations

import re

from mdlex.config import LexConfig
from mdlex.tokens import Token, TokenKind
from mdlex.utils.logger import get_logger

logger = get_logger(__name__)

# Location and title are separated by the first run of spaces/tabs
_FIELD_SEPARATOR_RE = re.compile(r"[ \t]+")

_QUOTE_CHARS = "\"'"


def _strip_title_quotes(title: str) -> str:
    """Remove the enclosing pair of quotes of a title, if present."""
    if len(title) >= 2 and title[0] in _QUOTE_CHARS and title[-1] == title[0]:
        return title[1:-1]
    return title


def _build_details(**attrs: str) -> dict[str, str] | None:
    """Collect non-empty attributes, or None if every value is empty."""
    details = {key: value for key, value in attrs.items() if value}
    return details or None


class LinkDetailMixin:
    """Mixin providing link-family token construction.

    Required Host Attributes:
        - _config: LexConfig

    """

    _config: LexConfig

    def _split_location_title(self, clause: str) -> tuple[str, str] | None:
        """Split ``location "title"`` into its two fields.

        Returns:
            (location, title) with the title still quoted, or None if a
            second field is present but is not a quoted string.
        """
        clause = clause.strip()
        fields = _FIELD_SEPARATOR_RE.split(clause, maxsplit=1)
        if len(fields) < 2:
            return clause, ""
        location, title = fields
        if not self._config.title_validator(title):
            return None
        return location, title

    def _make_link_token(self, span: str, name: str, clause: str, kind: TokenKind) -> Token:
        """Build a link-family token from its matched parts.

        Args:
            span: The literal matched text (becomes the token value)
            name: Text of the first bracket pair (the tag for REF_LINK_DEF)
            clause: The trailing part: ``location "title"`` for IMAGE, LINK
                and REF_LINK_DEF, the tag for REF_LINK, the validated target
                for QUICK_LINK
            kind: Link-family kind to produce

        Returns:
            The link token, or a TEXT token when the title is malformed.
        """
        match kind:
            case TokenKind.IMAGE | TokenKind.LINK | TokenKind.REF_LINK_DEF:
                fields = self._split_location_title(clause)
                if fields is None:
                    logger.debug("Unquoted link title, keeping %r as text", span)
                    return Token(TokenKind.TEXT, span)
                location, title = fields
                title = _strip_title_quotes(title)
                if kind is TokenKind.REF_LINK_DEF:
                    details = _build_details(ptr=name, location=location, title=title)
                else:
                    details = _build_details(name=name, location=location, title=title)
            case TokenKind.REF_LINK:
                details = _build_details(name=name, ptr=clause.strip())
            case TokenKind.QUICK_LINK:
                details = _build_details(name=name, location=clause)
            case _:
                raise ValueError(f"{kind.name} is not a link kind")
        return Token(kind, span, details)
