"""Token and TokenKind definitions for the mdlex lexer.

The lexer turns one line of Markdown into a list of Token objects that a
block assembler consumes. Each Token has a kind, the literal text it was
matched from, and (for the link family) an attribute mapping.

Thread Safety:
Token is frozen (immutable) and safe to share across threads; its details
are stored behind a read-only mapping proxy.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from types import MappingProxyType
from typing import NamedTuple

from mdlex.errors import LinkTokenError


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    Organized by category:
    - Block marks (line-leading markers)
    - Raw inline marks (only present before the tidy pass)
    - Resolved inline marks
    - Link family (carry details)
    - Structural kinds

    """

    # Block marks
    TITLE_MARK = auto()  # #, ##, ###, ####
    UNORDERED_MARK = auto()  # *, -, +
    ORDERED_MARK = auto()  # 1.
    DIVIDING_MARK = auto()  # ---, ***, ___
    QUOTE_MARK = auto()  # >
    CODE_BLOCK_MARK = auto()  # ```

    # Raw inline marks (resolved by the tidy pass)
    STAR = auto()  # *
    UNDERLINE = auto()  # _
    BACKTICK = auto()  # `

    # Resolved inline marks
    ITALIC_MARK = auto()  # * * or _ _
    BOLD_MARK = auto()  # ** ** or __ __
    ITALIC_BOLD_MARK = auto()  # *** *** or ___ ___
    CODE_MARK = auto()  # ` `

    # Link family
    IMAGE = auto()  # ![name](location "title")
    LINK = auto()  # [name](location "title")
    QUICK_LINK = auto()  # <url or email>
    REF_LINK = auto()  # [name][tag]
    REF_LINK_DEF = auto()  # [tag]: location "title"

    # Structural
    TEXT = auto()
    BLANK_LINE = auto()
    LINE_BREAK = auto()  # <br> or two trailing spaces
    WHITESPACE = auto()  # leading indentation


BLOCK_MARKS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.TITLE_MARK,
        TokenKind.UNORDERED_MARK,
        TokenKind.ORDERED_MARK,
        TokenKind.DIVIDING_MARK,
        TokenKind.QUOTE_MARK,
        TokenKind.CODE_BLOCK_MARK,
    }
)

DELIMITER_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.STAR, TokenKind.UNDERLINE, TokenKind.BACKTICK}
)

LINK_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.IMAGE,
        TokenKind.LINK,
        TokenKind.QUICK_LINK,
        TokenKind.REF_LINK,
        TokenKind.REF_LINK_DEF,
    }
)


class LinkDetails(NamedTuple):
    """Read-only view of a link-family token's attributes.

    Attributes:
        name: Text inside the first bracket pair (or the autolink target)
        location: URL, path or email address
        title: Title with its quotes stripped
        ptr: Reference tag of a reference link or definition

    """

    name: str | None
    location: str | None
    title: str | None
    ptr: str | None


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The token kind (from TokenKind enum)
        value: The literal text matched from the line (an owned copy)
        details: Link attributes (name, location, title, ptr). Only set on
            link-family tokens; empty values are never stored, and a
            token without any attribute has ``details=None``. Stored as a
            read-only mapping.

    """

    kind: TokenKind
    value: str
    details: Mapping[str, str] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if self.details is not None and not isinstance(self.details, MappingProxyType):
            object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        if self.details:
            return f"Token({self.kind.name}, {val!r}, {dict(self.details)!r})"
        return f"Token({self.kind.name}, {val!r})"

    @property
    def is_link(self) -> bool:
        """Whether the token belongs to the link family."""
        return self.kind in LINK_KINDS

    @property
    def is_block_mark(self) -> bool:
        """Whether the token is a line-leading block mark."""
        return self.kind in BLOCK_MARKS

    @property
    def link(self) -> LinkDetails:
        """Link attributes of an Image/Link/QuickLink/RefLink/RefLinkDef token.

        Raises:
            LinkTokenError: If the token is not a link-family token.
        """
        if self.kind not in LINK_KINDS:
            raise LinkTokenError(self.kind.name)
        details = self.details or {}
        return LinkDetails(
            name=details.get("name"),
            location=details.get("location"),
            title=details.get("title"),
            ptr=details.get("ptr"),
        )

    def with_kind(self, kind: TokenKind) -> Token:
        """Return a copy of this token with a different kind."""
        return replace(self, kind=kind)
