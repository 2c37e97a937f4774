"""Default syntax validators for autolinks and link titles.

The lexer only needs a yes/no answer: "is this an absolute URL", "is this
an email address", "is this a quoted title". Any function matching
``mdlex.protocols.SyntaxValidator`` can replace these through LexConfig.

No network access is performed.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")

# Schemes whose URLs must name a host ("https:foo" is not a web address)
_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

# Characters never allowed unescaped in a URL
_FORBIDDEN_URL_CHARS = frozenset('<>"{}|^`\\')

# RFC 5322 dot-atom local part @ LDH domain labels
_EMAIL_RE = re.compile(
    r"[a-zA-Z0-9!#$%&'*+/=?^_`{|}~\-]+(?:\.[a-zA-Z0-9!#$%&'*+/=?^_`{|}~\-]+)*"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?)*"
)

# Double or single quoted string, backslash escapes allowed inside
_DOUBLE_QUOTED_RE = re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL)
_SINGLE_QUOTED_RE = re.compile(r"'(?:[^'\\]|\\.)*'", re.DOTALL)


def is_url(text: str) -> bool:
    """Check if text is a syntactically valid absolute URL.

    Requires an RFC 3986 scheme. Whitespace, control characters and
    characters that must be percent-encoded are rejected. Web schemes must
    carry a host, and a port, if present, must be numeric.

    Example:
        >>> is_url("https://example.com")
        True
        >>> is_url("example.com")
        False
    """
    if not text:
        return False
    if _SCHEME_RE.match(text) is None:
        return False
    for char in text:
        if char.isspace() or ord(char) < 32 or ord(char) == 127:
            return False
        if char in _FORBIDDEN_URL_CHARS:
            return False

    try:
        parts = urlsplit(text)
        # Accessing port validates it (raises ValueError when malformed)
        parts.port
    except ValueError:
        return False

    if parts.scheme.lower() in _HOST_SCHEMES:
        return bool(parts.hostname)
    return True


def is_email(text: str) -> bool:
    """Check if text is a syntactically valid email address.

    Example:
        >>> is_email("user@example.com")
        True
        >>> is_email("user@")
        False
    """
    if not text or len(text) > 254:
        return False
    local, _, _domain = text.rpartition("@")
    if len(local) > 64:
        return False
    return _EMAIL_RE.fullmatch(text) is not None


def is_quoted_string(text: str) -> bool:
    """Check if text is a double- or single-quoted string.

    Backslash-escaped characters (including the quote itself) are allowed
    inside the quotes.

    Example:
        >>> is_quoted_string('"Magic Gardens"')
        True
        >>> is_quoted_string('"Magic" Gardens')
        False
    """
    return (
        _DOUBLE_QUOTED_RE.fullmatch(text) is not None
        or _SINGLE_QUOTED_RE.fullmatch(text) is not None
    )


__all__ = ["is_email", "is_quoted_string", "is_url"]
