"""Token serialization: JSON round-trip for lexed lines.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Caching lexed lines between editor sessions
- Snapshot tests of lexer output
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from mdlex import lex_line
    from mdlex.serialization import to_json, from_json

    tokens = lex_line("[a](b)\\n")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Sequence
from typing import Any

from mdlex.tokens import Token, TokenKind


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The kind is stored by name. ``details`` is only present on tokens
    that carry attributes.

    Args:
        token: Any mdlex token.

    Returns:
        Dict with ``kind``, ``value`` and optionally ``details``.
    """
    result: dict[str, Any] = {"kind": token.kind.name, "value": token.value}
    if token.details:
        result["details"] = dict(token.details)
    return result


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by ``to_dict``.

    Raises:
        KeyError: If the kind name is unknown or a required key is missing.
    """
    details = data.get("details")
    return Token(
        kind=TokenKind[data["kind"]],
        value=data["value"],
        details=dict(details) if details else None,
    )


def to_json(tokens: Sequence[Token], *, indent: int | None = None) -> str:
    """Serialize a token list to a JSON string.

    Args:
        tokens: Tokens of one line.
        indent: JSON indentation (None for compact).

    Returns:
        Deterministic JSON string.
    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON string back into a token list."""
    return [from_dict(item) for item in json.loads(json_str)]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
