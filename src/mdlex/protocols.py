"""Protocols for mdlex.

Defines the contract for the syntax checks the lexer delegates to:
URL and email validation for autolinks, quoting rules for link titles.
"""

from __future__ import annotations

from typing import Protocol


class SyntaxValidator(Protocol):
    """Protocol for pure syntax checks.

    Implementations answer whether a string is syntactically valid. They
    must not perform network access or keep mutable state, because one
    validator is shared by every lexer using the same configuration.

    Thread Safety:
        Implementations must be stateless or use only local variables.

    """

    def __call__(self, text: str) -> bool:
        """Return True if ``text`` is syntactically valid."""
        ...
