"""ContextVar-based lexer configuration for mdlex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed. Worker threads do not inherit the caller's context;
    pass the config explicitly when lexing on a thread pool.

Usage:
    from mdlex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(strict_lines=False)):
        tokens = lex_line("a\\nb")

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from mdlex.protocols import SyntaxValidator
from mdlex.validators import is_email, is_quoted_string, is_url


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        url_validator: Accepts autolink targets that are absolute URLs
        email_validator: Accepts autolink targets that are email addresses
        title_validator: Accepts the title field of links and definitions
        strict_lines: Raise LexError when the input holds more than one line
        emit_whitespace: Emit leading indentation as a WHITESPACE token

    """

    url_validator: SyntaxValidator = is_url
    email_validator: SyntaxValidator = is_email
    title_validator: SyntaxValidator = is_quoted_string
    strict_lines: bool = True
    emit_whitespace: bool = True

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "LexConfig":
        """Create LexConfig from a mapping.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({"strict_lines": False, "other": 1})
            >>> config.strict_lines
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Only affects the current thread's context.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(emit_whitespace=False)):
        ...     tokens = lex_line("  text")
        >>> # Automatically reset to previous config

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
