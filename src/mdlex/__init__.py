"""
mdlex: line-level Markdown lexer

Turns one line of Markdown into typed tokens: block marks, text, resolved
emphasis/code marks, images, links, autolinks, reference links and
reference definitions. Grouping tokens into blocks is left to the caller.

Quick Start:
    >>> from mdlex import lex_line
    >>> lex_line("# Hello **World**\\n")
    [Token(TITLE_MARK, '#'), Token(TEXT, 'Hello '), Token(BOLD_MARK, '**'), Token(TEXT, 'World'), Token(BOLD_MARK, '**')]

    >>> token = lex_line("[docs](https://example.com 'Docs')\\n")[0]
    >>> token.link.location
    'https://example.com'

Whole documents:
    >>> from mdlex import classify_line, lex_lines
    >>> [classify_line(tokens) for tokens in lex_lines("# T\\n\\ntext\\n")]
    [<LineKind.TITLE: 2>, <LineKind.BLANK: 1>, <LineKind.PLAIN: 5>]

Installation:
    pip install mdlex               # Zero runtime dependencies
"""

from concurrent.futures import ThreadPoolExecutor

from mdlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from mdlex.errors import LexError, LinkTokenError, MdlexError
from mdlex.lexer import Lexer, LineState
from mdlex.lines import LineKind, classify_line
from mdlex.protocols import SyntaxValidator
from mdlex.serialization import from_dict, from_json, to_dict, to_json
from mdlex.tokens import LinkDetails, Token, TokenKind

__version__ = "0.1.0"


def lex_line(line: str, *, config: LexConfig | None = None) -> list[Token]:
    """Lex one line of Markdown into tokens.

    Args:
        line: Line text, optionally ending in a newline
        config: Lexer configuration (defaults to the active context config)

    Returns:
        Token list for the line

    Raises:
        LexError: If ``line`` contains more than one line and
            ``config.strict_lines`` is set.

    Example:
        >>> lex_line("1. first\\n")
        [Token(ORDERED_MARK, '1.'), Token(TEXT, 'first')]
    """
    return Lexer(line, config=config).tokenize()


def lex_lines(
    source: str,
    *,
    config: LexConfig | None = None,
    max_workers: int | None = None,
) -> list[list[Token]]:
    """Lex every line of a document independently.

    Lines share no state, so they can be lexed on a thread pool. The
    active config is captured here and handed to each worker, since
    worker threads do not inherit the caller's context.

    Args:
        source: Markdown document
        config: Lexer configuration (defaults to the active context config)
        max_workers: Lex on a thread pool of this size; sequential if None

    Returns:
        One token list per line, in document order
    """
    if config is None:
        config = get_lex_config()
    # Only "\n" ends a line; other line separators stay inside the line
    lines = source.split("\n")
    tail = lines.pop()
    lines = [line + "\n" for line in lines]
    if tail:
        lines.append(tail)

    def lex(line: str) -> list[Token]:
        return Lexer(line, config=config).tokenize()

    if max_workers is None:
        return [lex(line) for line in lines]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lex, lines))


__all__ = [
    # Lexing
    "Lexer",
    "LineState",
    "lex_line",
    "lex_lines",
    # Tokens
    "LinkDetails",
    "Token",
    "TokenKind",
    # Line classification
    "LineKind",
    "classify_line",
    # Configuration
    "LexConfig",
    "SyntaxValidator",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    # Errors
    "LexError",
    "LinkTokenError",
    "MdlexError",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "__version__",
]
