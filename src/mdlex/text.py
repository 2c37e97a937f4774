"""Text helpers shared by the lexer components.

Python strings index by code point, so slicing a line by character offset
is always safe; these helpers cover the line-ending and marker trimming
rules used across the lexer.
"""

from __future__ import annotations

from collections import Counter

BR_MARKER = "<br>"

# Characters that may form a dividing line (---, ***, ___)
DIVIDING_CHARS: frozenset[str] = frozenset("*-_")


def strip_newline(line: str) -> str:
    """Remove trailing newline characters.

    Example:
        >>> strip_newline("---\\n")
        '---'
    """
    return line.rstrip("\n")


def trim_text_end(text: str) -> str:
    """Trim trailing whitespace, then any trailing ``<br>`` markers.

    Whitespace before a removed ``<br>`` is preserved.

    Example:
        >>> trim_text_end("abc  <br>  ")
        'abc  '
    """
    text = text.rstrip()
    while text.endswith(BR_MARKER):
        text = text[: -len(BR_MARKER)]
    return text


def has_line_break(content: str) -> bool:
    """Check if the line ends in a hard line break.

    A hard break is two or more trailing spaces before the newline (or the
    end of input), or a trailing ``<br>`` marker.

    Example:
        >>> has_line_break("text  \\n")
        True
        >>> has_line_break("text<br> \\n")
        True
        >>> has_line_break("text \\n")
        False
    """
    if content.endswith("\n"):
        content = content[:-1]
    if content.endswith("  "):
        return True
    return content.rstrip().endswith(BR_MARKER)


def is_dividing_line(line: str) -> bool:
    """Check if the whole line is a dividing line.

    The non-whitespace characters must all be the same character from
    ``*``, ``-`` or ``_``, repeated at least three times.

    Example:
        >>> is_dividing_line("* * *\\n")
        True
        >>> is_dividing_line("*-*")
        False
    """
    counts = Counter(c for c in line if not c.isspace())
    if len(counts) != 1:
        return False
    char, count = next(iter(counts.items()))
    return char in DIVIDING_CHARS and count >= 3


__all__ = [
    "BR_MARKER",
    "DIVIDING_CHARS",
    "has_line_break",
    "is_dividing_line",
    "strip_newline",
    "trim_text_end",
]
