"""Single-line state-machine lexer for mdlex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LineState
├── core.py              # Lexer class (mixin composition + orchestration)
├── modes.py             # LineState enum, inline automaton states
├── links.py             # Link detail extraction
├── emphasis.py          # Tidy pass (emphasis/code resolution)
├── classifiers/         # Block mark classification mixins
│   ├── heading.py       # Title marks
│   ├── list.py          # Ordered and unordered list marks
│   ├── quote.py         # Quote mark
│   ├── fence.py         # Code block fence
│   └── thematic.py      # Dividing line
└── scanners/
    ├── block.py         # Leading whitespace + first word
    └── inline.py        # Inline automaton

Usage:
    >>> from mdlex.lexer import Lexer
    >>> Lexer("> quoted\\n").tokenize()
    [Token(QUOTE_MARK, '>'), Token(TEXT, 'quoted')]

"""

from mdlex.lexer.core import Lexer
from mdlex.lexer.modes import LineState

__all__ = ["Lexer", "LineState"]
