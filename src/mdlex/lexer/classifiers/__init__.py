"""Block mark classifiers for the mdlex lexer.

Each classifier is a mixin that decides whether the first word of a line
is a particular block mark. Classifiers are pure: they never move the
scan position.
"""

from mdlex.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from mdlex.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from mdlex.lexer.classifiers.list import (
    ListClassifierMixin,
)
from mdlex.lexer.classifiers.quote import (
    QuoteClassifierMixin,
)
from mdlex.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "ThematicClassifierMixin",
]
