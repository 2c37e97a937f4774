"""Logger access for mdlex modules.

Every logger lives under the ``mdlex`` namespace, so applications can
silence or enable the whole lexer with one ``logging.getLogger("mdlex")``
call. The lexer only logs at DEBUG level (abandoned constructs, run
splits); nothing is emitted under the default logging configuration.

Example:
    >>> log = get_logger(__name__)
    >>> log.debug("split %r run", "***")
"""

from __future__ import annotations

import logging

_ROOT = "mdlex"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the mdlex namespace.

    Names that already start with ``mdlex`` are used unchanged; any other
    name is prefixed.

    Example:
        >>> get_logger("plugins.wiki").name
        'mdlex.plugins.wiki'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
