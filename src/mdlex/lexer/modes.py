"""Lexer phases and inline automaton states.

The line-level phase is a plain enum. The inline automaton state is a
tagged union: each variant is a small frozen dataclass carrying exactly
the character offsets (relative to the inline content) that its
transitions need.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeAlias


class LineState(Enum):
    """Block-classification phases for one line.

    - BEGIN: skipping leading whitespace
    - MARK: reading the first word
    - INLINE: handing the rest of the line to the inline automaton
    - FINISHED: the line is fully tokenized (blank or dividing line)

    """

    BEGIN = auto()
    MARK = auto()
    INLINE = auto()
    FINISHED = auto()


@dataclass(frozen=True, slots=True)
class Normal:
    """Plain text; no construct is open."""


@dataclass(frozen=True, slots=True)
class Skip:
    """The next character was escaped and is taken literally."""


@dataclass(frozen=True, slots=True)
class Terminal:
    """The rest of the line was consumed."""


@dataclass(frozen=True, slots=True)
class Continuous:
    """Inside a run of identical ``*``, ``_`` or backtick characters."""

    start: int


@dataclass(frozen=True, slots=True)
class ImageOpen:
    """Saw ``!``."""

    bang: int


@dataclass(frozen=True, slots=True)
class ImageNameOpen:
    """Saw ``![``."""

    bang: int
    open: int


@dataclass(frozen=True, slots=True)
class LinkNameOpen:
    """Saw ``[``."""

    open: int


@dataclass(frozen=True, slots=True)
class NameClosed:
    """Saw ``[...]`` or ``![...]``."""

    bang: int | None
    open: int
    close: int


@dataclass(frozen=True, slots=True)
class RefLinkOpen:
    """Saw ``[name][``."""

    open: int
    close: int
    tag_open: int


@dataclass(frozen=True, slots=True)
class RefLinkDefOpen:
    """Saw ``[tag]:``."""

    open: int
    close: int
    colon: int


@dataclass(frozen=True, slots=True)
class LocationOpen:
    """Saw ``[name](`` or ``![name](``."""

    bang: int | None
    open: int
    close: int
    paren: int


@dataclass(frozen=True, slots=True)
class AutolinkOpen:
    """Saw ``<``."""

    open: int


InlineState: TypeAlias = (
    Normal
    | Skip
    | Terminal
    | Continuous
    | ImageOpen
    | ImageNameOpen
    | LinkNameOpen
    | NameClosed
    | RefLinkOpen
    | RefLinkDefOpen
    | LocationOpen
    | AutolinkOpen
)

# Stateless variants are shared
NORMAL = Normal()
SKIP = Skip()
TERMINAL = Terminal()


__all__ = [
    "AutolinkOpen",
    "Continuous",
    "ImageNameOpen",
    "ImageOpen",
    "InlineState",
    "LineState",
    "LinkNameOpen",
    "LocationOpen",
    "NORMAL",
    "NameClosed",
    "Normal",
    "RefLinkDefOpen",
    "RefLinkOpen",
    "SKIP",
    "Skip",
    "TERMINAL",
    "Terminal",
]
