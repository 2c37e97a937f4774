"""Scanners for the mdlex lexer.

- block: leading whitespace and block mark of a line
- inline: the per-character inline automaton
"""

from __future__ import annotations

from mdlex.lexer.scanners.block import BlockScannerMixin
from mdlex.lexer.scanners.inline import InlineScannerMixin

__all__ = [
    "BlockScannerMixin",
    "InlineScannerMixin",
]
