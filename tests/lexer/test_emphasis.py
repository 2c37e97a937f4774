"""Tests for the emphasis/code tidy resolver.

Covers run normalization (splitting long runs so they can pair with
shorter ones) and stack-based delimiter matching.
"""

from __future__ import annotations

import pytest

from mdlex import Lexer, lex_line
from mdlex.tokens import DELIMITER_KINDS, Token, TokenKind


def lex_pairs(line: str) -> list[tuple[str, TokenKind]]:
    """Lex a line (newline appended) into (value, kind) pairs."""
    return [(t.value, t.kind) for t in lex_line(line + "\n")]


class TestPairedEmphasis:
    """Runs of equal length pair up."""

    def test_bold_italic_mix(self) -> None:
        assert lex_pairs("**粗体**_斜体_***斜体+粗体***") == [
            ("**", TokenKind.BOLD_MARK),
            ("粗体", TokenKind.TEXT),
            ("**", TokenKind.BOLD_MARK),
            ("_", TokenKind.ITALIC_MARK),
            ("斜体", TokenKind.TEXT),
            ("_", TokenKind.ITALIC_MARK),
            ("***", TokenKind.ITALIC_BOLD_MARK),
            ("斜体+粗体", TokenKind.TEXT),
            ("***", TokenKind.ITALIC_BOLD_MARK),
        ]

    @pytest.mark.parametrize("mark", ["***", "___"])
    def test_italic_bold_with_spaces(self, mark: str) -> None:
        assert lex_pairs(f"{mark} 1 {mark}") == [
            (mark, TokenKind.ITALIC_BOLD_MARK),
            (" 1 ", TokenKind.TEXT),
            (mark, TokenKind.ITALIC_BOLD_MARK),
        ]

    def test_nested_bold(self) -> None:
        """Different delimiter characters nest."""
        assert lex_pairs("**__2__**") == [
            ("**", TokenKind.BOLD_MARK),
            ("__", TokenKind.BOLD_MARK),
            ("2", TokenKind.TEXT),
            ("__", TokenKind.BOLD_MARK),
            ("**", TokenKind.BOLD_MARK),
        ]


class TestRunNormalization:
    """Long runs split so they can pair with shorter ones."""

    def test_four_after_two_splits(self) -> None:
        """'****' after '**' resolves as '**' + '**'."""
        assert lex_pairs("**a****b**") == [
            ("**", TokenKind.BOLD_MARK),
            ("a", TokenKind.TEXT),
            ("**", TokenKind.BOLD_MARK),
            ("**", TokenKind.BOLD_MARK),
            ("b", TokenKind.TEXT),
            ("**", TokenKind.BOLD_MARK),
        ]

    def test_double_after_single_splits(self) -> None:
        assert lex_pairs("*a **b* c**") == [
            ("*", TokenKind.ITALIC_MARK),
            ("a ", TokenKind.TEXT),
            ("*", TokenKind.ITALIC_MARK),
            ("*", TokenKind.ITALIC_MARK),
            ("b", TokenKind.TEXT),
            ("*", TokenKind.ITALIC_MARK),
            (" c", TokenKind.TEXT),
            ("**", TokenKind.TEXT),
        ]

    def test_shorter_run_after_long_run_does_not_split(self) -> None:
        """'****' never opens; the trailing '***' has no partner."""
        assert lex_pairs("**1** ****2***") == [
            ("**", TokenKind.BOLD_MARK),
            ("1", TokenKind.TEXT),
            ("**", TokenKind.BOLD_MARK),
            (" ", TokenKind.TEXT),
            ("****", TokenKind.TEXT),
            ("2", TokenKind.TEXT),
            ("***", TokenKind.TEXT),
        ]

    def test_escape_shortens_opening_run(self) -> None:
        """An escaped '*' leaves '**', so the closing '***' splits."""
        assert lex_pairs("\\***rust***") == [
            ("*", TokenKind.TEXT),
            ("**", TokenKind.BOLD_MARK),
            ("rust", TokenKind.TEXT),
            ("**", TokenKind.BOLD_MARK),
            ("*", TokenKind.TEXT),
        ]

    def test_runs_of_each_char_are_normalized_separately(self) -> None:
        """A '_' run never splits against a '*' run."""
        assert lex_pairs("**a__") == [
            ("**", TokenKind.TEXT),
            ("a", TokenKind.TEXT),
            ("__", TokenKind.TEXT),
        ]


class TestUnmatchedDelimiters:
    """Delimiters without a partner become text."""

    def test_unequal_runs(self) -> None:
        assert lex_pairs("**a*") == [
            ("**", TokenKind.TEXT),
            ("a", TokenKind.TEXT),
            ("*", TokenKind.TEXT),
        ]

    def test_leading_triple_without_partner(self) -> None:
        assert lex_pairs("***xxxx") == [
            ("***", TokenKind.TEXT),
            ("xxxx", TokenKind.TEXT),
        ]

    def test_interleaved_delimiters_demote_the_inner_one(self) -> None:
        """Matching '*' discards the unclosed '_' opened inside it."""
        assert lex_pairs("*a _b* c_") == [
            ("*", TokenKind.ITALIC_MARK),
            ("a ", TokenKind.TEXT),
            ("_", TokenKind.TEXT),
            ("b", TokenKind.TEXT),
            ("*", TokenKind.ITALIC_MARK),
            (" c", TokenKind.TEXT),
            ("_", TokenKind.TEXT),
        ]

    def test_star_inside_code_span(self) -> None:
        assert lex_pairs("`*`") == [
            ("`", TokenKind.CODE_MARK),
            ("*", TokenKind.TEXT),
            ("`", TokenKind.CODE_MARK),
        ]

    def test_runs_longer_than_three(self) -> None:
        assert lex_pairs("a ****b****") == [
            ("a ", TokenKind.TEXT),
            ("****", TokenKind.TEXT),
            ("b", TokenKind.TEXT),
            ("****", TokenKind.TEXT),
        ]


class TestTidyDirect:
    """The resolver applied to hand-built token lists."""

    def test_no_raw_delimiters_remain(self) -> None:
        tokens = [
            Token(TokenKind.STAR, "**"),
            Token(TokenKind.BACKTICK, "`"),
            Token(TokenKind.TEXT, "x"),
            Token(TokenKind.UNDERLINE, "_"),
        ]
        Lexer("")._tidy(tokens)
        assert not any(t.kind in DELIMITER_KINDS for t in tokens)
        assert [t.value for t in tokens] == ["**", "`", "x", "_"]

    def test_split_preserves_text(self) -> None:
        tokens = [
            Token(TokenKind.STAR, "*"),
            Token(TokenKind.TEXT, "x"),
            Token(TokenKind.STAR, "***"),
        ]
        Lexer("")._tidy(tokens)
        assert "".join(t.value for t in tokens) == "*x***"
        assert tokens[0].kind is TokenKind.ITALIC_MARK
        assert tokens[2] == Token(TokenKind.ITALIC_MARK, "*")
