"""Tests for ContextVar-based lexer configuration."""

import threading
from dataclasses import FrozenInstanceError

import pytest

from mdlex import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    lex_line,
    reset_lex_config,
    set_lex_config,
)
from mdlex.tokens import Token, TokenKind
from mdlex.validators import is_email, is_quoted_string, is_url


@pytest.fixture(autouse=True)
def _reset_config():
    """Every test starts and ends with the default config."""
    reset_lex_config()
    yield
    reset_lex_config()


class TestLexConfig:
    def test_defaults(self) -> None:
        config = LexConfig()
        assert config.url_validator is is_url
        assert config.email_validator is is_email
        assert config.title_validator is is_quoted_string
        assert config.strict_lines is True
        assert config.emit_whitespace is True

    def test_frozen(self) -> None:
        config = LexConfig()
        with pytest.raises(FrozenInstanceError):
            config.strict_lines = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"emit_whitespace": False, "tables": True})
        assert config.emit_whitespace is False
        assert config.strict_lines is True

    def test_from_dict_empty(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestContextVar:
    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_reset(self) -> None:
        custom = LexConfig(emit_whitespace=False)
        set_lex_config(custom)
        assert get_lex_config() is custom
        reset_lex_config()
        assert get_lex_config() == LexConfig()

    def test_context_manager_restores(self) -> None:
        outer = LexConfig(strict_lines=False)
        set_lex_config(outer)
        with lex_config_context(LexConfig(emit_whitespace=False)):
            assert get_lex_config().emit_whitespace is False
        assert get_lex_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(emit_whitespace=False)):
                raise RuntimeError("boom")
        assert get_lex_config() == LexConfig()

    def test_lexer_reads_active_config(self) -> None:
        with lex_config_context(LexConfig(emit_whitespace=False)):
            assert lex_line("  text\n") == [Token(TokenKind.TEXT, "text")]
        assert lex_line("  text\n")[0].kind is TokenKind.WHITESPACE

    def test_explicit_config_wins(self) -> None:
        with lex_config_context(LexConfig(emit_whitespace=False)):
            tokens = lex_line("  text\n", config=LexConfig())
        assert tokens[0] == Token(TokenKind.WHITESPACE, "  ")

    def test_threads_do_not_share_config(self) -> None:
        """A config set in one thread is invisible to another."""
        set_lex_config(LexConfig(emit_whitespace=False))
        seen: list[LexConfig] = []
        thread = threading.Thread(target=lambda: seen.append(get_lex_config()))
        thread.start()
        thread.join()
        assert seen == [LexConfig()]


class TestPluggableValidators:
    def test_custom_url_validator(self) -> None:
        config = LexConfig(url_validator=lambda text: text == "internal")
        tokens = lex_line("<internal>\n", config=config)
        assert tokens[0].kind is TokenKind.QUICK_LINK
        assert tokens[0].link.location == "internal"

    def test_disabled_autolinks(self) -> None:
        reject = lambda text: False  # noqa: E731
        config = LexConfig(url_validator=reject, email_validator=reject)
        tokens = lex_line("<https://example.com>\n", config=config)
        assert tokens == [Token(TokenKind.TEXT, "<https://example.com>")]

    def test_custom_title_validator(self) -> None:
        """A permissive title check keeps unquoted titles as-is."""
        config = LexConfig(title_validator=lambda text: True)
        token = lex_line("[a](b plain title)\n", config=config)[0]
        assert token.kind is TokenKind.LINK
        assert token.link.title == "plain title"
