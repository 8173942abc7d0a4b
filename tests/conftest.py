"""Shared test fixtures and helpers."""

from __future__ import annotations

import re

import pytest

from cink.lexer import Lexer
from cink.tokens import ParseMode, Token, TokenType

_SGR = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def lex():
    """Return a helper that tokenizes source, optionally in a fixed mode."""

    def _lex(source: str, mode: ParseMode = ParseMode.AUTO) -> list[Token]:
        return Lexer(source, mode).tokenize()

    return _lex


@pytest.fixture
def words():
    """Return a helper that tokenizes source and drops whitespace tokens."""

    def _words(source: str, mode: ParseMode = ParseMode.AUTO) -> list[Token]:
        return [t for t in Lexer(source, mode).tokenize() if t.type != TokenType.TEXT]

    return _words


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def find_tokens(tokens: list[Token], tt: TokenType) -> list[Token]:
    """Return all tokens of the given type."""
    return [t for t in tokens if t.type == tt]


def type_of(tokens: list[Token], value: str) -> TokenType:
    """Return the type of the first token with the given text."""
    for t in tokens:
        if t.value == value:
            return t.type
    raise AssertionError(f"no token {value!r} in {[t.value for t in tokens]}")


def strip_sgr(text: str) -> str:
    """Remove colour/reset codes (SGR sequences) from rendered output."""
    return _SGR.sub("", text)
