"""Cisco IOS syntax highlighting for configuration and show command output."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cink.tokens import ParseMode, Token

__version__ = "0.1.0"


def highlight(text: str, theme: str = "tokyonight") -> str:
    """Colourize text if it looks like IOS content, else return it unchanged."""
    from cink.render import Highlighter
    from cink.theme import theme_by_name

    return Highlighter(theme_by_name(theme)).highlight(text)


def highlight_forced(text: str, theme: str = "tokyonight") -> str:
    """Colourize text without the content check."""
    from cink.render import Highlighter
    from cink.theme import theme_by_name

    return Highlighter(theme_by_name(theme)).highlight_forced(text)


def strip_ansi(text: str) -> str:
    """Remove terminal control sequences from text."""
    from cink.ansi import strip_ansi as _strip

    return _strip(text)


def has_ansi(text: str) -> bool:
    """Return True if text contains terminal control sequences."""
    from cink.ansi import has_ansi as _has

    return _has(text)


def tokenize(text: str, mode: ParseMode | None = None) -> list[Token]:
    """Tokenize text, auto-detecting config vs. show output unless ``mode`` is given."""
    from cink.lexer import tokenize as _tokenize
    from cink.tokens import ParseMode

    return _tokenize(text, mode if mode is not None else ParseMode.AUTO)
