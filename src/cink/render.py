"""ANSI renderer: colours a token stream and highlights live terminal output."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from cink import patterns as p
from cink.ansi import split_segments, strip_ansi
from cink.lexer import Lexer, is_prompt
from cink.theme import RESET, Theme, default_theme
from cink.tokens import ParseMode, Token

log = logging.getLogger(__name__)


def render_tokens(tokens: Iterable[Token], theme: Theme) -> str:
    """Wrap each token in its theme colour; uncoloured tokens pass through."""
    parts: list[str] = []
    for tok in tokens:
        color = theme.color_for(tok.type)
        if color:
            parts.append(color)
            parts.append(tok.value)
            parts.append(RESET)
        else:
            parts.append(tok.value)
    return "".join(parts)


# ---------------------------------------------------------------------------
# Heuristic gate
# ---------------------------------------------------------------------------


def looks_like_cisco(text: str) -> bool:
    """Cheap check that ``text`` (already stripped of escapes) is IOS content."""
    if _is_prompt_line(text):
        return True

    lower = text.lower()
    if any(ind in lower for ind in p.CONFIG_INDICATORS):
        return True
    if any(ind in lower for ind in p.SHOW_INDICATORS):
        return True
    if _has_separators(text):
        return True
    return any(phrase in lower for phrase in p.CISCO_PHRASES)


def _is_prompt_line(text: str) -> bool:
    if is_prompt(text):
        return True

    # Bare "host>" / "host(mode)#" without the full grammar
    trimmed = text.strip()
    if len(trimmed) < 2 or trimmed[-1] not in (p.PROMPT_OPER_CHAR, p.PROMPT_CONF_CHAR):
        return False
    prefix = trimmed[:-1]
    if prefix.endswith(")") and "(" in prefix:
        prefix = prefix[: prefix.rfind("(")]
    return _is_hostname(prefix)


def _is_hostname(s: str) -> bool:
    return bool(s) and s.isascii() and all(ch.isalnum() or ch in "-._" for ch in s)


def _has_separators(text: str) -> bool:
    """True when at least two lines consist of a lone ``!``."""
    count = 0
    for line in text.split("\n"):
        if line.strip() == "!":
            count += 1
            if count >= 2:
                return True
    return False


# ---------------------------------------------------------------------------
# Highlighter
# ---------------------------------------------------------------------------


class Highlighter:
    """Applies a theme to Cisco configuration and show output.

    Holds the selected theme and an on/off switch; all methods are safe to
    call from several threads.
    """

    def __init__(self, theme: Theme | None = None) -> None:
        self._theme = theme if theme is not None else default_theme()
        self._enabled = True
        self._lock = threading.Lock()

    @property
    def theme(self) -> Theme:
        return self._theme

    def set_theme(self, theme: Theme) -> None:
        with self._lock:
            self._theme = theme

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        with self._lock:
            self._enabled = True

    def disable(self) -> None:
        with self._lock:
            self._enabled = False

    def toggle(self) -> bool:
        """Flip highlighting on/off and return the new state."""
        with self._lock:
            self._enabled = not self._enabled
            return self._enabled

    def highlight(self, text: str, mode: ParseMode = ParseMode.AUTO) -> str:
        """Highlight ``text`` if it looks like IOS content, else return it unchanged."""
        if not self._enabled or not text:
            return text
        if not looks_like_cisco(strip_ansi(text)):
            log.debug("not IOS content, leaving %d chars unhighlighted", len(text))
            return text
        return self._render(text, mode)

    def highlight_forced(self, text: str, mode: ParseMode = ParseMode.AUTO) -> str:
        """Highlight ``text`` without the content check."""
        if not self._enabled or not text:
            return text
        return self._render(text, mode)

    def highlight_show_output(self, text: str) -> str:
        """Highlight ``text`` as show command output."""
        return self.highlight_forced(text, ParseMode.SHOW)

    def highlight_lines(self, lines: Iterable[str]) -> list[str]:
        return [self.highlight(line) for line in lines]

    def _render(self, text: str, mode: ParseMode) -> str:
        theme = self._theme
        parts: list[str] = []
        for seg in split_segments(text):
            if seg.is_control:
                parts.append(seg.text)
            else:
                parts.append(render_tokens(Lexer(seg.text, mode).tokenize(), theme))
        return "".join(parts)
