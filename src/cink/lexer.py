"""Cisco IOS lexer: converts configuration text or show output into a flat token stream."""

from __future__ import annotations

import logging
import re

from cink import patterns as p
from cink.tokens import ParseMode, Token, TokenType

log = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r"
_QUOTES = "\"'"


class Lexer:
    """Tokenize Cisco IOS text into a lossless stream of Token objects.

    Each instance performs a single pass; the parse mode, value-expected flag
    and last context word live on the instance and are never shared.
    """

    def __init__(self, source: str, mode: ParseMode = ParseMode.AUTO) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []
        self._mode = mode
        self._expecting_value = False
        self._last_word = ""

    @property
    def parse_mode(self) -> ParseMode:
        """The active mode; AUTO until the first word has been classified."""
        return self._mode

    def set_parse_mode(self, mode: ParseMode) -> None:
        """Pin the classification rules instead of detecting them."""
        self._mode = mode

    def tokenize(self, *, prompt: bool = True) -> list[Token]:
        """Tokenize the full source and return the token list.

        With ``prompt`` false the whole-input prompt check is skipped; the
        lexer uses this for the command typed after a prompt. Calling it
        again returns the same list.
        """
        if self._pos:
            return self._tokens

        if prompt:
            match = p.PROMPT_PATTERN.fullmatch(self._source)
            if match is not None:
                return self._lex_prompt(match)

        while self._pos < len(self._source):
            self._lex_next()
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _consume(self, text: str) -> tuple[int, int]:
        """Advance over ``text`` and return the position it started at."""
        start = (self._line, self._col)
        for _ in text:
            self._advance()
        return start

    def _emit(self, tt: TokenType, start: int, line: int, col: int) -> Token:
        tok = Token(tt, self._source[start : self._pos], line, col)
        self._tokens.append(tok)
        return tok

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _lex_next(self) -> None:
        ch = self._peek()

        if ch == "!" and self._col == 1:
            self._lex_until_eol(TokenType.COMMENT)
            return

        if ch in _QUOTES:
            self._lex_string(ch)
            return

        if ch in _WHITESPACE:
            self._lex_ws()
            return

        if self._expecting_value:
            self._expecting_value = False
            self._lex_until_eol(TokenType.VALUE)
            return

        self._lex_word()

    def _lex_until_eol(self, tt: TokenType) -> None:
        start, line, col = self._pos, self._line, self._col
        while self._pos < len(self._source) and self._peek() != "\n":
            self._advance()
        self._emit(tt, start, line, col)

    def _lex_string(self, quote: str) -> None:
        start, line, col = self._pos, self._line, self._col
        self._advance()  # opening quote
        while self._pos < len(self._source):
            ch = self._peek()
            if ch == quote:
                self._advance()
                break
            if ch == "\\" and self._pos + 1 < len(self._source):
                self._advance()
            self._advance()

        tt = TokenType.STRING
        if self._expecting_value:
            self._expecting_value = False
            tt = TokenType.VALUE
        self._emit(tt, start, line, col)

    def _lex_ws(self) -> None:
        start, line, col = self._pos, self._line, self._col
        while self._pos < len(self._source) and self._peek() in _WHITESPACE:
            self._advance()
        self._emit(TokenType.TEXT, start, line, col)

    def _lex_word(self) -> None:
        start, line, col = self._pos, self._line, self._col
        while self._pos < len(self._source):
            ch = self._peek()
            if ch in _WHITESPACE or ch in _QUOTES:
                break
            self._advance()
        word = self._source[start : self._pos]
        self._emit(self._classify(word), start, line, col)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def _classify(self, word: str) -> TokenType:
        if self._mode == ParseMode.AUTO:
            self._mode = detect_parse_mode(self._source)

        lower = word.lower()
        if self._mode == ParseMode.SHOW:
            return self._classify_show(word, lower)
        return self._classify_config(word, lower)

    def _classify_config(self, word: str, lower: str) -> TokenType:
        if lower == p.NEGATION:
            self._last_word = lower
            return TokenType.NEGATION

        if p.ASN_PATTERN.fullmatch(word):
            return TokenType.ASN

        for words, tt in _CONFIG_SETS:
            if lower in words:
                if lower in p.VALUE_KEYWORDS:
                    self._expecting_value = True
                if tt != TokenType.OPERATOR:
                    self._last_word = lower
                return tt

        return self._classify_shared(word)

    def _classify_show(self, word: str, lower: str) -> TokenType:
        if lower in p.STATES_GOOD_COMPOUND:
            return TokenType.STATE_GOOD
        if lower in p.STATES_BAD_COMPOUND:
            return TokenType.STATE_BAD

        for words, tt in _STATE_SETS:
            if lower in words:
                return tt

        if len(word) <= 2 and word in p.STATUS_SYMBOLS:
            return TokenType.STATUS_SYMBOL

        for pattern, tt in _SHOW_PATTERNS:
            if pattern.fullmatch(word):
                return tt

        if lower in p.COLUMN_HEADERS:
            return TokenType.COLUMN_HEADER

        return self._classify_shared(word)

    def _classify_shared(self, word: str) -> TokenType:
        if p.INTERFACE_PATTERN.fullmatch(word):
            return TokenType.INTERFACE
        if p.IPV4_PREFIX_PATTERN.fullmatch(word):
            return TokenType.IPV4_PREFIX
        if p.IPV4_PATTERN.fullmatch(word):
            return TokenType.IPV4
        if p.MAC_DOTTED_PATTERN.fullmatch(word) or p.MAC_COLON_PATTERN.fullmatch(word):
            return TokenType.MAC
        # Only after "community", so timestamps like 12:00 stay plain
        if self._last_word == p.COMMUNITY_CONTEXT and p.COMMUNITY_PATTERN.fullmatch(word):
            return TokenType.COMMUNITY
        if p.IPV6_PREFIX_PATTERN.fullmatch(word):
            return TokenType.IPV6_PREFIX
        if p.IPV6_PATTERN.fullmatch(word):
            return TokenType.IPV6
        if word.isascii() and word.isdigit():
            return TokenType.NUMBER
        return TokenType.IDENTIFIER

    # ------------------------------------------------------------------
    # Prompt lines
    # ------------------------------------------------------------------

    def _lex_prompt(self, match: re.Match[str]) -> list[Token]:
        """Split a whole-input prompt match into prompt tokens.

        The command typed after the prompt is tokenized by a second lexer
        with its own AUTO mode; its tokens are shifted onto this line.
        """
        parts: list[tuple[TokenType, str]] = [
            (TokenType.TEXT, match["lead"]),
            (TokenType.PROMPT_HOST, match["host"]),
            (TokenType.PROMPT_MODE, match["mode"] or ""),
        ]
        if match["char"] == p.PROMPT_CONF_CHAR:
            parts.append((TokenType.PROMPT_CONF, match["char"]))
        else:
            parts.append((TokenType.PROMPT_OPER, match["char"]))
        parts.append((TokenType.TEXT, match["sep"]))

        for tt, text in parts:
            if text:
                line, col = self._consume(text)
                self._tokens.append(Token(tt, text, line, col))

        command = match["command"]
        if command:
            for tok in Lexer(command).tokenize(prompt=False):
                line, col = self._consume(tok.value)
                self._tokens.append(Token(tok.type, tok.value, line, col))

        if match["newline"]:
            line, col = self._consume(match["newline"])
            self._tokens.append(Token(TokenType.TEXT, match["newline"], line, col))

        return self._tokens


# Config membership checks in precedence order
_CONFIG_SETS: tuple[tuple[frozenset[str], TokenType], ...] = (
    (p.COMMANDS, TokenType.COMMAND),
    (p.SECTIONS, TokenType.SECTION),
    (p.PROTOCOLS, TokenType.PROTOCOL),
    (p.ACTIONS, TokenType.ACTION),
    (p.OPERATORS, TokenType.OPERATOR),
    (p.KEYWORDS, TokenType.KEYWORD),
)

_STATE_SETS: tuple[tuple[frozenset[str], TokenType], ...] = (
    (p.STATES_GOOD, TokenType.STATE_GOOD),
    (p.STATES_BAD, TokenType.STATE_BAD),
    (p.STATES_WARNING, TokenType.STATE_WARNING),
    (p.STATES_NEUTRAL, TokenType.STATE_NEUTRAL),
)

_SHOW_PATTERNS: tuple[tuple[re.Pattern[str], TokenType], ...] = (
    (p.TIME_DURATION_PATTERN, TokenType.TIME_DURATION),
    (p.PERCENTAGE_PATTERN, TokenType.PERCENTAGE),
    (p.BYTE_SIZE_PATTERN, TokenType.BYTE_SIZE),
    (p.ROUTE_PROTOCOL_PATTERN, TokenType.ROUTE_PROTOCOL),
)


def detect_parse_mode(source: str) -> ParseMode:
    """Guess whether ``source`` is configuration or show output.

    Only the first ``MODE_SAMPLE_SIZE`` characters are examined. Weak or
    tied evidence resolves to CONFIG.
    """
    sample = source[: p.MODE_SAMPLE_SIZE]
    lower = sample.lower()

    config_score = sum(1 for ind in p.CONFIG_INDICATORS if ind in lower)
    if "\n!\n" in sample or sample.startswith("!\n"):
        config_score += 2

    show_score = sum(1 for ind in p.SHOW_INDICATORS if ind in lower)
    if p.TABULAR_PATTERN.search(sample):
        show_score += 2

    mode = ParseMode.CONFIG
    if show_score >= 2 and show_score > config_score:
        mode = ParseMode.SHOW
    log.debug("detected %s mode (config=%d, show=%d)", mode.name, config_score, show_score)
    return mode


def is_prompt(text: str) -> bool:
    """Return True if the stripped text is a complete IOS prompt line."""
    return p.PROMPT_PATTERN.fullmatch(text.strip()) is not None


def tokenize(source: str, mode: ParseMode = ParseMode.AUTO) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, mode).tokenize()
