"""Minimal LSP server for Cisco IOS files: semantic tokens and hover."""

from __future__ import annotations

from collections.abc import Iterator

from lsprotocol.types import (
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from cink import __version__
from cink.lexer import tokenize
from cink.tokens import Token, TokenType

# Standard LSP semantic token types, so any client theme colours them
_SEMANTIC_TYPES: dict[TokenType, str] = {
    TokenType.COMMAND: "keyword",
    TokenType.KEYWORD: "keyword",
    TokenType.SECTION: "namespace",
    TokenType.PROTOCOL: "type",
    TokenType.ACTION: "function",
    TokenType.OPERATOR: "operator",
    TokenType.STATUS_SYMBOL: "operator",
    TokenType.INTERFACE: "class",
    TokenType.IPV4: "enumMember",
    TokenType.IPV4_PREFIX: "enumMember",
    TokenType.IPV6: "enumMember",
    TokenType.IPV6_PREFIX: "enumMember",
    TokenType.MAC: "enumMember",
    TokenType.NUMBER: "number",
    TokenType.TIME_DURATION: "number",
    TokenType.PERCENTAGE: "number",
    TokenType.BYTE_SIZE: "number",
    TokenType.STRING: "string",
    TokenType.VALUE: "string",
    TokenType.COMMENT: "comment",
    TokenType.IDENTIFIER: "variable",
    TokenType.PROMPT_HOST: "variable",
    TokenType.ASN: "parameter",
    TokenType.COMMUNITY: "parameter",
    TokenType.NEGATION: "macro",
    TokenType.PROMPT_OPER: "macro",
    TokenType.PROMPT_CONF: "macro",
    TokenType.COLUMN_HEADER: "property",
    TokenType.PROMPT_MODE: "property",
    TokenType.STATE_GOOD: "event",
    TokenType.STATE_BAD: "event",
    TokenType.STATE_WARNING: "event",
    TokenType.STATE_NEUTRAL: "event",
    TokenType.ROUTE_PROTOCOL: "decorator",
}

LEGEND_TYPES: list[str] = list(dict.fromkeys(_SEMANTIC_TYPES.values()))
LEGEND = SemanticTokensLegend(token_types=LEGEND_TYPES, token_modifiers=[])

server = LanguageServer("cink-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _pieces(tok: Token) -> Iterator[tuple[int, int, str]]:
    """Yield ``(line, character, text)`` per source line a token covers, 0-based."""
    for i, text in enumerate(tok.value.split("\n")):
        if not text:
            continue
        char = tok.column - 1 if i == 0 else 0
        yield tok.line - 1 + i, char, text


def encode_semantic_tokens(tokens: list[Token]) -> list[int]:
    """Encode tokens into the LSP relative five-integer format."""
    data: list[int] = []
    prev_line = 0
    prev_char = 0
    for tok in tokens:
        kind = _SEMANTIC_TYPES.get(tok.type)
        if kind is None:
            continue
        type_index = LEGEND_TYPES.index(kind)
        for line, char, text in _pieces(tok):
            delta_line = line - prev_line
            delta_char = char - prev_char if delta_line == 0 else char
            data.extend((delta_line, delta_char, len(text), type_index, 0))
            prev_line, prev_char = line, char
    return data


def token_at(tokens: list[Token], line: int, character: int) -> tuple[Token, Range] | None:
    """Find the non-whitespace token covering a 0-based position."""
    for tok in tokens:
        if tok.type == TokenType.TEXT:
            continue
        for piece_line, char, text in _pieces(tok):
            if piece_line == line and char <= character < char + len(text):
                rng = Range(
                    start=Position(line=piece_line, character=char),
                    end=Position(line=piece_line, character=char + len(text)),
                )
                return tok, rng
    return None


def _semantic_tokens(ls: LanguageServer, uri: str) -> SemanticTokens:
    doc = ls.workspace.get_text_document(uri)
    return SemanticTokens(data=encode_semantic_tokens(tokenize(doc.source)))


def _hover(ls: LanguageServer, uri: str, position: Position) -> Hover | None:
    doc = ls.workspace.get_text_document(uri)
    found = token_at(tokenize(doc.source), position.line, position.character)
    if found is None:
        return None
    tok, rng = found
    return Hover(
        contents=MarkupContent(
            kind=MarkupKind.Markdown,
            value=f"**{tok.type.label}** `{tok.value.strip()}`",
        ),
        range=rng,
    )


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL, LEGEND)
def semantic_tokens_full(ls: LanguageServer, params: SemanticTokensParams) -> SemanticTokens:
    return _semantic_tokens(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: LanguageServer, params: HoverParams) -> Hover | None:
    return _hover(ls, params.text_document.uri, params.position)


def main() -> None:
    server.start_io()
