"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from cink.tokens import Token, TokenType


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one ``line:col Category 'value'`` row per token to *file*."""
    for tok in tokens:
        if tok.type == TokenType.TEXT and tok.value.isspace():
            continue
        pos = f"{tok.line}:{tok.column}"
        file.write(f"{pos:>8} {tok.type.label:<14} {tok.value!r}\n")
