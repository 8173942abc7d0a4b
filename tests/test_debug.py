"""Test the --debug token dump."""

import io

from cink.debug import dump_tokens
from cink.lexer import tokenize
from cink.tokens import ParseMode


def test_rows_skip_whitespace():
    buf = io.StringIO()
    dump_tokens(tokenize("interface Gi0/1\n no shutdown", ParseMode.CONFIG), file=buf)
    rows = buf.getvalue().splitlines()
    assert len(rows) == 4
    assert rows[0].split() == ["1:1", "Command", "'interface'"]
    assert rows[2].split() == ["2:2", "Negation", "'no'"]


def test_position_right_aligned():
    buf = io.StringIO()
    dump_tokens(tokenize("up", ParseMode.SHOW), file=buf)
    assert buf.getvalue() == "     1:1 StateGood      'up'\n"


def test_empty():
    buf = io.StringIO()
    dump_tokens([], file=buf)
    assert buf.getvalue() == ""
