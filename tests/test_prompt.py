"""Test recognition of device prompts and the command typed after them."""

import pytest

from cink.lexer import is_prompt, tokenize
from cink.tokens import TokenType

from tests.conftest import assert_types, assert_values, find_tokens


class TestPromptTokens:
    def test_config_submode(self):
        tokens = tokenize("Router(config-if)#")
        assert_types(tokens, [TokenType.PROMPT_HOST, TokenType.PROMPT_MODE, TokenType.PROMPT_CONF])
        assert_values(tokens, ["Router", "(config-if)", "#"])

    def test_user_exec(self):
        tokens = tokenize("Router>")
        assert_types(tokens, [TokenType.PROMPT_HOST, TokenType.PROMPT_OPER])

    def test_leading_control_bytes(self):
        tokens = tokenize("\rRouter>")
        assert_types(tokens, [TokenType.TEXT, TokenType.PROMPT_HOST, TokenType.PROMPT_OPER])
        assert tokens[0].value == "\r"

    def test_command_without_separator(self):
        tokens = tokenize("Router#show ip interface brief")
        assert_types(
            tokens[:6],
            [
                TokenType.PROMPT_HOST,
                TokenType.PROMPT_CONF,
                TokenType.COMMAND,
                TokenType.TEXT,
                TokenType.COMMAND,
                TokenType.TEXT,
            ],
        )
        assert tokens[2].value == "show"
        assert tokens[2].column == 8

    def test_command_positions(self):
        tokens = tokenize("core-rtr-01.example# show version\n")
        positions = [(t.type, t.value, t.line, t.column) for t in tokens]
        assert positions[:3] == [
            (TokenType.PROMPT_HOST, "core-rtr-01.example", 1, 1),
            (TokenType.PROMPT_CONF, "#", 1, 20),
            (TokenType.TEXT, " ", 1, 21),
        ]
        assert positions[3][1:] == ("show", 1, 22)
        assert positions[-1] == (TokenType.TEXT, "\n", 1, 34)

    def test_separator_kept_verbatim(self):
        source = "R1#  show run  "
        tokens = tokenize(source)
        assert tokens[2].type == TokenType.TEXT
        assert tokens[2].value == "  "
        assert "".join(t.value for t in tokens) == source

    def test_command_is_lexed_once(self):
        tokens = tokenize("R1#R2#")
        assert len(find_tokens(tokens, TokenType.PROMPT_HOST)) == 1
        assert tokens[-1].value == "R2#"

    def test_command_value_keyword(self):
        tokens = tokenize("R1(config-if)#description Uplink to core")
        assert tokens[-1].type == TokenType.VALUE
        assert tokens[-1].value == "Uplink to core"


class TestNotPrompt:
    def test_multi_line_input(self):
        tokens = tokenize("Router#\nshow ip route")
        assert not find_tokens(tokens, TokenType.PROMPT_HOST)

    def test_missing_host(self):
        tokens = tokenize("#")
        assert not find_tokens(tokens, TokenType.PROMPT_CONF)

    def test_space_in_host(self):
        tokens = tokenize("my router#")
        assert not find_tokens(tokens, TokenType.PROMPT_HOST)


class TestIsPrompt:
    @pytest.mark.parametrize(
        "text",
        ["Router>", "Router#", "  Router(config)#  ", "R1# show run", "sw-01.lab(config-vlan)#\n"],
    )
    def test_prompt(self, text):
        assert is_prompt(text)

    @pytest.mark.parametrize("text", ["hello world", "interface Gi0/1", "", "Router#\nRouter#"])
    def test_not_prompt(self, text):
        assert not is_prompt(text)
