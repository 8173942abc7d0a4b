"""Test classification of configuration syntax."""

import pytest

from cink.tokens import ParseMode, TokenType

from tests.conftest import assert_types, assert_values, find_tokens, type_of

CONFIG = ParseMode.CONFIG


class TestKeywordSets:
    @pytest.mark.parametrize(
        "word, expected",
        [
            ("interface", TokenType.COMMAND),
            ("router", TokenType.COMMAND),
            ("ip", TokenType.COMMAND),
            ("shutdown", TokenType.COMMAND),
            ("access-list", TokenType.SECTION),
            ("route-map", TokenType.SECTION),
            ("class-map", TokenType.SECTION),
            ("ospf", TokenType.PROTOCOL),
            ("bgp", TokenType.PROTOCOL),
            ("tacacs+", TokenType.PROTOCOL),
            ("permit", TokenType.ACTION),
            ("deny", TokenType.ACTION),
            ("eq", TokenType.OPERATOR),
            ("any", TokenType.OPERATOR),
            ("neighbor", TokenType.KEYWORD),
            ("remote-as", TokenType.KEYWORD),
            ("switchport", TokenType.KEYWORD),
        ],
    )
    def test_single_word(self, lex, word, expected):
        tokens = lex(word, CONFIG)
        assert_types(tokens, [expected])

    def test_case_insensitive(self, lex):
        assert_types(lex("INTERFACE", CONFIG), [TokenType.COMMAND])
        assert_types(lex("Permit", CONFIG), [TokenType.ACTION])


class TestNegation:
    def test_no_alone(self, lex):
        assert_types(lex("no", CONFIG), [TokenType.NEGATION])

    def test_no_shutdown(self, lex):
        tokens = lex("no shutdown", CONFIG)
        assert_types(tokens, [TokenType.NEGATION, TokenType.TEXT, TokenType.COMMAND])
        assert_values(tokens, ["no", " ", "shutdown"])

    def test_no_shutdown_auto(self, words):
        tokens = words(" no shutdown")
        assert_types(tokens, [TokenType.NEGATION, TokenType.COMMAND])


class TestASN:
    @pytest.mark.parametrize("word", ["AS65000", "as65001", "As1"])
    def test_asn(self, lex, word):
        assert_types(lex(word, CONFIG), [TokenType.ASN])

    def test_as_without_digits(self, lex):
        assert_types(lex("AS", CONFIG), [TokenType.IDENTIFIER])


class TestInterfaces:
    @pytest.mark.parametrize(
        "word",
        [
            "GigabitEthernet0/0/0.100",
            "GigabitEthernet0/0/0",
            "Gi0/0/0.10",
            "Po1",
            "Lo0",
            "BDI1",
            "TenGigabitEthernet1/0/0",
            "FastEthernet0/1",
            "Port-channel10",
            "Vlan100",
            "Tunnel0",
            "Serial0/0/0",
            "mgmt0",
            "nve1",
            "gigabitethernet1/0/1",
        ],
    )
    def test_interface(self, lex, word):
        assert_types(lex(word, CONFIG), [TokenType.INTERFACE])

    def test_family_name_alone_is_not_interface(self, lex):
        assert_types(lex("Ethernet", CONFIG), [TokenType.IDENTIFIER])

    def test_trailing_slash_is_not_interface(self, lex):
        assert_types(lex("Gi0/", CONFIG), [TokenType.IDENTIFIER])

    def test_interface_line(self, lex):
        tokens = lex("interface GigabitEthernet0/0/0", CONFIG)
        assert_types(tokens, [TokenType.COMMAND, TokenType.TEXT, TokenType.INTERFACE])


class TestAddresses:
    @pytest.mark.parametrize(
        "word, expected",
        [
            ("192.168.1.1", TokenType.IPV4),
            ("255.255.255.0", TokenType.IPV4),
            ("10.0.0.0/8", TokenType.IPV4_PREFIX),
            ("0.0.0.0/0", TokenType.IPV4_PREFIX),
            ("2001:db8::1", TokenType.IPV6),
            ("::1", TokenType.IPV6),
            ("fe80::1:2:3", TokenType.IPV6),
            ("2001:db8::/32", TokenType.IPV6_PREFIX),
            ("::/0", TokenType.IPV6_PREFIX),
            ("0011.2233.4455", TokenType.MAC),
            ("aabb.ccdd.eeff", TokenType.MAC),
            ("00:11:22:33:44:55", TokenType.MAC),
        ],
    )
    def test_address(self, lex, word, expected):
        assert_types(lex(word, CONFIG), [expected])


class TestNumbers:
    @pytest.mark.parametrize("word", ["0", "100", "65535"])
    def test_number(self, lex, word):
        assert_types(lex(word, CONFIG), [TokenType.NUMBER])

    def test_non_ascii_digits_are_identifiers(self, lex):
        assert_types(lex("١٢", CONFIG), [TokenType.IDENTIFIER])

    def test_mixed_is_identifier(self, lex):
        assert_types(lex("100abc", CONFIG), [TokenType.IDENTIFIER])


class TestComments:
    def test_bang_line(self, lex):
        tokens = lex("!", CONFIG)
        assert_types(tokens, [TokenType.COMMENT])

    def test_comment_with_text(self, lex):
        tokens = lex("! uplink section", CONFIG)
        assert_types(tokens, [TokenType.COMMENT])
        assert tokens[0].value == "! uplink section"

    def test_comment_excludes_newline(self, lex):
        tokens = lex("!\ninterface Gi0/1", CONFIG)
        assert_types(
            tokens,
            [TokenType.COMMENT, TokenType.TEXT, TokenType.COMMAND, TokenType.TEXT, TokenType.INTERFACE],
        )
        assert tokens[0].value == "!"
        assert tokens[1].value == "\n"

    def test_indented_bang_is_not_comment(self, lex):
        tokens = lex(" !", CONFIG)
        assert_types(tokens, [TokenType.TEXT, TokenType.IDENTIFIER])


class TestStrings:
    @pytest.mark.parametrize("source", ['"hello world"', "'single quoted'", '""'])
    def test_quoted(self, lex, source):
        tokens = lex(source, CONFIG)
        assert_types(tokens, [TokenType.STRING])
        assert tokens[0].value == source

    def test_escaped_quote(self, lex):
        source = '"say \\"hi\\" now"'
        tokens = lex(source, CONFIG)
        assert_types(tokens, [TokenType.STRING])
        assert tokens[0].value == source

    def test_unterminated_runs_to_end(self, lex):
        tokens = lex('"never closed\nnext line', CONFIG)
        assert_types(tokens, [TokenType.STRING])

    def test_string_after_keyword(self, words):
        tokens = words('snmp-server location "Main DC, Rack 42"', CONFIG)
        assert_types(tokens, [TokenType.COMMAND, TokenType.KEYWORD, TokenType.STRING])


class TestValueKeywords:
    def test_description(self, lex):
        tokens = lex("description Uplink to ISP", CONFIG)
        assert_types(tokens, [TokenType.KEYWORD, TokenType.TEXT, TokenType.VALUE])
        assert tokens[2].value == "Uplink to ISP"

    def test_value_stops_at_newline(self, words):
        tokens = words(" description Uplink to ISP\n no shutdown", CONFIG)
        assert_types(
            tokens,
            [TokenType.KEYWORD, TokenType.VALUE, TokenType.NEGATION, TokenType.COMMAND],
        )

    def test_remark(self, words):
        tokens = words("remark permit all traffic", CONFIG)
        assert_types(tokens, [TokenType.ACTION, TokenType.VALUE])
        assert tokens[1].value == "permit all traffic"

    def test_hostname(self, words):
        tokens = words("hostname core-router-01", CONFIG)
        assert_types(tokens, [TokenType.COMMAND, TokenType.VALUE])

    def test_banner(self, words):
        tokens = words("banner motd ^C", CONFIG)
        assert_types(tokens, [TokenType.COMMAND, TokenType.VALUE])
        assert tokens[1].value == "motd ^C"

    def test_quoted_value(self, words):
        tokens = words('description "core uplink"', CONFIG)
        assert_types(tokens, [TokenType.KEYWORD, TokenType.VALUE])
        assert tokens[1].value == '"core uplink"'

    def test_flag_consumed_once(self, words):
        tokens = words("description a b\nshutdown", CONFIG)
        assert type_of(tokens, "shutdown") == TokenType.COMMAND


class TestCommunity:
    def test_after_community_keyword(self, words):
        tokens = words("community 65000:100", CONFIG)
        assert_types(tokens, [TokenType.KEYWORD, TokenType.COMMUNITY])

    def test_set_community(self, words):
        tokens = words("set community 65001:100 additive", CONFIG)
        assert type_of(tokens, "65001:100") == TokenType.COMMUNITY

    @pytest.mark.parametrize("word", ["12:00", "3:45"])
    def test_alone_is_not_community(self, lex, word):
        tokens = lex(word)
        assert not find_tokens(tokens, TokenType.COMMUNITY)
        assert_types(tokens, [TokenType.IDENTIFIER])

    def test_identifier_does_not_reset_context(self, words):
        tokens = words("community additive 65000:100", CONFIG)
        assert type_of(tokens, "65000:100") == TokenType.COMMUNITY

    def test_keyword_resets_context(self, words):
        tokens = words("community permit 65000:100", CONFIG)
        assert type_of(tokens, "65000:100") == TokenType.IDENTIFIER

    def test_other_keyword_before(self, words):
        tokens = words("neighbor 65000:100", CONFIG)
        assert type_of(tokens, "65000:100") == TokenType.IDENTIFIER


class TestFullLines:
    def test_ip_address(self, lex):
        tokens = lex(" ip address 10.0.0.1 255.255.255.0", CONFIG)
        assert_types(
            tokens,
            [
                TokenType.TEXT,
                TokenType.COMMAND,
                TokenType.TEXT,
                TokenType.KEYWORD,
                TokenType.TEXT,
                TokenType.IPV4,
                TokenType.TEXT,
                TokenType.IPV4,
            ],
        )

    def test_access_list_entry(self, words):
        tokens = words("permit tcp 10.0.0.0 0.0.255.255 any eq 22", CONFIG)
        assert_types(
            tokens,
            [
                TokenType.ACTION,
                TokenType.PROTOCOL,
                TokenType.IPV4,
                TokenType.IPV4,
                TokenType.OPERATOR,
                TokenType.OPERATOR,
                TokenType.NUMBER,
            ],
        )

    def test_bgp_neighbor(self, words):
        tokens = words("neighbor 203.0.113.2 remote-as 65000", CONFIG)
        assert_types(
            tokens,
            [TokenType.KEYWORD, TokenType.IPV4, TokenType.KEYWORD, TokenType.NUMBER],
        )
