"""Token types, parse modes, and the Token data structure."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Configuration syntax
    TEXT = auto()  # whitespace and separators, never coloured
    COMMAND = auto()  # interface, router, ip, show, configure
    SECTION = auto()  # access-list, route-map, class-map
    PROTOCOL = auto()  # ospf, bgp, eigrp, tcp, udp
    ACTION = auto()  # permit, deny, log, match, set
    INTERFACE = auto()  # GigabitEthernet0/0/0, Gi0/0/0, Lo0
    IPV4 = auto()  # 192.168.1.1
    IPV4_PREFIX = auto()  # 192.168.1.0/24
    IPV6 = auto()  # 2001:db8::1
    IPV6_PREFIX = auto()  # 2001:db8::/32
    MAC = auto()  # 0011.2233.4455, 00:11:22:33:44:55
    NUMBER = auto()  # 100
    STRING = auto()  # "quoted string"
    COMMENT = auto()  # ! line
    IDENTIFIER = auto()  # anything unrecognised
    KEYWORD = auto()  # description, neighbor, remote-as
    OPERATOR = auto()  # eq, gt, lt, range, any, host
    ASN = auto()  # AS65000
    COMMUNITY = auto()  # 65000:100 after "community"
    VALUE = auto()  # rest of line after description/hostname/banner/remark
    NEGATION = auto()  # no

    # Show output
    STATE_GOOD = auto()  # up, connected, established, full
    STATE_BAD = auto()  # down, notconnect, err-disabled
    STATE_WARNING = auto()  # init, 2way, exstart, loading
    STATE_NEUTRAL = auto()  # inactive, standby, backup
    COLUMN_HEADER = auto()  # Interface, Status, Protocol
    STATUS_SYMBOL = auto()  # * + > and route codes
    TIME_DURATION = auto()  # 1w2d, 00:05:30
    PERCENTAGE = auto()  # 99.9%
    BYTE_SIZE = auto()  # 1.5G, 500M
    ROUTE_PROTOCOL = auto()  # [OSPF/110]

    # Prompt
    PROMPT_HOST = auto()  # Router
    PROMPT_MODE = auto()  # (config-if)
    PROMPT_OPER = auto()  # >
    PROMPT_CONF = auto()  # #

    @property
    def label(self) -> str:
        """CamelCase display name, e.g. ``IPv4Prefix`` or ``StateGood``."""
        return _LABELS[self]

    @classmethod
    def from_label(cls, name: str) -> TokenType:
        """Look up a token type by label or member name, case-insensitively."""
        key = name.strip().lower().replace("-", "_")
        for tt in cls:
            if key in (tt.label.lower(), tt.name.lower()):
                return tt
        raise KeyError(name)


_LABEL_OVERRIDES = {
    TokenType.IPV4: "IPv4",
    TokenType.IPV4_PREFIX: "IPv4Prefix",
    TokenType.IPV6: "IPv6",
    TokenType.IPV6_PREFIX: "IPv6Prefix",
    TokenType.MAC: "MAC",
    TokenType.ASN: "ASN",
}

_LABELS = {
    tt: _LABEL_OVERRIDES.get(tt, "".join(part.capitalize() for part in tt.name.split("_")))
    for tt in TokenType
}


class ParseMode(Enum):
    """Which classification rule set the lexer applies."""

    AUTO = auto()
    CONFIG = auto()
    SHOW = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified, positioned slice of the source text.

    ``value`` is always the verbatim source text; ``line`` and ``column``
    are 1-based and refer to the first character.
    """

    type: TokenType
    value: str
    line: int
    column: int

    @property
    def end_column(self) -> int:
        """Column just past the token's last character on its final line."""
        if "\n" in self.value:
            return len(self.value) - self.value.rfind("\n")
        return self.column + len(self.value)
