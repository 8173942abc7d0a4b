"""ANSI colour constants, palettes, and the named colour themes."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from cink.tokens import TokenType

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
ITALIC = "\x1b[3m"
UNDERLINE = "\x1b[4m"

BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"

BRIGHT_BLACK = "\x1b[90m"
BRIGHT_RED = "\x1b[91m"
BRIGHT_GREEN = "\x1b[92m"
BRIGHT_YELLOW = "\x1b[93m"
BRIGHT_BLUE = "\x1b[94m"
BRIGHT_MAGENTA = "\x1b[95m"
BRIGHT_CYAN = "\x1b[96m"
BRIGHT_WHITE = "\x1b[97m"


def color256(n: int) -> str:
    """Foreground escape for a 256-colour palette index."""
    return f"\x1b[38;5;{n}m"


def rgb(r: int, g: int, b: int) -> str:
    """Foreground escape for a 24-bit colour."""
    return f"\x1b[38;2;{r};{g};{b}m"


@dataclass(frozen=True, slots=True)
class Palette:
    """Semantic colours a theme is built from."""

    foreground: str  # identifiers
    comment: str  # ! lines
    command: str
    section: str
    protocol: str
    action: str
    interface: str
    ip: str
    number: str
    string: str
    keyword: str
    operator: str
    asn: str
    community: str
    value: str
    mac: str
    negation: str
    state_good: str
    state_bad: str
    state_warning: str
    duration: str
    route_protocol: str
    prompt_host: str
    prompt_mode: str
    prompt_oper: str
    prompt_conf: str


class Theme:
    """Mapping from token type to colour escape.

    Safe for concurrent use: ``set_color`` replaces the whole mapping under a
    lock, so ``color_for`` never observes a half-updated table.
    """

    def __init__(self, colors: Mapping[TokenType, str]) -> None:
        self._colors: dict[TokenType, str] = dict(colors)
        self._lock = threading.Lock()

    def color_for(self, token_type: TokenType) -> str:
        """Return the colour for ``token_type``, or "" when it is uncoloured."""
        return self._colors.get(token_type, "")

    def set_color(self, token_type: TokenType, color: str) -> None:
        """Override the colour of one token type."""
        with self._lock:
            colors = dict(self._colors)
            colors[token_type] = color
            self._colors = colors

    def colors(self) -> dict[TokenType, str]:
        """Return a snapshot of the mapping."""
        return dict(self._colors)


def build_theme(p: Palette) -> Theme:
    """Map a palette's semantic colours onto every token type."""
    return Theme(
        {
            TokenType.TEXT: "",
            TokenType.COMMAND: BOLD + p.command,
            TokenType.SECTION: BOLD + p.section,
            TokenType.PROTOCOL: p.protocol,
            TokenType.ACTION: BOLD + p.action,
            TokenType.INTERFACE: BOLD + p.interface,
            TokenType.IPV4: p.ip,
            TokenType.IPV4_PREFIX: p.ip,
            TokenType.IPV6: p.ip,
            TokenType.IPV6_PREFIX: p.ip,
            TokenType.MAC: p.mac,
            TokenType.NUMBER: p.number,
            TokenType.STRING: p.string,
            TokenType.COMMENT: ITALIC + p.comment,
            TokenType.IDENTIFIER: p.foreground,
            TokenType.KEYWORD: p.keyword,
            TokenType.OPERATOR: p.operator,
            TokenType.ASN: p.asn,
            TokenType.COMMUNITY: p.community,
            TokenType.VALUE: p.value,
            TokenType.NEGATION: BOLD + p.negation,
            TokenType.STATE_GOOD: BOLD + p.state_good,
            TokenType.STATE_BAD: BOLD + p.state_bad,
            TokenType.STATE_WARNING: BOLD + p.state_warning,
            TokenType.STATE_NEUTRAL: DIM + p.comment,
            TokenType.COLUMN_HEADER: BOLD + p.foreground,
            TokenType.STATUS_SYMBOL: BOLD + p.protocol,
            TokenType.TIME_DURATION: p.duration,
            TokenType.PERCENTAGE: p.state_good,
            TokenType.BYTE_SIZE: p.protocol,
            TokenType.ROUTE_PROTOCOL: BOLD + p.route_protocol,
            TokenType.PROMPT_HOST: BOLD + p.prompt_host,
            TokenType.PROMPT_MODE: p.prompt_mode,
            TokenType.PROMPT_OPER: BOLD + p.prompt_oper,
            TokenType.PROMPT_CONF: BOLD + p.prompt_conf,
        }
    )


# ---------------------------------------------------------------------------
# Named themes
# ---------------------------------------------------------------------------


def tokyo_night_theme() -> Theme:
    magenta = rgb(187, 154, 247)
    cyan = rgb(125, 207, 255)
    green = rgb(158, 206, 106)
    orange = rgb(255, 158, 100)
    teal = rgb(115, 218, 202)
    yellow = rgb(224, 175, 104)
    red = rgb(247, 118, 142)
    purple = rgb(157, 124, 216)
    blue = rgb(122, 162, 247)
    return build_theme(
        Palette(
            foreground=rgb(192, 202, 245),
            comment=rgb(86, 95, 137),
            command=magenta,
            section=blue,
            protocol=cyan,
            action=green,
            interface=orange,
            ip=teal,
            number=purple,
            string=green,
            keyword=yellow,
            operator=blue,
            asn=orange,
            community=magenta,
            value=cyan,
            mac=cyan,
            negation=red,
            state_good=green,
            state_bad=red,
            state_warning=yellow,
            duration=orange,
            route_protocol=purple,
            prompt_host=teal,
            prompt_mode=yellow,
            prompt_oper=green,
            prompt_conf=red,
        )
    )


def vibrant_theme() -> Theme:
    return build_theme(
        Palette(
            foreground=WHITE,
            comment=DIM + BRIGHT_BLACK,
            command=BRIGHT_YELLOW,
            section=BRIGHT_BLUE,
            protocol=BRIGHT_CYAN,
            action=BRIGHT_GREEN,
            interface=BRIGHT_MAGENTA,
            ip=BRIGHT_GREEN,
            number=BRIGHT_CYAN,
            string=BRIGHT_YELLOW,
            keyword=YELLOW,
            operator=BRIGHT_WHITE,
            asn=BRIGHT_MAGENTA,
            community=MAGENTA,
            value=BRIGHT_CYAN,
            mac=CYAN,
            negation=BRIGHT_RED,
            state_good=BRIGHT_GREEN,
            state_bad=BRIGHT_RED,
            state_warning=BRIGHT_YELLOW,
            duration=BRIGHT_MAGENTA,
            route_protocol=MAGENTA,
            prompt_host=BOLD + BRIGHT_CYAN,
            prompt_mode=BRIGHT_YELLOW,
            prompt_oper=BOLD + BRIGHT_GREEN,
            prompt_conf=BOLD + BRIGHT_RED,
        )
    )


def solarized_dark_theme() -> Theme:
    base0 = color256(244)
    yellow = color256(136)
    orange = color256(166)
    red = color256(160)
    magenta = color256(125)
    violet = color256(61)
    blue = color256(33)
    cyan = color256(37)
    green = color256(64)
    return build_theme(
        Palette(
            foreground=base0,
            comment=color256(240),
            command=yellow,
            section=blue,
            protocol=cyan,
            action=green,
            interface=magenta,
            ip=green,
            number=cyan,
            string=yellow,
            keyword=orange,
            operator=base0,
            asn=magenta,
            community=violet,
            value=cyan,
            mac=cyan,
            negation=red,
            state_good=green,
            state_bad=red,
            state_warning=yellow,
            duration=orange,
            route_protocol=violet,
            prompt_host=BOLD + cyan,
            prompt_mode=yellow,
            prompt_oper=BOLD + green,
            prompt_conf=BOLD + red,
        )
    )


def monokai_theme() -> Theme:
    pink = color256(197)
    green = color256(148)
    orange = color256(208)
    purple = color256(141)
    cyan = color256(81)
    yellow = color256(186)
    return build_theme(
        Palette(
            foreground=color256(231),
            comment=color256(242),
            command=pink,
            section=cyan,
            protocol=purple,
            action=green,
            interface=orange,
            ip=green,
            number=purple,
            string=yellow,
            keyword=orange,
            operator=pink,
            asn=orange,
            community=purple,
            value=cyan,
            mac=cyan,
            negation=color256(196),
            state_good=green,
            state_bad=color256(196),
            state_warning=yellow,
            duration=orange,
            route_protocol=purple,
            prompt_host=BOLD + cyan,
            prompt_mode=yellow,
            prompt_oper=BOLD + green,
            prompt_conf=BOLD + pink,
        )
    )


def nord_theme() -> Theme:
    nord7 = color256(109)
    nord8 = color256(110)
    nord9 = color256(68)
    nord11 = color256(167)
    nord12 = color256(173)
    nord13 = color256(179)
    nord14 = color256(108)
    nord15 = color256(139)
    return build_theme(
        Palette(
            foreground=color256(252),
            comment=color256(60),
            command=nord13,
            section=nord9,
            protocol=nord8,
            action=nord14,
            interface=nord15,
            ip=nord14,
            number=nord15,
            string=nord13,
            keyword=nord12,
            operator=nord9,
            asn=nord12,
            community=nord15,
            value=nord8,
            mac=nord7,
            negation=nord11,
            state_good=nord14,
            state_bad=nord11,
            state_warning=nord13,
            duration=nord12,
            route_protocol=nord15,
            prompt_host=BOLD + nord7,
            prompt_mode=nord13,
            prompt_oper=BOLD + nord14,
            prompt_conf=BOLD + nord11,
        )
    )


def catppuccin_mocha_theme() -> Theme:
    red = rgb(243, 139, 168)
    peach = rgb(250, 179, 135)
    yellow = rgb(249, 226, 175)
    green = rgb(166, 227, 161)
    sky = rgb(137, 220, 235)
    sapphire = rgb(116, 199, 236)
    mauve = rgb(203, 166, 247)
    return build_theme(
        Palette(
            foreground=rgb(205, 214, 244),
            comment=rgb(108, 112, 134),
            command=mauve,
            section=rgb(137, 180, 250),
            protocol=sapphire,
            action=green,
            interface=peach,
            ip=rgb(148, 226, 213),
            number=rgb(180, 190, 254),
            string=green,
            keyword=yellow,
            operator=sky,
            asn=peach,
            community=rgb(245, 194, 231),
            value=sky,
            mac=sky,
            negation=red,
            state_good=green,
            state_bad=red,
            state_warning=yellow,
            duration=peach,
            route_protocol=mauve,
            prompt_host=BOLD + sapphire,
            prompt_mode=yellow,
            prompt_oper=BOLD + green,
            prompt_conf=BOLD + red,
        )
    )


def dracula_theme() -> Theme:
    cyan = rgb(139, 233, 253)
    green = rgb(80, 250, 123)
    orange = rgb(255, 184, 108)
    pink = rgb(255, 121, 198)
    purple = rgb(189, 147, 249)
    red = rgb(255, 85, 85)
    yellow = rgb(241, 250, 140)
    return build_theme(
        Palette(
            foreground=rgb(248, 248, 242),
            comment=rgb(98, 114, 164),
            command=pink,
            section=purple,
            protocol=cyan,
            action=green,
            interface=orange,
            ip=green,
            number=purple,
            string=yellow,
            keyword=orange,
            operator=pink,
            asn=orange,
            community=purple,
            value=cyan,
            mac=cyan,
            negation=red,
            state_good=green,
            state_bad=red,
            state_warning=yellow,
            duration=orange,
            route_protocol=purple,
            prompt_host=BOLD + cyan,
            prompt_mode=yellow,
            prompt_oper=BOLD + green,
            prompt_conf=BOLD + red,
        )
    )


def gruvbox_dark_theme() -> Theme:
    foreground = rgb(235, 219, 178)
    red = rgb(251, 73, 52)
    green = rgb(184, 187, 38)
    yellow = rgb(250, 189, 47)
    purple = rgb(211, 134, 155)
    aqua = rgb(142, 192, 124)
    orange = rgb(254, 128, 25)
    return build_theme(
        Palette(
            foreground=foreground,
            comment=rgb(146, 131, 116),
            command=yellow,
            section=rgb(131, 165, 152),
            protocol=aqua,
            action=green,
            interface=orange,
            ip=aqua,
            number=purple,
            string=green,
            keyword=orange,
            operator=foreground,
            asn=orange,
            community=purple,
            value=aqua,
            mac=aqua,
            negation=red,
            state_good=green,
            state_bad=red,
            state_warning=yellow,
            duration=orange,
            route_protocol=purple,
            prompt_host=BOLD + aqua,
            prompt_mode=yellow,
            prompt_oper=BOLD + green,
            prompt_conf=BOLD + red,
        )
    )


def one_dark_theme() -> Theme:
    foreground = rgb(171, 178, 191)
    red = rgb(224, 108, 117)
    green = rgb(152, 195, 121)
    yellow = rgb(229, 192, 123)
    purple = rgb(198, 120, 221)
    cyan = rgb(86, 182, 194)
    orange = rgb(209, 154, 102)
    return build_theme(
        Palette(
            foreground=foreground,
            comment=rgb(92, 99, 112),
            command=purple,
            section=rgb(97, 175, 239),
            protocol=cyan,
            action=green,
            interface=orange,
            ip=green,
            number=orange,
            string=green,
            keyword=yellow,
            operator=foreground,
            asn=orange,
            community=purple,
            value=cyan,
            mac=cyan,
            negation=red,
            state_good=green,
            state_bad=red,
            state_warning=yellow,
            duration=orange,
            route_protocol=purple,
            prompt_host=BOLD + cyan,
            prompt_mode=yellow,
            prompt_oper=BOLD + green,
            prompt_conf=BOLD + red,
        )
    )


_THEMES: dict[str, Callable[[], Theme]] = {
    "tokyonight": tokyo_night_theme,
    "vibrant": vibrant_theme,
    "solarized": solarized_dark_theme,
    "monokai": monokai_theme,
    "nord": nord_theme,
    "catppuccin": catppuccin_mocha_theme,
    "dracula": dracula_theme,
    "gruvbox": gruvbox_dark_theme,
    "onedark": one_dark_theme,
}

_ALIASES = {
    "tokyo-night": "tokyonight",
    "tokyo": "tokyonight",
    "catppuccin-mocha": "catppuccin",
    "mocha": "catppuccin",
    "gruvbox-dark": "gruvbox",
    "one-dark": "onedark",
}

THEME_NAMES = tuple(_THEMES)
DEFAULT_THEME = "tokyonight"


def _canonical(name: str) -> str:
    key = name.strip().lower()
    return _ALIASES.get(key, key)


def is_theme_name(name: str) -> bool:
    """Return True if ``name`` (or an alias) names a built-in theme."""
    return _canonical(name) in _THEMES


def theme_by_name(name: str) -> Theme:
    """Build a fresh theme by name; unknown names fall back to the default."""
    factory = _THEMES.get(_canonical(name), _THEMES[DEFAULT_THEME])
    return factory()


def default_theme() -> Theme:
    return _THEMES[DEFAULT_THEME]()
