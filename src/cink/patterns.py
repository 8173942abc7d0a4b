"""Word sets and regular expressions used to classify Cisco IOS text.

Pure data: nothing in this module holds state or performs classification.
All regexes use ``re.ASCII`` so ``\\d`` and ``\\w`` match the same characters
IOS does.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Configuration syntax
# ---------------------------------------------------------------------------

COMMANDS = frozenset(
    {
        "interface", "router", "ip", "ipv6", "show", "configure", "hostname",
        "username", "enable", "service", "line", "logging", "ntp",
        "snmp-server", "crypto", "aaa", "spanning-tree", "vlan", "banner",
        "shutdown", "write", "copy", "reload", "ping", "traceroute", "clock",
        "boot", "archive", "errdisable", "default-gateway", "do", "exit", "end",
    }
)  # fmt: skip

SECTIONS = frozenset(
    {
        "interface", "router", "line", "access-list", "route-map",
        "prefix-list", "class-map", "policy-map", "crypto", "vlan",
        "redundancy", "controller", "key", "track", "monitor", "event",
        "applet",
    }
)  # fmt: skip

PROTOCOLS = frozenset(
    {
        "ospf", "bgp", "eigrp", "rip", "isis", "mpls", "hsrp", "vrrp", "stp",
        "rstp", "lacp", "dot1q", "ipsec", "gre", "tcp", "udp", "icmp", "ssh",
        "dhcp", "bfd", "cdp", "lldp", "evpn", "vxlan", "isakmp", "nhrp", "pim",
        "igmp", "msdp", "lisp", "omp", "snmp", "radius", "tacacs", "tacacs+",
        "telnet", "ftp", "tftp", "http", "https", "ntp", "dns", "syslog",
        "netflow", "sflow", "ipfix",
    }
)  # fmt: skip

ACTIONS = frozenset(
    {
        "permit", "deny", "log", "log-input", "established", "match", "set",
        "remark", "evaluate", "reflect",
    }
)  # fmt: skip

OPERATORS = frozenset({"eq", "gt", "lt", "neq", "range", "ge", "le", "any", "host"})

KEYWORDS = frozenset(
    {
        # interface
        "description", "address", "switchport", "speed", "duplex", "mtu",
        "bandwidth", "encapsulation", "channel-group", "channel-protocol",
        "standby", "no-autostate", "autostate",
        # routing
        "network", "neighbor", "redistribute", "area", "remote-as",
        "update-source", "route-map", "access-group", "nat", "inside",
        "outside", "overload", "default-information", "originate",
        "summary-address", "passive-interface", "distance", "metric", "weight",
        "local-preference", "next-hop-self", "soft-reconfiguration", "inbound",
        "prefix-list", "distribute-list", "maximum-paths", "auto-summary",
        "synchronization", "log-neighbor-changes", "address-family", "unicast",
        "multicast", "vpnv4", "vpnv6",
        # security
        "access-class", "transport", "input", "output", "login", "password",
        "secret", "privilege", "authentication", "authorization", "accounting",
        "group", "method", "local",
        # system
        "version", "source", "trap", "community", "location", "contact",
        "default", "timeout", "exec-timeout", "mask", "wildcard",
        "inverse-mask",
        # spanning-tree
        "mode", "priority", "vlan", "portfast", "bpduguard", "bpdufilter",
        "guard", "root",
        # vlan
        "name", "state", "active", "suspend",
        # qos
        "class", "police", "shape", "queue", "dscp", "cos", "service-policy",
        "policy-map",
        # aaa
        "new-model", "server", "key",
        # other
        "trunk", "native", "allowed", "tagging", "nonegotiate", "negotiation",
        "auto", "half", "flow-control", "send", "both", "storm-control",
        "level",
    }
)  # fmt: skip

# Words whose argument is free text running to end of line
VALUE_KEYWORDS = frozenset({"description", "hostname", "banner", "remark"})

NEGATION = "no"

ASN_PATTERN = re.compile(r"[Aa][Ss]\d+", re.ASCII)

# ---------------------------------------------------------------------------
# Shared (both modes)
# ---------------------------------------------------------------------------

# Long and abbreviated interface family names followed by slot/port numbers
# and an optional sub-interface: GigabitEthernet0/0/0.100, Gi0/1, Po1, Lo0
INTERFACE_PATTERN = re.compile(
    r"(?:GigabitEthernet|Gi|FastEthernet|Fa|TenGigabitEthernet|TenGigE|Te"
    r"|TwentyFiveGigE|TwentyFiveGigabitEthernet|FortyGigabitEthernet|Fo"
    r"|HundredGigE|Hu|Ethernet|Eth|Loopback|Lo|Vlan|Vl|Port-channel|Po"
    r"|Tunnel|Tu|Serial|Se|Null|BDI|mgmt|nve|Dialer|Di|Virtual-Template|Vt"
    r"|Virtual-Access|Va|Multilink|Mu|ATM|Cellular|Async)"
    r"\d+(?:/\d+)*(?:\.\d+)?",
    re.ASCII | re.IGNORECASE,
)

IPV4_PATTERN = re.compile(r"(?:\d{1,3}\.){3}\d{1,3}", re.ASCII)
IPV4_PREFIX_PATTERN = re.compile(r"(?:\d{1,3}\.){3}\d{1,3}/\d{1,2}", re.ASCII)

# IPv6 needs either "::" or at least three colon-separated groups, which keeps
# single-colon text such as timestamps out.
_IPV6_BODY = (
    r"(?:[0-9a-fA-F]{0,4}:){2,7}[0-9a-fA-F]{0,4}"
    r"|::(?:[0-9a-fA-F]{1,4}:)*[0-9a-fA-F]{0,4}"
    r"|[0-9a-fA-F]{1,4}::(?:[0-9a-fA-F]{1,4}:)*[0-9a-fA-F]{0,4}"
)
IPV6_PATTERN = re.compile(_IPV6_BODY, re.ASCII)
IPV6_PREFIX_PATTERN = re.compile(rf"(?:{_IPV6_BODY})/\d{{1,3}}", re.ASCII)

MAC_DOTTED_PATTERN = re.compile(r"[0-9a-fA-F]{4}\.[0-9a-fA-F]{4}\.[0-9a-fA-F]{4}", re.ASCII)
MAC_COLON_PATTERN = re.compile(r"(?:[0-9a-fA-F]{2}:){5}[0-9a-fA-F]{2}", re.ASCII)

COMMUNITY_PATTERN = re.compile(r"\d+:\d+", re.ASCII)
COMMUNITY_CONTEXT = "community"

# ---------------------------------------------------------------------------
# Show output
# ---------------------------------------------------------------------------

STATES_GOOD = frozenset(
    {
        "up", "connected", "established", "full", "enabled", "active",
        "forwarding", "ok", "online", "running", "ready", "complete",
    }
)  # fmt: skip

STATES_BAD = frozenset(
    {
        "down", "notconnect", "err-disabled", "disabled", "failed", "idle",
        "connect", "opensent", "openconfirm", "error", "offline",
        "unreachable",
    }
)  # fmt: skip

STATES_WARNING = frozenset(
    {
        "init", "2way", "exstart", "exchange", "loading", "attempt",
        "flapping", "pending", "waiting", "starting", "stopping",
    }
)  # fmt: skip

STATES_NEUTRAL = frozenset({"inactive", "standby", "backup", "suspended", "n/a", "none"})

# Matched as whole words before the single-word state sets
STATES_GOOD_COMPOUND = ("up/up",)
STATES_BAD_COMPOUND = ("down/down", "administratively")

COLUMN_HEADERS = frozenset(
    {
        "interface", "status", "protocol", "address", "admin", "link", "speed",
        "type", "duplex", "neighbor", "peer", "state", "as", "inpkt", "outpkt",
        "uptime", "dead", "pri", "mtu", "metric", "local", "remote", "outq",
        "up/dn", "flaps", "prefixes", "paths", "vlan", "description",
    }
)  # fmt: skip

# Case-sensitive: route table codes are upper case
STATUS_SYMBOLS = frozenset({"*", "+", "-", ">", "B", "O", "I", "S", "L", "D", "C", "R"})

TIME_DURATION_PATTERN = re.compile(r"(?:\d+[wdhms])+|\d+:\d{2}(?::\d{2})?", re.ASCII)
PERCENTAGE_PATTERN = re.compile(r"\d+(?:\.\d+)?%", re.ASCII)
BYTE_SIZE_PATTERN = re.compile(r"\d+(?:\.\d+)?[KMGTP][Bb]?", re.ASCII)
ROUTE_PROTOCOL_PATTERN = re.compile(
    r"\[(?:BGP|OSPF|EIGRP|RIP|ISIS|Static|Direct|Local|Connected|Aggregate)/\d+\]",
    re.ASCII,
)

# ---------------------------------------------------------------------------
# Mode detection and the heuristic gate
# ---------------------------------------------------------------------------

MODE_SAMPLE_SIZE = 500

CONFIG_INDICATORS = (
    "hostname ", "interface ", "router ", "ip address ", "switchport ",
    "access-list ", "no ", "line vty", "line con", "service ", "enable ",
    "username ", "ip route ", "snmp-server ", "logging ", "ntp ", "crypto ",
    "aaa ", "spanning-tree ", "vlan ", "banner ", "ip access-list ",
)  # fmt: skip

SHOW_INDICATORS = (
    "line protocol", "up/up", "down/down", "notconnect", "err-disabled",
    "connected", "bgp summary", "ospf neighbor", "show ", "last input",
    "last output", "5 minute", "input rate", "output rate", "show version",
    "cisco ios",
)  # fmt: skip

# Three words separated by runs of two or more spaces: a columnar table
TABULAR_PATTERN = re.compile(r"\w+\s{2,}\w+\s{2,}\w+", re.ASCII)

# Multi-word phrases that practically only occur in IOS configurations
CISCO_PHRASES = (
    "switchport mode", "ip address ", "ip route ", "router ospf", "router bgp",
    "router eigrp", "transport input", "exec-timeout", "channel-group",
    "spanning-tree portfast",
)  # fmt: skip

# ---------------------------------------------------------------------------
# Prompt
# ---------------------------------------------------------------------------

# Router>  Router#  Router(config-if)#  core-rtr-01.example# show ip route
PROMPT_PATTERN = re.compile(
    r"(?P<lead>[\s\x00-\x1f]*)"
    r"(?P<host>[\w.-]+)"
    r"(?P<mode>\([\w-]+\))?"
    r"(?P<char>[>#])"
    r"(?P<sep>[ \t\f\v\r]*)"
    r"(?P<command>.*?)"
    r"(?P<newline>\n?)",
    re.ASCII,
)

PROMPT_OPER_CHAR = ">"
PROMPT_CONF_CHAR = "#"
