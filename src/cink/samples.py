"""Sample configuration and show output used by ``cink --demo``."""

from __future__ import annotations

CONFIG = """\
!
hostname core-router-01
!
interface GigabitEthernet0/0/0
 description Uplink to ISP
 ip address 203.0.113.1 255.255.255.252
 no shutdown
!
interface GigabitEthernet0/0/1
 description Server LAN
 ip address 10.0.1.1 255.255.255.0
 switchport mode access
 switchport access vlan 100
 spanning-tree portfast
 no shutdown
!
interface Loopback0
 ip address 10.255.255.1 255.255.255.255
!
router ospf 1
 router-id 10.255.255.1
 network 10.0.0.0 0.0.0.255 area 0
 passive-interface default
 no passive-interface GigabitEthernet0/0/0
!
router bgp 65001
 bgp log-neighbor-changes
 neighbor 203.0.113.2 remote-as 65000
 neighbor 203.0.113.2 description ISP Transit Peer
 !
 address-family ipv4 unicast
  network 10.0.0.0 mask 255.255.0.0
  neighbor 203.0.113.2 route-map ISP-IN in
 exit-address-family
!
ip access-list extended PROTECT
 permit tcp 10.0.0.0 0.0.255.255 any eq 22
 permit icmp any any
 deny   ip any any log
!
ip prefix-list DEFAULT-ONLY seq 10 permit 0.0.0.0/0
!
route-map ISP-IN permit 10
 match ip address prefix-list DEFAULT-ONLY
 set community 65001:100 additive
!
snmp-server community public RO
snmp-server location "Main Data Center, Rack 42"
!
line vty 0 15
 access-class MGMT-ACCESS in
 transport input ssh
 login local
!
end
"""

THEME_PREVIEW = """\
!
hostname router-01
!
interface GigabitEthernet0/0/0
 description Uplink to ISP
 ip address 192.168.1.1 255.255.255.0
 no shutdown
!
router bgp 65001
 neighbor 10.0.0.1 remote-as 65000
!
ip access-list extended PROTECT
 permit tcp 10.0.0.0 0.0.255.255 any eq 22
 deny   ip any any log
!
"""

BGP_SUMMARY = """\
BGP router identifier 10.255.255.1, local AS number 65001
BGP table version is 12345, main routing table version 12345

Neighbor        V           AS MsgRcvd MsgSent   TblVer  InQ OutQ Up/Down  State/PfxRcd
203.0.113.2     4        65000   12345   12340    12345    0    0 1w2d     150
10.0.0.2        4        65001    8234    8230    12345    0    0 3d12h    2500
192.168.1.1     4        65002     100     105    12345    0   15 00:05:30 Active
172.16.0.1      4        65003       0       0        0    0    0 2w1d     Idle
"""

OSPF_NEIGHBORS = """\
Neighbor ID     Pri   State           Dead Time   Address         Interface
10.255.255.2    128   FULL/DR         00:00:35    10.0.0.2        GigabitEthernet0/0/0
10.255.255.4      1   2WAY/DROTHER    00:00:32    10.0.0.10       Port-channel1
10.255.255.5    128   INIT/-          00:00:40    10.0.0.14       GigabitEthernet0/0/2
"""

INTERFACE_BRIEF = """\
Interface                  IP-Address      OK? Method Status                Protocol
GigabitEthernet0/0/0       203.0.113.1     YES manual up                    up
GigabitEthernet0/0/2       unassigned      YES unset  administratively down down
Loopback0                  10.255.255.1    YES manual up                    up
Tunnel0                    192.168.100.1   YES manual up                    down
"""

SHOW_VERSION = """\
Cisco IOS XE Software, Version 16.12.04
Cisco IOS Software [Gibraltar], Catalyst L3 Switch Software (CAT3K_CAA-UNIVERSALK9-M), Version 16.12.4
access-sw-01 uptime is 1 year, 12 weeks, 3 days, 4 hours, 51 minutes
System returned to ROM by Reload Command
Last reload reason: Reload Command

cisco WS-C3850-48P (MIPS) processor (revision AB0) with 797539K/6147K bytes of memory.
48 Gigabit Ethernet interfaces
2097152K bytes of physical memory.

Switch Ports Model              SW Version        SW Image              Mode
------ ----- -----              ----------        ----------            ----
*    1 56    WS-C3850-48P       16.12.4           CAT3K_CAA-UNIVERSALK9 INSTALL

Configuration register is 0x102
"""

MAC_TABLE = """\
Vlan    Mac Address       Type        Ports
----    -----------       --------    -----
 100    0011.2233.4455    DYNAMIC     Gi0/0/1
 200    1122.3344.5566    STATIC      Po1
"""

SHOW_OUTPUTS = (
    ("show ip bgp summary", BGP_SUMMARY),
    ("show ip ospf neighbor", OSPF_NEIGHBORS),
    ("show ip interface brief", INTERFACE_BRIEF),
    ("show version", SHOW_VERSION),
    ("show mac address-table", MAC_TABLE),
)
