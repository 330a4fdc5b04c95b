"""Network modules for pptpsetup.

Provides egress detection, IPv4 forwarding, NAT rules
and public address lookup.
"""

from .external_ip import get_public_ipv4
from .firewall import build_nat_rules, ensure_rule, persist_rules, setup_nat_firewall
from .ip_routing import get_default_interface, get_egress_interface, get_interface_ipv4
from .sysctl import enable_ip_forward

__all__ = [
    # Detection
    "get_default_interface",
    "get_interface_ipv4",
    "get_egress_interface",
    # Forwarding
    "enable_ip_forward",
    # Firewall
    "build_nat_rules",
    "ensure_rule",
    "persist_rules",
    "setup_nat_firewall",
    # External IP
    "get_public_ipv4",
]
