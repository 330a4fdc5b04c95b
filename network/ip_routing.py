"""Egress interface and address detection.

Best-effort: every function returns None when detection fails and leaves
the fallback decision to the caller.
"""

import re

import config
from logging_config import get_logger
from models import NetworkInterfaceInfo
from utils import is_valid_ipv4, run_command, sanitize_for_log, validate_interface_name

logger = get_logger(__name__)


def get_default_interface() -> str | None:
    """Get interface the kernel routes toward the probe address.

    Command: ip route get 1.1.1.1

    Returns:
        Validated interface name or None if no route exists.
    """
    output = run_command(["ip", "route", "get", config.ROUTE_PROBE_ADDRESS])
    if not output:
        logger.debug("No route toward %s", config.ROUTE_PROBE_ADDRESS)
        return None

    # Format: "1.1.1.1 via 10.0.0.1 dev eth0 src 10.0.0.5 uid 0"
    match = re.search(r"\bdev\s+(\S+)", output)
    if not match:
        return None

    iface = match.group(1)
    if not validate_interface_name(iface):
        logger.warning("Ignoring invalid interface name: %s", sanitize_for_log(iface))
        return None

    logger.debug("Default egress interface: %s", iface)
    return iface


def get_interface_ipv4(iface_name: str) -> str | None:
    """Get primary IPv4 address of an interface.

    Command: ip -4 -o addr show dev <interface>

    Args:
        iface_name: Interface name

    Returns:
        First IPv4 address (prefix length stripped) or None.
    """
    output = run_command(["ip", "-4", "-o", "addr", "show", "dev", iface_name])
    if not output:
        return None

    for line in output.split("\n"):
        # Format: "2: eth0    inet 10.0.0.5/24 brd 10.0.0.255 scope global eth0"
        match = re.search(r"\binet\s+([0-9.]+)(?:/\d+)?", line)
        if match and is_valid_ipv4(match.group(1)):
            return match.group(1)

    return None


def get_egress_interface() -> NetworkInterfaceInfo | None:
    """Detect egress interface together with its primary IPv4.

    Returns:
        NetworkInterfaceInfo (ipv4 may be None) or None if no default route.
    """
    iface = get_default_interface()
    if not iface:
        return None

    ipv4 = get_interface_ipv4(iface)
    logger.debug("[%s] IPv4: %s", iface, ipv4 or "N/A")
    return NetworkInterfaceInfo(name=iface, ipv4=ipv4)
