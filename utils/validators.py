"""Input validation utilities.

Validation for interface names, IPv4 addresses and pptpd client ranges.
Interface names end up in iptables arguments, so they are checked before use.
"""

import ipaddress
import re

import config


def validate_interface_name(name: str) -> bool:
    """Validate interface name (security check).

    Allowed characters: [a-zA-Z0-9._:@-]
    Max length: 64

    Args:
        name: Interface name to validate

    Returns:
        True if valid, False otherwise.
    """
    if not name or len(name) > 64:
        return False

    return re.match(r"^[a-zA-Z0-9._:@-]+$", name) is not None


def is_valid_ipv4(address: str | None) -> bool:
    """Validate IPv4 address.

    Args:
        address: IPv4 address string or None

    Returns:
        True if valid IPv4 address, False otherwise.
    """
    if not address:
        return False
    try:
        ipaddress.IPv4Address(address)
        return True
    except ValueError:
        return False


def is_valid_client_range(value: str | None) -> bool:
    """Validate a pptpd remoteip range in "IPv4-lastOctet" form.

    Examples:
        "192.168.99.100-120" -> True
        "192.168.99.100-192.168.99.120" -> False
        "192.168.099.100-120" -> True (leading zeros allowed)
        "192.168.99.300-120" -> False (octet above 255)

    Args:
        value: Range string or None

    Returns:
        True if valid, False otherwise.
    """
    if not value or not re.fullmatch(config.CLIENT_RANGE_PATTERN, value):
        return False

    start, end_octet = value.rsplit("-", 1)
    return all(int(octet) <= 255 for octet in start.split(".") + [end_octet])
