"""Configuration constants for pptpsetup.

All configurable values stored here for easy customization.
Single source of truth for paths, defaults and exit codes.
"""

from enum import IntEnum
from pathlib import Path

# Target Files
PPTPD_CONF: Path = Path("/etc/pptpd.conf")
PPTPD_OPTIONS: Path = Path("/etc/ppp/pptpd-options")
CHAP_SECRETS: Path = Path("/etc/ppp/chap-secrets")
SYSCTL_DROPIN: Path = Path("/etc/sysctl.d/99-pptp-ipforward.conf")
IPTABLES_RULES: Path = Path("/etc/iptables/rules.v4")

BACKUP_SUFFIX_FORMAT: str = ".bak.%Y%m%d%H%M%S"
CHAP_SECRETS_MODE: int = 0o600

# Defaults
DEFAULT_CLIENT_RANGE: str = "192.168.99.100-120"
DEFAULT_DNS: str = "1.1.1.1,8.8.8.8"
DEFAULT_USERS: str = "user:123"
FALLBACK_LOCAL_IP: str = "192.168.99.1"

# Egress detection: the interface used to route toward this address
ROUTE_PROBE_ADDRESS: str = "1.1.1.1"

# Client range: IPv4 address, dash, last octet (192.168.99.100-120)
CLIENT_RANGE_PATTERN: str = r"^([0-9]{1,3}\.){3}[0-9]{1,3}-[0-9]{1,3}$"

# Packages
REQUIRED_PACKAGES: list[str] = ["pptpd", "ppp", "iptables"]
PERSISTENCE_PACKAGE: str = "iptables-persistent"
APT_ENV: dict[str, str] = {"DEBIAN_FRONTEND": "noninteractive"}

# Kernel Forwarding
IP_FORWARD_KEY: str = "net.ipv4.ip_forward"

# Firewall
VPN_INTERFACE_PATTERN: str = "ppp+"  # iptables wildcard for all ppp links

# Service
SERVICE_NAME: str = "pptpd"
SERVICE_SETTLE_SECONDS: float = 1.0
SERVICE_STATUS_LINES: int = 15

# pptpd-options template (ms-dns lines appended after it)
PPTPD_OPTIONS_TEMPLATE: list[str] = [
    "name pptp-server",
    "",
    "refuse-pap",
    "refuse-chap",
    "refuse-mschap",
    "require-mschap-v2",
    "",
    "require-mppe-128",
    "mppe-stateful",
    "",
    "proxyarp",
    "nodefaultroute",
    "lock",
    "nobsdcomp",
    "noipx",
    "mtu 1490",
    "mru 1490",
    "",
    "# DNS servers for clients",
]

# API Configuration (public address shown in the summary)
IPINFO_URL: str = "https://ipinfo.io/json"

# Timeout and Retry
TIMEOUT_SECONDS: int = 10  # queries only; provisioning commands never time out
RETRY_ATTEMPTS: int = 3
RETRY_BACKOFF_FACTOR: float = 1.0


class ExitCode(IntEnum):
    """Exit codes for pptpsetup."""

    SUCCESS = 0
    PERMISSION_DENIED = 1
    INVALID_ARGUMENTS = 2
    PROVISIONING_FAILED = 3


# Tool Metadata
VERSION: str = "1.0.0"
TOOL_NAME: str = "pptpsetup"
