"""Configuration resolver.

Turns raw CLI values into a fully populated ServerConfig. Only the local
IP lookup touches the system (read-only `ip` queries).
"""

import config
from errors import ConfigurationError
from logging_config import get_logger
from models import ServerConfig, UserCredential
from network import get_egress_interface
from utils import is_valid_client_range, is_valid_ipv4, sanitize_for_log, split_csv

logger = get_logger(__name__)


def _check_local_ip(local_ip: str) -> None:
    if not is_valid_ipv4(local_ip):
        raise ConfigurationError(f"Invalid --local-ip value: {sanitize_for_log(local_ip)}")


def resolve_local_ip(local_ip: str | None) -> str:
    """Validate the given local IP or detect one.

    Detection: IPv4 of the default egress interface. Falls back to
    FALLBACK_LOCAL_IP with a warning if detection fails.

    Args:
        local_ip: --local-ip value or None

    Returns:
        IPv4 address string.

    Raises:
        ConfigurationError: If a given value is not an IPv4 address.
    """
    if local_ip:
        _check_local_ip(local_ip)
        return local_ip

    egress = get_egress_interface()
    if egress and egress.ipv4:
        logger.debug("Detected local IP %s on %s", egress.ipv4, egress.name)
        return egress.ipv4

    logger.warning(
        "Could not detect this host's IPv4 address; using %s as localip",
        config.FALLBACK_LOCAL_IP,
    )
    return config.FALLBACK_LOCAL_IP


def resolve_client_range(client_range: str | None) -> str:
    """Validate the client range, returning it unchanged.

    Raises:
        ConfigurationError: If not in "IPv4-lastOctet" form.
    """
    value = client_range if client_range is not None else config.DEFAULT_CLIENT_RANGE
    if not is_valid_client_range(value):
        raise ConfigurationError(
            f"Invalid --range value: {sanitize_for_log(value)} (example: 192.168.1.100-120)"
        )
    return value


def resolve_dns(dns_csv: str | None) -> list[str]:
    """Parse the DNS list; blanks and duplicates dropped, order kept.

    Raises:
        ConfigurationError: If an entry is not an IPv4 address.
    """
    servers: list[str] = []
    for entry in split_csv(dns_csv if dns_csv is not None else config.DEFAULT_DNS):
        if not is_valid_ipv4(entry):
            raise ConfigurationError(f"Invalid --dns entry: {sanitize_for_log(entry)}")
        if entry not in servers:
            servers.append(entry)
    return servers


def resolve_users(users_csv: str | None) -> list[UserCredential]:
    """Parse "user:pass,user:pass". Synthesizes the default account if empty.

    Entries are not validated here; the credential writer skips invalid ones.
    """
    entries = split_csv(users_csv)
    if not entries:
        logger.warning("No --users given; creating default account %s", config.DEFAULT_USERS)
        entries = split_csv(config.DEFAULT_USERS)
    return [UserCredential.parse(entry) for entry in entries]


def check_arguments(
    local_ip: str | None = None,
    client_range: str | None = None,
    dns_csv: str | None = None,
) -> None:
    """Validate values that need no system queries.

    Run before the privilege check so malformed input exits early without
    detection commands or default-account warnings.

    Raises:
        ConfigurationError: On malformed input.
    """
    if local_ip:
        _check_local_ip(local_ip)
    resolve_client_range(client_range)
    resolve_dns(dns_csv)


def resolve_server_config(
    local_ip: str | None = None,
    client_range: str | None = None,
    dns_csv: str | None = None,
    users_csv: str | None = None,
) -> ServerConfig:
    """Produce a fully populated ServerConfig.

    Args:
        local_ip: --local-ip or None (autodetect)
        client_range: --range or None (default range)
        dns_csv: --dns or None (default DNS)
        users_csv: --users or None (default account)

    Returns:
        ServerConfig.

    Raises:
        ConfigurationError: On malformed input.
    """
    # Validate pure inputs before running any detection command
    remote = resolve_client_range(client_range)
    dns = resolve_dns(dns_csv)
    users = resolve_users(users_csv)

    return ServerConfig(
        local_ip=resolve_local_ip(local_ip),
        client_range=remote,
        dns_servers=dns,
        users=users,
    )
