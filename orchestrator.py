"""Orchestrator for PPTP server provisioning.

Runs every provisioning step in order and collects the outcome.
Fatal failures propagate as exceptions; non-fatal ones are recorded in
the report and logged by the step itself.
"""

import config
from logging_config import get_logger
from models import ProvisioningReport, ServerConfig
from network import enable_ip_forward, get_default_interface, get_public_ipv4, setup_nat_firewall
from provisioning import (
    configure_pptpd_conf,
    configure_pptpd_options,
    configure_users,
    install_packages,
    restart_service,
)
from utils import mask_users, sanitize_for_log

logger = get_logger(__name__)


def provision(server: ServerConfig, lookup_public_ip: bool = True) -> ProvisioningReport:
    """Provision the PPTP server.

    Process:
        1. Install packages (fatal on failure)
        2. pptpd.conf: localip/remoteip
        3. pptpd-options: template + ms-dns
        4. chap-secrets: accounts
        5. IPv4 forwarding
        6. NAT rules (skipped without egress interface)
        7. Enable + restart service (restart fatal)
        8. Public IPv4 lookup for the summary (optional)

    Args:
        server: Resolved configuration
        lookup_public_ip: Query ipinfo.io for the summary

    Returns:
        ProvisioningReport.

    Raises:
        ProvisioningError: Package install or service restart failed.
        OSError: A configuration file could not be written.
    """
    logger.info(
        "Parameters: local-ip=%s range=%s dns=%s users=%s",
        server.local_ip,
        server.client_range,
        ",".join(server.dns_servers),
        sanitize_for_log(mask_users(server.users)),
    )
    report = ProvisioningReport(config=server)

    install_packages(config.REQUIRED_PACKAGES)

    configure_pptpd_conf(server)
    configure_pptpd_options(server)
    report.written_users = configure_users(server.users)

    enable_ip_forward()

    report.egress_interface = get_default_interface()
    report.nat, report.rules_persisted = setup_nat_firewall(report.egress_interface)

    report.service_enabled = restart_service()

    if lookup_public_ip:
        report.public_ip = get_public_ipv4()

    return report
