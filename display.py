"""Completion summary.

Prints the resolved configuration, the outcome of best-effort steps and
client setup hints. Passwords are never printed.
"""

import sys
from typing import TextIO

import config
from colors import Color
from enums import StepStatus
from models import ProvisioningReport

SEPARATOR = "=" * 42

_STATUS_COLORS: dict[StepStatus, str] = {
    StepStatus.DONE: Color.GREEN,
    StepStatus.SKIPPED: Color.YELLOW,
    StepStatus.FAILED: Color.RED,
}


def _status(status: StepStatus) -> str:
    return f"{_STATUS_COLORS[status]}{status.value}{Color.RESET}"


def format_summary(report: ProvisioningReport, file: TextIO | None = None) -> None:
    """Print the completion summary.

    Args:
        report: Result of orchestrator.provision()
        file: Optional file handle (default: sys.stdout)
    """
    if file is None:
        file = sys.stdout

    server = report.config
    rows = [
        ("Local IP (pptpd)", server.local_ip),
        ("Client IP range", server.client_range),
        ("DNS for clients", ", ".join(server.dns_servers) or "--"),
        ("Accounts", ", ".join(report.written_users) or "--"),
        ("Egress interface", report.egress_interface or "NOT DETECTED"),
        ("Server address", report.public_ip or "N/A"),
    ]

    print(SEPARATOR, file=file)
    print(f"{Color.BOLD}PPTP setup complete{Color.RESET}", file=file)
    print(SEPARATOR, file=file)
    for label, value in rows:
        print(f"{label + ':':<20} {value}", file=file)

    print(f"{'NAT rules:':<20} {_status(report.nat)}", file=file)
    print(f"{'Rules persisted:':<20} {_status(report.rules_persisted)}", file=file)
    print(f"{'Start on boot:':<20} {_status(report.service_enabled)}", file=file)

    print(f"\n{Color.CYAN}Notes:{Color.RESET}", file=file)
    print("1) If UFW/firewalld is active, allow TCP/1723 and GRE (protocol 47).", file=file)
    print("2) Clients: PPTP connection, MS-CHAPv2 authentication, MPPE-128 encryption.", file=file)
    print(
        f"3) Settings: {config.PPTPD_CONF}, {config.PPTPD_OPTIONS}, {config.CHAP_SECRETS}",
        file=file,
    )
    print(f"4) Logs: journalctl -u {config.SERVICE_NAME} -e", file=file)
    print(SEPARATOR, file=file)
