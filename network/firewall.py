"""NAT and forwarding rules for VPN clients.

Rules are checked with `iptables -C` before `iptables -A`, so repeated runs
never add duplicates. Every failure here is a warning: without NAT the
clients lose internet access but the service still starts.
"""

from pathlib import Path

import config
from enums import IptablesAction, StepStatus
from logging_config import get_logger
from models import NatRule
from provisioning.packages import install_optional_package
from utils import command_exists, execute, sanitize_for_log

logger = get_logger(__name__)


def build_nat_rules(wan_iface: str) -> list[NatRule]:
    """Rules for routing VPN clients out of the egress interface.

    1. Masquerade everything leaving the egress interface
    2. Forward VPN -> egress
    3. Forward egress -> VPN for established/related connections only

    Args:
        wan_iface: Egress interface name

    Returns:
        Rules in insertion order.
    """
    vpn = config.VPN_INTERFACE_PATTERN
    return [
        NatRule("nat", "POSTROUTING", ["-o", wan_iface, "-j", "MASQUERADE"]),
        NatRule("filter", "FORWARD", ["-i", vpn, "-o", wan_iface, "-j", "ACCEPT"]),
        NatRule(
            "filter",
            "FORWARD",
            [
                "-i", wan_iface,
                "-o", vpn,
                "-m", "state",
                "--state", "RELATED,ESTABLISHED",
                "-j", "ACCEPT",
            ],
        ),
    ]


def ensure_rule(rule: NatRule) -> bool:
    """Append rule unless an identical one already exists.

    Args:
        rule: Rule to ensure

    Returns:
        True if the rule is present afterwards.
    """
    if execute(rule.to_command(IptablesAction.CHECK)).ok:
        logger.debug("Rule already present: %s", sanitize_for_log(rule))
        return True

    result = execute(rule.to_command(IptablesAction.APPEND))
    if not result.ok:
        logger.warning(
            "Failed to add rule %s: %s",
            sanitize_for_log(rule),
            sanitize_for_log(result.stderr.strip()),
        )
        return False

    logger.debug("Added rule: %s", sanitize_for_log(rule))
    return True


def persist_rules(path: Path = config.IPTABLES_RULES) -> StepStatus:
    """Save the live rule set so it survives reboot.

    Installs iptables-persistent (best-effort), then writes iptables-save
    output to the rules file.

    Args:
        path: Rules file (read by netfilter-persistent on boot)

    Returns:
        DONE, or FAILED if the rules could not be saved.
    """
    install_optional_package(config.PERSISTENCE_PACKAGE)

    if not command_exists("iptables-save"):
        logger.warning("iptables-save not found; firewall rules will not survive reboot")
        return StepStatus.FAILED

    result = execute(["iptables-save"])
    if not result.ok:
        logger.warning("iptables-save failed: %s", sanitize_for_log(result.stderr.strip()))
        return StepStatus.FAILED

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.stdout)
    except OSError as e:
        logger.warning("Could not write %s: %s", path, sanitize_for_log(str(e)))
        return StepStatus.FAILED

    logger.debug("Saved firewall rules to %s", path)
    return StepStatus.DONE


def setup_nat_firewall(
    wan_iface: str | None,
    rules_path: Path = config.IPTABLES_RULES,
) -> tuple[StepStatus, StepStatus]:
    """Install NAT/forwarding rules for the egress interface and persist them.

    Args:
        wan_iface: Egress interface or None if detection failed
        rules_path: Rules file for persistence

    Returns:
        Tuple of (nat_status, persist_status). Both SKIPPED without an
        egress interface.
    """
    if not wan_iface:
        logger.warning(
            "Could not detect the egress interface; skipping NAT rules. "
            "Add them manually, then run: iptables-save > %s",
            rules_path,
        )
        return (StepStatus.SKIPPED, StepStatus.SKIPPED)

    logger.info("Configuring iptables NAT rules (egress interface: %s)...", wan_iface)

    results = [ensure_rule(rule) for rule in build_nat_rules(wan_iface)]
    nat_status = StepStatus.DONE if all(results) else StepStatus.FAILED

    persist_status = persist_rules(rules_path)
    return (nat_status, persist_status)
