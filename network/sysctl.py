"""IPv4 forwarding.

Enables forwarding at runtime and persists it in a sysctl drop-in file.
"""

from pathlib import Path

import config
from enums import StepStatus
from logging_config import get_logger
from utils import execute, sanitize_for_log

logger = get_logger(__name__)


def enable_ip_forward(path: Path = config.SYSCTL_DROPIN) -> StepStatus:
    """Enable net.ipv4.ip_forward now and on boot.

    Process:
        1. sysctl -w net.ipv4.ip_forward=1 (warn on failure)
        2. Write drop-in file (OSError propagates)
        3. sysctl --system to reload all drop-ins (warn on failure)

    Args:
        path: Drop-in file path

    Returns:
        DONE if both sysctl calls succeeded, FAILED otherwise.
    """
    logger.info("Enabling IPv4 forwarding...")
    setting = f"{config.IP_FORWARD_KEY}=1"
    status = StepStatus.DONE

    result = execute(["sysctl", "-w", setting])
    if not result.ok:
        logger.warning(
            "Could not enable %s at runtime: %s",
            config.IP_FORWARD_KEY,
            sanitize_for_log(result.stderr.strip()),
        )
        status = StepStatus.FAILED

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{setting}\n")
    logger.debug("Wrote %s", path)

    result = execute(["sysctl", "--system"])
    if not result.ok:
        logger.warning("sysctl --system failed: %s", sanitize_for_log(result.stderr.strip()))
        status = StepStatus.FAILED

    return status
