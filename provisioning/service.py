"""pptpd service activation through systemd."""

import time

import config
from enums import StepStatus
from errors import ProvisioningError
from logging_config import get_logger
from utils import execute, sanitize_for_log

logger = get_logger(__name__)


def restart_service(name: str = config.SERVICE_NAME) -> StepStatus:
    """Enable the service on boot and restart it.

    Enable failure is a warning; restart failure is fatal.

    Args:
        name: systemd unit name

    Returns:
        DONE if enabled for boot, FAILED otherwise.

    Raises:
        ProvisioningError: If the restart fails.
    """
    logger.info("Enabling and restarting %s ...", name)

    enabled = StepStatus.DONE
    result = execute(["systemctl", "enable", name])
    if not result.ok:
        logger.warning("Could not enable %s for boot (continuing)", name)
        enabled = StepStatus.FAILED

    result = execute(["systemctl", "restart", name])
    if not result.ok:
        raise ProvisioningError(
            f"Failed to restart {name}: {sanitize_for_log(result.stderr.strip())}"
        )

    time.sleep(config.SERVICE_SETTLE_SECONDS)
    log_service_status(name)
    return enabled


def log_service_status(name: str) -> None:
    """Log the head of `systemctl status` at DEBUG (best-effort)."""
    result = execute(["systemctl", "--no-pager", "--full", "status", name])
    if not result.stdout:
        return
    for line in result.stdout.splitlines()[: config.SERVICE_STATUS_LINES]:
        logger.debug("  %s", sanitize_for_log(line))
