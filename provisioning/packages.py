"""Package installation via apt-get."""

import config
from errors import ProvisioningError
from logging_config import get_logger
from utils import execute, sanitize_for_log

logger = get_logger(__name__)


def install_packages(packages: list[str]) -> None:
    """Refresh package lists and install packages.

    Args:
        packages: Debian package names

    Raises:
        ProvisioningError: If apt-get update or install fails.
    """
    logger.info("Installing packages: %s", " ".join(packages))

    result = execute(["apt-get", "update", "-y"], env=config.APT_ENV)
    if not result.ok:
        raise ProvisioningError(
            f"apt-get update failed: {sanitize_for_log(result.stderr.strip())}"
        )

    result = execute(["apt-get", "install", "-y", *packages], env=config.APT_ENV)
    if not result.ok:
        raise ProvisioningError(
            f"apt-get install failed: {sanitize_for_log(result.stderr.strip())}"
        )


def install_optional_package(package: str) -> bool:
    """Install a package without failing the run.

    Args:
        package: Debian package name

    Returns:
        True if installed (or already present), False otherwise.
    """
    result = execute(["apt-get", "install", "-y", package], env=config.APT_ENV)
    if not result.ok:
        logger.warning("Could not install %s (continuing)", package)
        return False
    return True
