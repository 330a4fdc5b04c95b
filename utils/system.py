"""System command execution utilities.

Two entry points:
    - execute(): provisioning commands, returns CommandResult (never raises)
    - run_command(): read-only queries, returns stdout or None

Never uses shell=True to prevent command injection.
"""

import os
import re
import shutil
import subprocess
from typing import Any

import config
from logging_config import get_logger
from models import CommandResult

logger = get_logger(__name__)


def execute(
    cmd: list[str],
    env: dict[str, str] | None = None,
    timeout: float | None = None,
) -> CommandResult:
    """Execute a provisioning command exactly once.

    No timeout by default: package installs may legitimately take minutes.

    Args:
        cmd: Command as list (e.g., ["systemctl", "restart", "pptpd"])
        env: Extra environment variables merged over os.environ
        timeout: Optional timeout in seconds

    Returns:
        CommandResult. Start-up failures (missing binary, timeout) are
        reported with returncode -1.
    """
    logger.debug("Running: %s", sanitize_for_log(" ".join(cmd)))

    run_env = None
    if env:
        run_env = {**os.environ, **env}

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            env=run_env,
            check=False,
            shell=False,
        )
    except subprocess.TimeoutExpired:
        return CommandResult.create_error(f"timed out after {timeout}s")
    except FileNotFoundError:
        return CommandResult.create_error(f"command not found: {cmd[0]}")
    except (OSError, ValueError) as e:
        return CommandResult.create_error(str(e))

    if result.returncode != 0:
        logger.debug(
            "Command exited with %d: %s",
            result.returncode,
            sanitize_for_log(result.stderr.strip()),
        )

    return CommandResult(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )


def run_command(cmd: list[str]) -> str | None:
    """Execute a read-only query command.

    Args:
        cmd: Command as list (e.g., ["ip", "route", "get", "1.1.1.1"])

    Returns:
        Command output (stripped) or None on error.
    """
    result = execute(cmd, timeout=config.TIMEOUT_SECONDS)
    if result.ok:
        return result.stdout.strip()
    return None


def command_exists(cmd: str) -> bool:
    """Check if command exists in PATH.

    Args:
        cmd: Command name (e.g., "iptables-save")

    Returns:
        True if command is available, False otherwise.
    """
    return shutil.which(cmd) is not None


def is_root() -> bool:
    """Check for elevated privileges (effective UID 0)."""
    return os.geteuid() == 0


def sanitize_for_log(value: Any) -> str:
    """Sanitize values before logging to prevent log injection.

    Removes:
        - Newlines
        - ANSI escape codes
        - Control characters

    Max length: 200 characters

    Args:
        value: Value to sanitize (any type, will be converted to string)

    Returns:
        Sanitized string safe for logging.
    """
    text = str(value)

    text = text.replace("\n", " ").replace("\r", " ")
    text = re.sub(r"\x1b\[[0-9;]*m", "", text)
    text = "".join(c for c in text if c.isprintable() or c.isspace())

    if len(text) > 200:
        text = text[:197] + "..."

    return text
