"""chap-secrets account management.

Line format: <client>\\t*\\t<secret>\\t*  (any server, any address)

A user's previous line is removed wherever it was and the new line is
appended at the end; unrelated lines keep their order.
"""

from pathlib import Path

import config
from logging_config import get_logger
from models import UserCredential
from provisioning.config_files import ConfigFile
from utils import mask_credential, sanitize_for_log

logger = get_logger(__name__)


def format_secret_line(user: UserCredential) -> str:
    """Render a chap-secrets entry with wildcard server and address."""
    return f"{user.username}\t*\t{user.password}\t*"


def _first_field(line: str) -> str | None:
    fields = line.split()
    return fields[0] if fields else None


def merge_user(lines: list[str], user: UserCredential) -> list[str]:
    """Drop existing lines for the user and append a fresh one.

    Args:
        lines: Current chap-secrets lines
        user: Valid credential

    Returns:
        New lines.
    """
    kept = [line for line in lines if _first_field(line) != user.username]
    kept.append(format_secret_line(user))
    return kept


def configure_users(
    users: list[UserCredential],
    path: Path = config.CHAP_SECRETS,
) -> list[str]:
    """Write accounts to chap-secrets (mode 600).

    Invalid entries are skipped with a warning.

    Args:
        users: Accounts in CLI order
        path: chap-secrets location

    Returns:
        Usernames written, in order, without duplicates.
    """
    logger.info("Writing users to %s ...", path)

    valid: list[UserCredential] = []
    for user in users:
        if not user.is_valid:
            logger.warning(
                "Ignoring invalid user definition: %s", sanitize_for_log(mask_credential(user))
            )
            continue
        valid.append(user)

    # Restrict permissions before any secret is written
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(mode=config.CHAP_SECRETS_MODE, exist_ok=True)
    path.chmod(config.CHAP_SECRETS_MODE)

    def transform(lines: list[str]) -> list[str]:
        for user in valid:
            lines = merge_user(lines, user)
        return lines

    ConfigFile(path).apply(transform)

    written = list(dict.fromkeys(user.username for user in valid))
    logger.debug("Accounts written: %s", ", ".join(written) or "<none>")
    return written
