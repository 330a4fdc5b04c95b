"""Idempotent rewriting of pptpd configuration files.

Each target file is a ConfigFile resource with an explicit
backup -> read -> transform -> write cycle. Transforms are pure functions
over the file's lines, so running them twice with the same input produces
the same file.
"""

import re
import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable

import config
from logging_config import get_logger
from models import ServerConfig

logger = get_logger(__name__)

LineTransform = Callable[[list[str]], list[str]]

# Lines owned by this tool in pptpd.conf (keyword followed by whitespace)
_PPTPD_MANAGED_KEYS = re.compile(r"^(localip|remoteip)\s")


def backup_file(path: Path, now: datetime | None = None) -> Path | None:
    """Copy file to <path>.bak.<timestamp>, preserving metadata.

    Args:
        path: File to back up
        now: Timestamp override (tests)

    Returns:
        Backup path, or None if the file is missing or empty.
    """
    if not path.is_file() or path.stat().st_size == 0:
        return None

    stamp = (now or datetime.now()).strftime(config.BACKUP_SUFFIX_FORMAT)
    backup = path.with_name(path.name + stamp)
    shutil.copy2(path, backup)
    logger.debug("Backed up %s to %s", path, backup)
    return backup


class ConfigFile:
    """Text configuration file edited as a list of lines."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> list[str]:
        """Return current lines (empty list if the file is missing)."""
        if not self.path.exists():
            return []
        return self.path.read_text().splitlines()

    def write(self, lines: list[str]) -> None:
        """Replace file content; every line is newline-terminated."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("".join(f"{line}\n" for line in lines))

    def apply(self, transform: LineTransform) -> list[str]:
        """Back up the file, then write transform(current lines).

        Args:
            transform: Pure function from old lines to new lines

        Returns:
            Lines written.
        """
        backup_file(self.path)
        lines = transform(self.read())
        self.write(lines)
        return lines


def merge_pptpd_conf(lines: list[str], local_ip: str, client_range: str) -> list[str]:
    """Replace localip/remoteip settings, keeping every other line.

    Args:
        lines: Current pptpd.conf lines
        local_ip: Server-side tunnel address
        client_range: Client address range

    Returns:
        New lines with exactly one localip and one remoteip at the end.
    """
    kept = [line for line in lines if not _PPTPD_MANAGED_KEYS.match(line)]
    return kept + [f"localip {local_ip}", f"remoteip {client_range}"]


def render_pptpd_options(dns_servers: list[str]) -> list[str]:
    """Build pptpd-options content: fixed template plus ms-dns lines.

    Blank and duplicate DNS entries are skipped; order is preserved.

    Args:
        dns_servers: DNS servers handed to clients

    Returns:
        Complete file content as lines.
    """
    lines = list(config.PPTPD_OPTIONS_TEMPLATE)
    seen: set[str] = set()
    for server in dns_servers:
        server = server.strip()
        if not server or server in seen:
            continue
        seen.add(server)
        lines.append(f"ms-dns {server}")
    return lines


def configure_pptpd_conf(server: ServerConfig, path: Path = config.PPTPD_CONF) -> None:
    """Set localip/remoteip in pptpd.conf.

    Args:
        server: Resolved configuration
        path: pptpd.conf location
    """
    logger.info("Configuring %s ...", path)
    ConfigFile(path).apply(
        lambda lines: merge_pptpd_conf(lines, server.local_ip, server.client_range)
    )


def configure_pptpd_options(server: ServerConfig, path: Path = config.PPTPD_OPTIONS) -> None:
    """Overwrite pptpd-options with the MS-CHAPv2/MPPE template.

    Args:
        server: Resolved configuration
        path: pptpd-options location
    """
    logger.info("Configuring %s ...", path)
    ConfigFile(path).apply(lambda _lines: render_pptpd_options(server.dns_servers))
