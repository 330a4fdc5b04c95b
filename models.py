"""Data models for PPTP server provisioning.

All models use dataclasses. Nothing here is persisted: durable state lives
in the system configuration files and is re-derived on every run.

- UserCredential: one VPN account from --users
- ServerConfig: fully resolved run configuration
- NetworkInterfaceInfo: egress interface and its primary IPv4
- CommandResult: outcome of one external command
- NatRule: one iptables rule in check/append form
- ProvisioningReport: what the run did, for the summary
"""

from dataclasses import dataclass, field

from enums import IptablesAction, StepStatus


@dataclass
class UserCredential:
    """VPN account (username/password pair)."""

    username: str
    password: str

    @property
    def is_valid(self) -> bool:
        """Both fields non-empty; username must be a single field."""
        if not self.username or not self.password:
            return False
        return len(self.username.split()) == 1

    @classmethod
    def parse(cls, entry: str) -> "UserCredential":
        """Split "user:pass" at the first colon.

        An entry without a colon yields an empty password (invalid).

        Args:
            entry: Single comma-separated item from --users

        Returns:
            UserCredential (possibly invalid).
        """
        username, _, password = entry.partition(":")
        return cls(username=username.strip(), password=password)


@dataclass
class ServerConfig:
    """Fully populated provisioning configuration."""

    local_ip: str  # pptpd localip
    client_range: str  # pptpd remoteip, "A.B.C.D-E"
    dns_servers: list[str]  # ms-dns entries, ordered
    users: list[UserCredential]  # chap-secrets entries, ordered


@dataclass
class NetworkInterfaceInfo:
    """Egress interface (derived, not persisted)."""

    name: str  # Interface name (eth0, ens3)
    ipv4: str | None  # Primary IPv4 or None


@dataclass
class CommandResult:
    """Outcome of an external command.

    Callers decide whether a failure is fatal or a warning.
    """

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """True if the command exited with status 0."""
        return self.returncode == 0

    @classmethod
    def create_error(cls, message: str) -> "CommandResult":
        """Result for a command that could not be started."""
        return cls(returncode=-1, stdout="", stderr=message)


@dataclass
class NatRule:
    """iptables rule addressed by table and chain."""

    table: str  # "filter" or "nat"
    chain: str  # POSTROUTING, FORWARD
    args: list[str]  # Match/target arguments

    def to_command(self, action: IptablesAction) -> list[str]:
        """Build iptables argv for the given action.

        Args:
            action: CHECK (-C) or APPEND (-A)

        Returns:
            Command as list, e.g. ["iptables", "-t", "nat", "-C", "POSTROUTING", ...]
        """
        cmd = ["iptables"]
        if self.table != "filter":
            cmd += ["-t", self.table]
        cmd += [action.value, self.chain]
        cmd += self.args
        return cmd

    def __str__(self) -> str:
        return " ".join([self.table, self.chain] + self.args)


@dataclass
class ProvisioningReport:
    """Results of a provisioning run (used by the summary)."""

    config: ServerConfig
    egress_interface: str | None = None
    written_users: list[str] = field(default_factory=list)
    nat: StepStatus = StepStatus.SKIPPED
    rules_persisted: StepStatus = StepStatus.SKIPPED
    service_enabled: StepStatus = StepStatus.SKIPPED
    public_ip: str | None = None
