"""Type-safe enumerations for pptpsetup."""

from enum import Enum


class StepStatus(str, Enum):
    """Outcome of a best-effort provisioning step.

    DONE: Step completed
    SKIPPED: Step not attempted (e.g., no egress interface for NAT)
    FAILED: Step attempted but failed (non-fatal, warning logged)
    """

    DONE = "done"
    SKIPPED = "skipped"
    FAILED = "failed"


class IptablesAction(str, Enum):
    """iptables rule operations."""

    CHECK = "-C"
    APPEND = "-A"
