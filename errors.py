"""Exceptions for fatal provisioning failures.

Non-fatal problems are logged as warnings and never raised.
"""


class ConfigurationError(ValueError):
    """Raised when a CLI value is malformed (exit code 2)."""


class ProvisioningError(RuntimeError):
    """Raised when a step the service depends on fails (exit code 3)."""
