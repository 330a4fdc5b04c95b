"""Utilities package for pptpsetup.

Provides system command execution, input validation, and text formatting.
"""

from .formatters import mask_credential, mask_users, split_csv
from .system import command_exists, execute, is_root, run_command, sanitize_for_log
from .validators import (
    is_valid_client_range,
    is_valid_ipv4,
    validate_interface_name,
)

__all__ = [
    # System
    "execute",
    "run_command",
    "command_exists",
    "is_root",
    "sanitize_for_log",
    # Validators
    "validate_interface_name",
    "is_valid_ipv4",
    "is_valid_client_range",
    # Formatters
    "split_csv",
    "mask_credential",
    "mask_users",
]
