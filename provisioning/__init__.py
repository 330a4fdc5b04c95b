"""Provisioning steps for pptpsetup.

Provides package installation, configuration file merging,
credential management and service activation.
"""

from .config_files import (
    ConfigFile,
    backup_file,
    configure_pptpd_conf,
    configure_pptpd_options,
    merge_pptpd_conf,
    render_pptpd_options,
)
from .packages import install_optional_package, install_packages
from .secrets import configure_users, format_secret_line, merge_user
from .service import restart_service

__all__ = [
    # Packages
    "install_packages",
    "install_optional_package",
    # Config files
    "ConfigFile",
    "backup_file",
    "merge_pptpd_conf",
    "render_pptpd_options",
    "configure_pptpd_conf",
    "configure_pptpd_options",
    # Credentials
    "format_secret_line",
    "merge_user",
    "configure_users",
    # Service
    "restart_service",
]
