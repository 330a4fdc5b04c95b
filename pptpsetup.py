#!/usr/bin/env python3
"""pptpsetup - PPTP VPN server provisioning for Debian/Ubuntu.

Main entry point for the pptpsetup command-line tool. Safe to run repeatedly:
configuration files, accounts and firewall rules are replaced, never duplicated.
"""

import argparse
import sys
import traceback
from pathlib import Path

import config
from config import ExitCode
from display import format_summary
from errors import ConfigurationError, ProvisioningError
from logging_config import get_logger, setup_logging
from orchestrator import provision
from resolver import check_arguments, resolve_server_config
from utils import is_root, sanitize_for_log


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace.

    Exits:
        Code 2 on unknown or malformed arguments (argparse).
    """
    parser = argparse.ArgumentParser(
        prog=config.TOOL_NAME,
        description="Install and configure a PPTP VPN server (run as root)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  sudo pptpsetup
  sudo pptpsetup --local-ip 192.168.99.1 --range 192.168.99.100-120 \\
                 --dns 1.1.1.1,8.8.8.8 --users user1:pass1,user2:pass2

Defaults:
  --local-ip   IPv4 of the default egress interface ({config.FALLBACK_LOCAL_IP} if undetected)
  --range      {config.DEFAULT_CLIENT_RANGE}
  --dns        {config.DEFAULT_DNS}
  --users      {config.DEFAULT_USERS}

Exit codes:
  0 - Success
  1 - Not running as root
  2 - Invalid arguments
  3 - Provisioning failed
        """,
    )

    parser.add_argument(
        "--local-ip",
        metavar="IPV4",
        help="pptpd local address on the server",
    )

    parser.add_argument(
        "--range",
        "--remote-range",
        dest="client_range",
        metavar="RANGE",
        help="Client address range, e.g. 192.168.99.100-120",
    )

    parser.add_argument(
        "--dns",
        metavar="CSV",
        help="Comma-separated DNS servers for clients",
    )

    parser.add_argument(
        "--users",
        metavar="CSV",
        help="Comma-separated user:password accounts",
    )

    parser.add_argument(
        "--no-public-ip",
        action="store_true",
        help="Do not query ipinfo.io for the summary",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {config.VERSION}",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main execution flow.

    Exit codes:
        0: Success
        1: Not running as root
        2: Invalid arguments
        3: Provisioning failed
    """
    args = parse_arguments(argv)

    # Setup logging (must be called before any logger usage)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    logger = get_logger(__name__)

    try:
        check_arguments(
            local_ip=args.local_ip,
            client_range=args.client_range,
            dns_csv=args.dns,
        )
    except ConfigurationError as e:
        logger.error("%s", sanitize_for_log(str(e)))
        sys.exit(ExitCode.INVALID_ARGUMENTS)

    if not is_root():
        logger.error("Please run as root, e.g.: sudo %s ...", config.TOOL_NAME)
        sys.exit(ExitCode.PERMISSION_DENIED)

    # Local IP detection and the default account only after the root check
    server = resolve_server_config(
        local_ip=args.local_ip,
        client_range=args.client_range,
        dns_csv=args.dns,
        users_csv=args.users,
    )

    try:
        report = provision(server, lookup_public_ip=not args.no_public_ip)
    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        sys.exit(ExitCode.PROVISIONING_FAILED)
    except (OSError, ProvisioningError) as e:
        logger.error("Provisioning failed: %s", sanitize_for_log(str(e)))
        if args.verbose:
            traceback.print_exc()
        sys.exit(ExitCode.PROVISIONING_FAILED)

    format_summary(report)
    sys.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
