"""
Command-line entry point for the all-files-access bridge.
"""

import json
import sys
from typing import Optional, Sequence

from .config import get_bridge_config
from .exceptions import ConfigurationError
from .gateway import PermissionGateway, ensure_all_files_access
from .schemas import PermissionStatus
from .utils.logging_config import setup_logging
from .utils.platform_detector import build_backends, detect_platform
from .utils.ui import THEME, console, print_ack, print_platform_info, print_status


def run(command: str, as_json: bool = False) -> int:
    """
    Execute one CLI command against the platform's gateway.

    Args:
        command: check, request, ensure or info
        as_json: Print raw response dicts instead of formatted output

    Returns:
        Process exit code
    """
    try:
        config = get_bridge_config()
    except ConfigurationError as e:
        console.print(f"  [{THEME['error']}]{e}[/]")
        return 2

    provider, backend = build_backends(config)
    gateway = PermissionGateway(provider, backend)

    if command == "check":
        status = gateway.check()
        if as_json:
            print(json.dumps(status.model_dump()))
        else:
            print_status(status)
    elif command == "request":
        ack = gateway.request()
        if as_json:
            print(json.dumps(ack.model_dump()))
        else:
            print_ack(ack)
    elif command == "ensure":
        granted = ensure_all_files_access(gateway)
        if as_json:
            print(json.dumps({"granted": granted}))
        else:
            print_status(PermissionStatus(granted=granted))
    elif command == "info":
        capabilities = detect_platform(provider)
        if as_json:
            print(capabilities.model_dump_json())
        else:
            print_platform_info(capabilities)
    return 0


def cli(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point with argument parsing."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="allfiles-bridge",
        description="Check and request Android all-files storage access",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "command",
        choices=["check", "request", "ensure", "info"],
        help="Operation to run",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw response as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with detailed logs",
    )

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)
    return run(args.command, as_json=args.json)


if __name__ == "__main__":
    sys.exit(cli())
