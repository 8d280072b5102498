"""Command-line interface for port selection."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from ._internal.config import get_settings
from .core import (
    is_free,
    is_free_on_protocol,
    random_free_port,
    random_free_port_on_protocol,
    select_free_port,
    select_from_given_port,
    setup_port_selector_logging,
)
from .types import Protocol, SearchConfig

logger = logging.getLogger(__name__)


def _print_port(port: Optional[int], failure: str) -> int:
    """Print a selected port, or report failure on stderr.

    Args:
        port: Selected port, or None if none was found.
        failure: Message shown when no port was found.

    Returns:
        Exit code (0 when a port was printed).
    """
    if port is None:
        print(f"Error: {failure}", file=sys.stderr)
        return 1
    print(port)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the check command."""
    if args.protocol:
        free = is_free_on_protocol(Protocol(args.protocol), args.port)
    else:
        free = is_free(args.port)
    print("free" if free else "in use")
    return 0 if free else 1


def cmd_random(args: argparse.Namespace) -> int:
    """Handle the random command."""
    if args.protocol:
        port = random_free_port_on_protocol(Protocol(args.protocol))
    else:
        port = random_free_port()
    return _print_port(port, "the OS did not assign a port")


def cmd_scan(args: argparse.Namespace) -> int:
    """Handle the scan command."""
    port = select_from_given_port(args.start)
    return _print_port(port, f"no free port at or above {args.start}")


def cmd_select(args: argparse.Namespace) -> int:
    """Handle the select command."""
    range_low, range_high = args.range if args.range else (None, None)
    config = SearchConfig.from_settings(
        range_low=range_low,
        range_high=range_high,
        max_attempts=args.attempts,
        check_stream=not args.udp_only,
        check_datagram=not args.tcp_only,
    )
    logger.debug("Searching with %s", config)
    port = select_free_port(config)
    return _print_port(port, f"no free port found after {config.max_attempts} attempts")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="port-selector",
        description="Find ports that are unused on TCP and UDP",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    protocols = [protocol.value for protocol in Protocol]

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check whether a port is free",
    )
    check_parser.add_argument("port", type=int, help="Port to check")
    check_parser.add_argument(
        "-p",
        "--protocol",
        choices=protocols,
        default=None,
        help="Only check this protocol (default: both)",
    )
    check_parser.set_defaults(func=cmd_check)

    # random command
    random_parser = subparsers.add_parser(
        "random",
        help="Print a port assigned by the OS",
    )
    random_parser.add_argument(
        "-p",
        "--protocol",
        choices=protocols,
        default=None,
        help="Only require the port to be free on this protocol (default: both)",
    )
    random_parser.set_defaults(func=cmd_random)

    # scan command
    scan_parser = subparsers.add_parser(
        "scan",
        help="Print the first free port at or above START",
    )
    scan_parser.add_argument("start", type=int, help="First port to test")
    scan_parser.set_defaults(func=cmd_scan)

    # select command
    select_parser = subparsers.add_parser(
        "select",
        help="Print a random free port from a range",
    )
    select_parser.add_argument(
        "-r",
        "--range",
        nargs=2,
        type=int,
        metavar=("LOW", "HIGH"),
        default=None,
        help="Draw from [LOW, HIGH) (default: PORT_SELECTOR_RANGE_LOW/HIGH or 0 65535)",
    )
    select_parser.add_argument(
        "-n",
        "--attempts",
        type=int,
        default=None,
        help="Random draws before giving up (default: PORT_SELECTOR_MAX_ATTEMPTS or 100)",
    )
    only_group = select_parser.add_mutually_exclusive_group()
    only_group.add_argument(
        "--tcp-only",
        action="store_true",
        help="Only require the port to be free on TCP",
    )
    only_group.add_argument(
        "--udp-only",
        action="store_true",
        help="Only require the port to be free on UDP",
    )
    select_parser.set_defaults(func=cmd_select)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 when no port was found, 2 for invalid input).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_port_selector_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if not args.verbose:
            setup_port_selector_logging(getattr(logging, get_settings().log_level))

        logger.debug("Executing command: %s", args.command)
        return args.func(args)
    except (ValueError, ValidationError) as e:
        logger.error("Error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
