"""
inetaddr - Validated IPv4 and IPv6 address value objects
Command line entry point.
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

import structlog
from dotenv import load_dotenv

from inetaddr import InvalidAddress, IpAddress, Ipv4Address, Ipv6Address, __version__
from inetaddr.config import Settings, get_settings

logger = structlog.get_logger(__name__)

FAMILIES = {
    "4": Ipv4Address,
    "6": Ipv6Address,
}


def configure_logging(settings: Settings) -> None:
    """Configure structured logging on stderr."""
    if settings.app.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    logging.basicConfig(
        level=settings.app.log_level,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def render(address: IpAddress, settings: Settings) -> dict:
    """Describe an address for output, honouring the output settings."""
    data = address.to_dict()
    if isinstance(address, Ipv6Address):
        if settings.output.ipv6_expanded:
            data["address"] = address.expand()
        embedded = address.to_ipv4_address()
        data["ipv4"] = str(embedded) if embedded is not None else None
    else:
        data["ipv6_mapped"] = str(address.to_ipv6_mapped())
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inetaddr",
        description="inetaddr - Inspect and convert IPv4 and IPv6 addresses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py inspect 127.0.0.1 ::1             # Classify addresses
  python main.py from-integer 2130706433            # 127.0.0.1
  python main.py from-integer 1 --family 6          # ::1
  python main.py from-array 0 0 0 0 0 0 0 1         # ::1
  python main.py from-hex 7f000001                  # 127.0.0.1
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    commands = parser.add_subparsers(dest="command", required=True)

    inspect = commands.add_parser("inspect", help="Parse and classify textual addresses")
    inspect.add_argument("addresses", nargs="+", metavar="ADDRESS")

    from_integer = commands.add_parser("from-integer", help="Build an address from an integer")
    from_integer.add_argument("integer", metavar="VALUE")
    from_integer.add_argument(
        "--family",
        choices=sorted(FAMILIES),
        default="4",
        help="Address family of the integer (default: 4)",
    )

    from_array = commands.add_parser("from-array", help="Build an address from 4, 8 or 16 integers")
    from_array.add_argument("values", nargs="+", type=int, metavar="N")

    from_hex = commands.add_parser("from-hex", help="Build an address from a hex encoded in_addr")
    from_hex.add_argument("in_addr", type=bytes.fromhex, metavar="HEX")

    return parser


def build_addresses(args: argparse.Namespace) -> list[IpAddress]:
    if args.command == "inspect":
        return [IpAddress.from_string(address) for address in args.addresses]
    if args.command == "from-integer":
        return [FAMILIES[args.family].from_integer(args.integer)]
    if args.command == "from-array":
        return [IpAddress.from_array(args.values)]
    if args.command == "from-hex":
        return [IpAddress.from_binary(args.in_addr)]
    raise ValueError(f"Unknown command {args.command!r}")


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command line and return the exit status.

    Returns:
        0 on success, 1 if any input is not a valid address
    """
    settings = get_settings()
    configure_logging(settings)

    args = build_parser().parse_args(argv)
    logger.debug("command_received", command=args.command)

    try:
        addresses = build_addresses(args)
    except InvalidAddress as e:
        logger.error("invalid_address", command=args.command, error=str(e))
        return 1

    results = [render(address, settings) for address in addresses]
    document = results[0] if len(results) == 1 else results
    print(json.dumps(document, indent=settings.output.json_indent or None))
    return 0


def main():
    """Main entry point."""
    load_dotenv(".env.local")
    sys.exit(run())


if __name__ == "__main__":
    main()
