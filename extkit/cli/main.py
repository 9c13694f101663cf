"""
extkit CLI Main Module
======================

Command-line access to the formatting helpers.
"""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from extkit import __version__
from extkit.core.config import get_settings
from extkit.core.exceptions import ExtkitError
from extkit.timing.relative import human_friendly_date, ordinal_day, relative_from_now
from extkit.utils.currency import to_currency
from extkit.utils.logger import configure_logging, get_logger


logger = get_logger("extkit.cli")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="extkit",
        description="extkit formatting helpers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  extkit ago 2024-01-01T10:00 --now 2024-01-01T12:30   2 hours ago
  extkit day 2023-12-25 --ref 2023-01-01               25 Dec 2023
  extkit ordinal 22                                    22nd
  extkit currency 1234.5 --locale de_DE                1.234,50 €
        """,
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"extkit {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    ago_parser = subparsers.add_parser("ago", help="Time elapsed since an instant")
    ago_parser.add_argument("past", type=datetime.fromisoformat, help="ISO 8601 datetime")
    ago_parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Reference datetime (defaults to now)",
    )

    day_parser = subparsers.add_parser("day", help="Today / Yesterday / Tomorrow or a short date")
    day_parser.add_argument("target", type=date.fromisoformat, help="ISO 8601 date")
    day_parser.add_argument(
        "--ref",
        type=date.fromisoformat,
        default=None,
        help="Reference date (defaults to today)",
    )

    ordinal_parser = subparsers.add_parser("ordinal", help="Day of month with ordinal suffix")
    ordinal_parser.add_argument("day", type=int, help="Day of month (1-31)")

    currency_parser = subparsers.add_parser("currency", help="Format an amount as money")
    currency_parser.add_argument("amount", help="Decimal amount")
    currency_parser.add_argument("--locale", default=None, help="Locale such as en_US")
    currency_parser.add_argument("--currency", default=None, help="ISO 4217 code")
    currency_parser.add_argument(
        "--no-symbol",
        action="store_true",
        help="Omit the currency symbol",
    )

    return parser


def handle_ago(args: argparse.Namespace) -> str:
    return str(relative_from_now(args.past, args.now))


def handle_day(args: argparse.Namespace) -> str:
    return str(human_friendly_date(args.target, args.ref))


def handle_ordinal(args: argparse.Namespace) -> str:
    return ordinal_day(args.day)


def handle_currency(args: argparse.Namespace) -> str:
    try:
        amount = Decimal(args.amount)
    except InvalidOperation:
        raise ExtkitError(f"Not a number: {args.amount!r}") from None

    return to_currency(
        amount,
        locale=args.locale,
        currency=args.currency,
        show_symbol=not args.no_symbol,
    )


def cli(args: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        args: Command line arguments (sys.argv[1:] by default)

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    handlers = {
        "ago": handle_ago,
        "day": handle_day,
        "ordinal": handle_ordinal,
        "currency": handle_currency,
    }

    handler = handlers.get(parsed.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        settings = get_settings()
        configure_logging(settings.log_level, settings.log_format)
        print(handler(parsed))
    except ExtkitError as e:
        logger.debug("Command failed", command=parsed.command, error=e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main() -> None:
    """Main entry point."""
    sys.exit(cli())


if __name__ == "__main__":
    main()
