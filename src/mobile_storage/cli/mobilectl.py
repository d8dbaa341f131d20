#!/usr/bin/env python3
"""
mobilectl - Mobile Storage inventory CLI

A lightweight CLI over the local mobile inventory:
- List mobiles (mobilectl list)
- Add a mobile (mobilectl add IMEI MODEL)
- Search by IMEI (mobilectl search TEXT)
- Delete a mobile (mobilectl delete IMEI)
- Inventory stats and version info
"""

import argparse
import logging
import sys
from typing import Iterable

from mobile_storage import __version__
from mobile_storage.core.config import get_config
from mobile_storage.inventory import (
    DuplicateMobileError,
    InvalidMobileError,
    InventoryService,
    Mobile,
    StorageError,
    StorageErrorKind,
)

logger = logging.getLogger(__name__)


class Colors:
    """ANSI color codes for terminal output."""

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    RESET = "\033[0m"
    BOLD = "\033[1m"


def colorize(text: str, color: str) -> str:
    """Colorize text if stdout is a TTY."""
    if sys.stdout.isatty():
        return f"{color}{text}{Colors.RESET}"
    return text


def print_mobiles(mobiles: Iterable[Mobile]) -> None:
    """Print the model and IMEI lines of each mobile."""
    for mobile in mobiles:
        primary, secondary = mobile.display_lines()
        print(colorize(primary, Colors.BOLD))
        print(f"  {secondary}")


def cmd_list(service: InventoryService, args) -> int:
    mobiles = service.list_mobiles()
    if not mobiles:
        print("No mobiles stored")
        return 0
    print_mobiles(mobiles)
    return 0


def cmd_add(service: InventoryService, args) -> int:
    """
    Add a mobile, refusing an IMEI that is already stored.

    Returns:
        Exit code (0 on success, 1 on duplicate or failure)
    """
    try:
        mobile = service.add_mobile(imei=args.imei, model=args.model)
    except InvalidMobileError as e:
        print(colorize(f"✗ {e}", Colors.RED), file=sys.stderr)
        return 1
    except DuplicateMobileError:
        print(colorize("Warning: This mobile already exists", Colors.YELLOW), file=sys.stderr)
        return 1
    except StorageError as e:
        print(colorize(f"✗ Failed to save mobile: {e}", Colors.RED), file=sys.stderr)
        return 1

    print(colorize(f"✓ Added {mobile.model} ({mobile.imei})", Colors.GREEN))
    return 0


def cmd_search(service: InventoryService, args) -> int:
    mobiles = service.search(args.text)
    if not mobiles:
        print("No mobiles found")
        return 0
    print_mobiles(mobiles)
    return 0


def cmd_delete(service: InventoryService, args) -> int:
    """
    Delete a mobile by IMEI.

    Returns:
        Exit code (0 on success, 1 if not found or the delete failed)
    """
    try:
        removed = service.remove_mobile(args.imei)
    except StorageError as e:
        if e.kind == StorageErrorKind.NOT_FOUND:
            print(colorize(f"✗ No mobile with IMEI {args.imei}", Colors.RED), file=sys.stderr)
        else:
            print(colorize(f"✗ Failed to delete mobile: {e}", Colors.RED), file=sys.stderr)
        return 1

    print(colorize(f"✓ Deleted {removed} mobile(s) with IMEI {args.imei}", Colors.GREEN))
    return 0


def cmd_stats(service: InventoryService, args) -> int:
    stats = service.get_stats()
    print(f"Total mobiles: {stats['total_mobiles']}")
    print(f"Unique IMEIs:  {stats['unique_imeis']}")
    return 0


def cmd_version(args) -> int:
    """
    Print version information.

    Returns:
        Exit code (always 0)
    """
    print(f"mobilectl version {__version__}")
    print("Mobile Storage - local mobile-device inventory")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for mobilectl."""
    parser = argparse.ArgumentParser(
        description="Mobile Storage inventory CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mobilectl list                             # Show all mobiles
  mobilectl add 123456789012345 "Phone A"    # Add a mobile
  mobilectl search 1234                      # Find a mobile by IMEI
  mobilectl delete 123456789012345           # Delete a mobile

Environment variables:
  MOBILE_STORAGE_DB_PATH             # Database file (default: ~/.mobile_storage/mobiles.db)
  LOG_LEVEL                          # Logging level (default: WARNING)
        """
    )
    parser.add_argument(
        "--db",
        dest="db_path",
        help="Path to the database file (overrides MOBILE_STORAGE_DB_PATH)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("list", help="List all mobiles")

    add_parser = subparsers.add_parser("add", help="Add a new mobile")
    add_parser.add_argument("imei", help="Device IMEI")
    add_parser.add_argument("model", help="Model name")

    search_parser = subparsers.add_parser("search", help="Search mobiles by IMEI")
    search_parser.add_argument("text", help="Full IMEI or any part of it")

    delete_parser = subparsers.add_parser("delete", help="Delete a mobile by IMEI")
    delete_parser.add_argument("imei", help="Exact IMEI to delete")

    subparsers.add_parser("stats", help="Show inventory statistics")
    subparsers.add_parser("version", help="Show version information")

    return parser


COMMANDS = {
    "list": cmd_list,
    "add": cmd_add,
    "search": cmd_search,
    "delete": cmd_delete,
    "stats": cmd_stats,
}


def main(argv=None):
    """Main entry point for mobilectl CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "version":
        return cmd_version(args)

    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.db_path:
        config = config.model_copy(
            update={"storage": config.storage.model_copy(update={"db_path": args.db_path})}
        )

    try:
        service = InventoryService.from_config(config)
    except Exception as e:
        logger.error(f"Cannot open inventory database: {e}", exc_info=True)
        print(colorize(f"✗ Cannot open inventory database: {e}", Colors.RED), file=sys.stderr)
        return 1

    return COMMANDS[args.command](service, args)


if __name__ == "__main__":
    sys.exit(main())
