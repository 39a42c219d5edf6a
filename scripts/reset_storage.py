#!/usr/bin/env python3
"""
Local storage reset script

Removes every submitted application from the portal's local storage file,
the same as clearing the browser storage for the site:
- removes the application slot (``dogLicenseApplications`` by default)
- keeps any other slot in the file
- keeps the data directory and logs

Usage:
    python scripts/reset_storage.py [--force]

Options:
    --force: skip the confirmation prompt
"""

import argparse
import sys

from dog_license.adapters import JsonApplicationStore, LocalStorage
from dog_license.config import Settings, load_settings
from dog_license.infra.exceptions import StoreError
from dog_license.infra.logging import get_logger

logger = get_logger("reset_storage")


def get_storage_stats(settings: Settings) -> dict:
    """Current storage state"""
    storage = LocalStorage(settings.storage_file, quota_bytes=settings.storage_quota_bytes)
    stats = {
        "file": str(settings.storage_file),
        "exists": settings.storage_file.exists(),
        "used_bytes": 0,
        "applications": 0,
        "readable": True,
    }
    try:
        stats["used_bytes"] = storage.used_bytes()
        stats["applications"] = len(JsonApplicationStore(storage, key=settings.storage_key).load_raw())
    except StoreError as e:
        logger.warning(f"Could not read {settings.storage_file}: {e.message}")
        stats["readable"] = False
    return stats


def print_stats(stats: dict, title: str = "Current storage state") -> None:
    print(f"\n{title}:")
    print(f"  - File: {stats['file']}{'' if stats['exists'] else ' (missing)'}")
    print(f"  - Used: {stats['used_bytes'] / 1024:.1f} KB")
    if stats["readable"]:
        print(f"  - Applications: {stats['applications']}")
    else:
        print("  - Applications: unreadable (corrupted storage)")


def reset_storage(settings: Settings, verbose: bool = True) -> None:
    """
    Remove the application slot.

    A corrupted storage file cannot be edited slot by slot, so it is
    cleared as a whole.
    """
    storage = LocalStorage(settings.storage_file, quota_bytes=settings.storage_quota_bytes)
    try:
        storage.remove_item(settings.storage_key)
        if verbose:
            print(f"  Removed slot: {settings.storage_key}")
    except StoreError as e:
        logger.warning(f"Slot removal failed ({e.error_code}), clearing the whole file")
        storage.clear()
        if verbose:
            print(f"  Cleared file: {settings.storage_file.name}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Remove all submitted dog license applications from local storage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/reset_storage.py          # interactive reset
    python scripts/reset_storage.py --force  # reset without confirmation
    python scripts/reset_storage.py --stats  # only show current state
        """
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="skip the confirmation prompt"
    )
    parser.add_argument(
        "--stats", "-s",
        action="store_true",
        help="only show the current storage state"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="less output"
    )

    args = parser.parse_args(argv)
    settings = load_settings()

    before = get_storage_stats(settings)
    if args.stats:
        print_stats(before)
        return 0

    print_stats(before, "Before reset")

    if not args.force:
        print("\n⚠️  Warning: every submitted application will be deleted. This cannot be undone!")
        response = input("Continue? [y/N]: ").strip().lower()
        if response not in ("y", "yes"):
            print("Cancelled.")
            return 1

    reset_storage(settings, verbose=not args.quiet)
    print_stats(get_storage_stats(settings), "After reset")
    return 0


if __name__ == "__main__":
    sys.exit(main())
