#!/usr/bin/env python3
"""
Remove duplicate keys from a lotto-relay dictionary file.

Older dictionary files can hold keys that differ only by surrounding
whitespace (" Govisetha" and "Govisetha"), or even the exact same key twice.
This script trims every key and keeps the first occurrence, in file order.

Usage:
    python scripts/cleanup_dictionary.py dictionary.json --dry-run

The script:
1. Reads the dictionary file, keeping every key/value pair in file order
2. Trims each key and drops later duplicates
3. Writes the cleaned mapping back (pretty JSON)
"""

import argparse
import json
import sys
from pathlib import Path

from lotto_relay.errors import CleanupError


def dedupe_pairs(pairs: list[tuple[str, str]]) -> tuple[dict[str, str], list[str]]:
    """Trim keys and keep the first value seen for each.

    Args:
        pairs: Key/value pairs in file order

    Returns:
        Cleaned mapping and the list of dropped keys (as they appeared)
    """
    cleaned: dict[str, str] = {}
    dropped: list[str] = []
    for key, value in pairs:
        trimmed = key.strip()
        if trimmed in cleaned:
            dropped.append(key)
            continue
        cleaned[trimmed] = value
    return cleaned, dropped


def read_pairs(path: Path) -> list[tuple[str, str]]:
    """Read the ``map`` of a dictionary file as ordered key/value pairs.

    Raises:
        CleanupError: If the file is missing, not JSON, or has no ``map`` object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            # JSON objects become lists of (key, value) tuples so duplicates survive
            data = json.load(f, object_pairs_hook=list)
    except FileNotFoundError:
        raise CleanupError(f"Dictionary file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise CleanupError(f"Invalid JSON in {path}: {e}") from None

    pairs = None
    if isinstance(data, list):
        for item in data:
            if isinstance(item, tuple) and item[0] == "map":
                pairs = item[1]
    if not isinstance(pairs, list) or not all(isinstance(pair, tuple) for pair in pairs):
        raise CleanupError(f"{path} has no 'map' object")

    for key, value in pairs:
        if not isinstance(value, str):
            raise CleanupError(f"Translation for {key!r} in {path} is not a string")
    return pairs


def cleanup(path: Path, dry_run: bool = False) -> list[str]:
    """Deduplicate a dictionary file in place.

    Args:
        path: Dictionary file to clean
        dry_run: Report what would be dropped without writing

    Returns:
        Keys that were (or would be) dropped
    """
    cleaned, dropped = dedupe_pairs(read_pairs(path))
    if dry_run:
        return dropped

    temp_file = path.with_suffix(".tmp")
    try:
        temp_file.write_text(json.dumps({"map": cleaned}, indent=2, ensure_ascii=False), encoding="utf-8")
        temp_file.replace(path)
    except OSError as e:
        if temp_file.exists():
            temp_file.unlink()
        raise CleanupError(f"Failed to write {path}: {e}") from None
    return dropped


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Remove duplicate (whitespace-variant) keys from a dictionary file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Preview cleanup (dry-run)
  python scripts/cleanup_dictionary.py dictionary.json --dry-run

  # Clean the parenthetical dictionary
  python scripts/cleanup_dictionary.py paren_dictionary.json
        """,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=Path("dictionary.json"),
        type=Path,
        help="Dictionary file to clean (default: dictionary.json)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be removed without changing the file"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the cleanup script."""
    args = parse_args(argv)

    try:
        dropped = cleanup(args.path, dry_run=args.dry_run)
    except CleanupError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    prefix = "[DRY RUN] Would remove" if args.dry_run else "Removed"
    for key in dropped:
        print(f"  {prefix} duplicate {key!r}")
    if args.dry_run:
        print(f"[DRY RUN] {len(dropped)} duplicate(s) found in {args.path.name}")
    else:
        print(f"✅ {args.path.name} cleaned and duplicates removed! ({len(dropped)} removed)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
