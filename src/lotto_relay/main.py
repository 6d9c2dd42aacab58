"""
lotto-relay command line: paste lottery results, get them translated,
formatted and posted to Discord.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from dotenv import load_dotenv

from .config import CONFIG_FILE, data_dir_from_env, resolve_webhook
from .errors import WebhookError
from .pipeline import NAMES_FILE, TERMS_FILE, PipelineResult, TranslationPipeline
from .webhook import send_message

logger = logging.getLogger("lotto-relay")


def read_block(stream: Iterable[str]) -> str:
    """Read lines until the first blank line (or end of input).

    Returns:
        The collected lines, each terminated by a newline
    """
    lines: list[str] = []
    for line in stream:
        line = line.rstrip("\r\n")
        if not line.strip():
            break
        lines.append(line)
    return "".join(f"{line}\n" for line in lines)


def print_review(result: PipelineResult, out: TextIO | None = None) -> None:
    """Print the terms that still need a human translation."""
    if result.unresolved_names:
        print(f"⚠️ New lottery names found (add translations to {NAMES_FILE}):", file=out)
        for name in result.unresolved_names:
            print(f"  - {name}", file=out)

    if result.unresolved_terms:
        print(f"⚠️ New parenthetical terms found (add translations to {TERMS_FILE}):", file=out)
        for term in result.unresolved_terms:
            print(f"  - {term}", file=out)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="lotto-relay",
        description="Translate pasted lottery results and post them to a Discord webhook",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Paste results interactively, finish with a blank line
  lotto-relay

  # Read results from a file and only print the formatted message
  lotto-relay --input results.txt --no-send

  # Keep dictionaries and config in a custom directory
  lotto-relay --data-dir ~/lotto-data
        """,
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding dictionary.json, paren_dictionary.json and config.json "
             "(default: $LOTTO_RELAY_DATA_DIR or the current directory)"
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read results from this file instead of standard input"
    )
    parser.add_argument(
        "--no-send",
        action="store_true",
        help="Do not post to Discord, only print the formatted message"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not load_dotenv():
        logger.debug("No .env file found, using environment only")

    data_dir = args.data_dir.resolve() if args.data_dir else data_dir_from_env()
    logger.debug(f"📂 Data path: {data_dir}")

    pipeline = TranslationPipeline.from_directory(data_dir)

    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                raw = read_block(f)
        except (OSError, UnicodeDecodeError) as e:
            print(f"❌ Could not read input file {args.input}: {e}", file=sys.stderr)
            return 1
    else:
        print("👉 Paste your lottery results (end with a blank line):")
        raw = read_block(sys.stdin)

    result = pipeline.run(raw)
    if not pipeline.save():
        logger.warning("⚠️ Dictionaries could not be saved, new terms will be learned again next run")

    exit_code = 0
    if not args.no_send:
        webhook_url = resolve_webhook(data_dir / CONFIG_FILE)
        try:
            asyncio.run(send_message(webhook_url, result.message))
            print("✅ Sent translation to Discord webhook!")
        except WebhookError as e:
            print(f"❌ Failed to send to Discord: {e}", file=sys.stderr)
            exit_code = 1

    print("\n✅ Translated Output:\n")
    print(result.message)

    print_review(result)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
