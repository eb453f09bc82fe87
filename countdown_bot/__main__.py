#!/usr/bin/env python3
"""Entry point for running the countdown bot as a standalone application."""

import argparse
import asyncio
import json
import logging
import sys

from .blocks import format_message
from .bot import CountdownBot
from .config import configure_logger, load_config
from .countdown import compute_remaining
from .errors import ConfigurationError
from .scheduler import utc_now


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="countdown-bot",
        description="Post countdown updates to a Slack incoming webhook.",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="post a single update and exit",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="print the message that would be posted and exit",
    )
    return parser


def main(argv=None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(require_webhook=not args.dry_run)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    configure_logger(
        logging.getLogger(),
        log_file=config.log_file,
        log_level=config.log_level,
    )

    if args.dry_run:
        remaining = compute_remaining(utc_now(), config.target)
        print(json.dumps(format_message(remaining).to_dict(), indent=2, ensure_ascii=False))
        return 0

    bot = CountdownBot(config)

    try:
        if args.once:
            asyncio.run(bot.run_once())
        else:
            asyncio.run(bot.run())
    except KeyboardInterrupt:
        print("\nShutting down countdown bot...")

    return 0


if __name__ == "__main__":
    sys.exit(main())
