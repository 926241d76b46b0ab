"""CLI for building the topic snapshot."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from build_snapshot.build_snapshot import build_snapshot
from build_snapshot.write_snapshot import SnapshotWriteError, write_snapshot
from common.cli_helpers import positive_int, setup_logging
from common.config import ConfigError, load_config, parse_feed_list

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch RSS feeds, rank keyword topics, and publish a JSON snapshot."
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to YAML config file")
    parser.add_argument("--output", default=None, help="Snapshot path (overrides OUTPUT_PATH)")
    parser.add_argument("--feeds", default=None, help="Comma-separated feed URLs (overrides FEEDS)")
    parser.add_argument("--max-topics", type=positive_int, default=None, help="Maximum number of topics")
    parser.add_argument("--no-enrich", action="store_true", help="Skip preview image lookups")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config)
    except (ConfigError, FileNotFoundError) as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    if args.feeds is not None:
        urls = parse_feed_list(args.feeds)
        if not urls:
            logger.error("Invalid configuration: --feeds contains no URLs")
            return 1
        config.feeds.urls = urls
    if args.max_topics is not None:
        config.topics.max_topics = args.max_topics
    if args.output:
        config.output.path = args.output
    if args.no_enrich:
        config.enrich.enabled = False

    snapshot = build_snapshot(config)

    try:
        write_snapshot(snapshot, config.output.path)
    except SnapshotWriteError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
