#!/usr/bin/env python3
"""
Collect project documentation into the documentation site.

Copies READMEs and other Markdown files, connector and plugin docs and
assets into the site's content directory. With ``--watch`` the collector
keeps running and re-copies README files as they change.

Usage:
    python -m scripts.collect_docs [--watch]
"""

from __future__ import annotations

import argparse
import signal
import sys
import threading
from typing import Optional

from loguru import logger

from docsite.utils.config import get_settings
from domains.doc_ingest.collectors.doc_collector import DiscoveryError, DocCollector
from domains.doc_ingest.watchers.filesystem import DocsWatcher

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""

    parser = argparse.ArgumentParser(
        description="Collect Markdown documentation and assets into the docs site.",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="After collecting, watch the project and re-copy changed README files.",
    )

    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    """Send loguru output to stderr at ``level``."""

    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the CLI script."""

    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    collector = DocCollector(settings)

    try:
        collector.collect()
    except DiscoveryError as e:
        logger.error(f"Error collecting documentation: {e}")
        return 1

    if not args.watch:
        return 0

    stop_event = threading.Event()

    def _signal_handler(signum, frame):  # noqa: D401
        logger.info(f"Received signal {signum}, shutting down.")
        stop_event.set()

    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    DocsWatcher(collector).run(stop_event)

    logger.info("Documentation watcher stopped.")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI bridge
    sys.exit(main())
