#!/usr/bin/env python3
"""
Pocket to Joplin
Copies unread Pocket articles into Joplin as tagged notes.
"""

import sys
import logging
from typing import List, Optional

import requests

from config import load_config
from data_fetcher import create_data_fetcher
from errors import ConfigError, SyncAbortedError
from joplin_client import create_joplin_client
from models import SyncReport
from sync import PocketJoplinSync

logger = logging.getLogger(__name__)


def print_summary(report: SyncReport) -> None:
    print("\n" + "=" * 60)
    print("📊 SYNC SUMMARY")
    print("=" * 60)
    print(f"   Articles processed: {report.attempted:,}")
    print(f"   Notes created:      {len(report.succeeded):,}")
    print(f"   Failed:             {len(report.failed):,}")
    for outcome in report.failed:
        print(f"   ❌ {outcome.article.item_id} {outcome.article.title!r}: {outcome.error}")
        if outcome.note_id:
            print(f"      untagged note left in Joplin: {outcome.note_id}")
    print("=" * 60)


def sync_articles(session: Optional[requests.Session] = None) -> Optional[SyncReport]:
    """
    Load configuration and run one sync.

    Returns:
        SyncReport of the run, or None when configuration, fetching or
        tag/folder resolution failed (the cause is logged)
    """
    try:
        config = load_config()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return None

    session = session or requests.Session()
    syncer = PocketJoplinSync(
        config,
        fetcher=create_data_fetcher(config, session),
        joplin=create_joplin_client(config, session),
    )

    try:
        report = syncer.run()
    except SyncAbortedError:
        # already logged with the failing phase
        return None

    print_summary(report)
    return report


def main(argv: Optional[List[str]] = None) -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Copy unread Pocket articles into Joplin")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # exit status is 0 whenever the program ran to completion, fatal phase
    # failures and per-article errors included
    try:
        sync_articles()
    except KeyboardInterrupt:
        logger.info("⏹️  Sync interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
