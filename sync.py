#!/usr/bin/env python3
"""
Sync orchestrator: Pocket unread articles -> tagged Joplin notes.

Runs fetch, tag resolution and folder resolution as fatal gates, then
writes one note per article, recording each outcome and moving on when an
article fails.
"""

import logging

from config import SyncConfig
from data_fetcher import PocketDataFetcher
from errors import SyncAbortedError, SyncError
from joplin_client import JoplinClient
from joplin_resolver import resolve_or_create
from models import ArticleOutcome, SyncReport
from note_writer import create_note_for_article

logger = logging.getLogger(__name__)

PHASE_FETCH = "fetching articles from Pocket"
PHASE_TAG = "getting or creating tag in Joplin"
PHASE_FOLDER = "getting or creating folder in Joplin"


class PocketJoplinSync:
    """Sequences one sync run."""

    def __init__(self, config: SyncConfig, fetcher: PocketDataFetcher, joplin: JoplinClient):
        self.config = config
        self.fetcher = fetcher
        self.joplin = joplin

    def run(self) -> SyncReport:
        """
        Run the sync once.

        Returns:
            SyncReport with one outcome per fetched article

        Raises:
            SyncAbortedError: fetching, tag or folder resolution failed;
                no note has been written in that case
        """
        try:
            articles = self.fetcher.fetch_unread_articles()
        except SyncError as e:
            logger.error(f"Error {PHASE_FETCH}: {e}")
            raise SyncAbortedError(PHASE_FETCH, e) from e

        try:
            tag_id = resolve_or_create(self.joplin, "tags", self.config.tag_title)
        except SyncError as e:
            logger.error(f"Error {PHASE_TAG} '{self.config.tag_title}': {e}")
            raise SyncAbortedError(PHASE_TAG, e) from e

        try:
            folder_id = resolve_or_create(self.joplin, "folders", self.config.folder_title)
        except SyncError as e:
            logger.error(f"Error {PHASE_FOLDER} '{self.config.folder_title}': {e}")
            raise SyncAbortedError(PHASE_FOLDER, e) from e

        report = SyncReport(tag_id=tag_id, folder_id=folder_id)
        logger.info(f"Processing {len(articles)} articles")

        for article in articles:
            try:
                note_id = create_note_for_article(self.joplin, tag_id, folder_id, article)
            except SyncError as e:
                orphan_id = getattr(e, "note_id", None)
                logger.error(
                    f"Error creating note in Joplin for item {article.item_id} ('{article.title}'): {e}"
                    + (f" (note {orphan_id} left untagged)" if orphan_id else "")
                )
                report.record(ArticleOutcome(article=article, note_id=orphan_id, error=str(e)))
                continue
            report.record(ArticleOutcome(article=article, note_id=note_id))

        logger.info("All articles have been processed.")
        return report
