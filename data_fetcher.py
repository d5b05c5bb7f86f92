#!/usr/bin/env python3
"""
Data Fetcher Module for Pocket to Joplin sync
Fetches the unread article set from the Pocket API in a single request.
"""

import json
import logging
from typing import List, Optional
import requests
from requests import Session

from config import SyncConfig
from data_parser import parse_pocket_response
from errors import ConfigError, PocketFetchError
from models import PocketArticle

logger = logging.getLogger(__name__)

POCKET_RETRIEVE_URL = "https://getpocket.com/v3/get"


class PocketDataFetcher:
    """Retrieves unread articles from the Pocket API."""

    def __init__(
        self,
        session: Session,
        consumer_key: str,
        access_token: str,
        base_url: str = POCKET_RETRIEVE_URL,
        timeout: Optional[float] = None,
    ):
        self.session = session
        self.consumer_key = consumer_key
        self.access_token = access_token
        self.base_url = base_url
        self.timeout = timeout

    def fetch_unread_articles(self) -> List[PocketArticle]:
        """
        Fetch every unread article with the lightweight detail level.

        Returns:
            List of PocketArticle, in no particular order

        Raises:
            ConfigError: consumer key or access token is empty
            PocketFetchError: transport failure, non-200 status or bad body
        """
        if not self.consumer_key or not self.access_token:
            raise ConfigError("Pocket consumer key and access token are required")

        params = {
            "consumer_key": self.consumer_key,
            "access_token": self.access_token,
            "state": "unread",
            "detailType": "simple",
        }

        logger.info("Fetching unread articles from Pocket")
        logger.debug(f"GET {self.base_url} (state=unread, detailType=simple)")

        try:
            response = self.session.get(
                self.base_url,
                params=params,
                headers={"X-Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            # str(e) embeds the full URL, credentials included
            raise PocketFetchError(
                f"Network error during Pocket request to {self.base_url}: {type(e).__name__}"
            ) from e

        if response.status_code != 200:
            raise PocketFetchError(
                f"failed to fetch articles, status code: {response.status_code}"
            )

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise PocketFetchError(f"Invalid JSON response: {e}") from e

        try:
            articles = parse_pocket_response(data)
        except ValueError as e:
            raise PocketFetchError(f"Malformed Pocket response: {e}") from e

        logger.info(f"Fetched {len(articles)} unread articles")
        return articles


def create_data_fetcher(
    config: SyncConfig, session: Optional[Session] = None
) -> PocketDataFetcher:
    """
    Create a data fetcher from the sync configuration.

    Args:
        config: Loaded SyncConfig
        session: Session to reuse; a new requests.Session when omitted

    Returns:
        PocketDataFetcher instance
    """
    return PocketDataFetcher(
        session=session or requests.Session(),
        consumer_key=config.pocket_consumer_key,
        access_token=config.pocket_access_token,
        timeout=config.request_timeout,
    )
