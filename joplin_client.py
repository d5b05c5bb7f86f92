#!/usr/bin/env python3
"""
Joplin Data API client.
Wraps the handful of endpoints the sync needs: tag and folder listing and
creation, note creation and tagging. Every request carries the API token as
a query parameter.
"""

import json
import logging
from typing import Any, Dict, List, Optional
import requests
from requests import Session

from config import SyncConfig
from data_parser import parse_joplin_entity
from errors import JoplinAPIError
from models import JoplinEntity, JoplinNote

logger = logging.getLogger(__name__)

ENTITY_KINDS = ("tags", "folders")


class JoplinClient:
    """Handles requests against a running Joplin Web Clipper service."""

    def __init__(
        self,
        session: Session,
        base_url: str,
        token: str,
        timeout: Optional[float] = None,
    ):
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    def _request(
        self, method: str, path: str, action: str, payload: Optional[Dict] = None
    ) -> Any:
        """
        Send one request and decode the JSON body.

        Args:
            method: "GET" or "POST"
            path: Path below the base URL, e.g. "/tags"
            action: Short description used in error messages
            payload: JSON body for POST requests

        Returns:
            Decoded response body

        Raises:
            JoplinAPIError: transport failure, non-200 status or invalid JSON
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                params={"token": self.token},
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            # str(e) embeds the full URL, token included
            raise JoplinAPIError(
                f"failed to {action}: {type(e).__name__} on {method} {url}"
            ) from e

        if response.status_code != 200:
            raise JoplinAPIError(
                f"failed to {action}, status code: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise JoplinAPIError(f"failed to {action}: invalid JSON response: {e}") from e

    def list_entities(self, kind: str) -> List[JoplinEntity]:
        """List the tags or folders known to Joplin (first page only)."""
        if kind not in ENTITY_KINDS:
            raise ValueError(f"Invalid kind '{kind}'. Must be one of: {ENTITY_KINDS}")

        data = self._request("GET", f"/{kind}", f"fetch {kind}")
        if not isinstance(data, dict) or not isinstance(data.get("items"), list):
            raise JoplinAPIError(f"failed to fetch {kind}: response has no 'items' list")

        if data.get("has_more"):
            logger.warning(
                f"Joplin returned more {kind} than fit in one page; only the first page is searched"
            )

        try:
            return [parse_joplin_entity(item) for item in data["items"]]
        except ValueError as e:
            raise JoplinAPIError(f"failed to fetch {kind}: {e}") from e

    def create_entity(self, kind: str, title: str) -> JoplinEntity:
        """Create a tag or folder with only its title set."""
        if kind not in ENTITY_KINDS:
            raise ValueError(f"Invalid kind '{kind}'. Must be one of: {ENTITY_KINDS}")

        action = f"create {kind[:-1]}"
        data = self._request("POST", f"/{kind}", action, {"title": title})
        try:
            return parse_joplin_entity(data)
        except ValueError as e:
            raise JoplinAPIError(f"failed to {action}: {e}") from e

    def create_note(self, note: JoplinNote) -> JoplinNote:
        """Create a note and return it with the id Joplin assigned."""
        data = self._request("POST", "/notes", "create note", note.to_payload())
        if not isinstance(data, dict) or not data.get("id"):
            raise JoplinAPIError("failed to create note: response has no 'id'")
        return JoplinNote(
            title=note.title, body=note.body, parent_id=note.parent_id, id=str(data["id"])
        )

    def add_tag_to_note(self, tag_id: str, note_id: str) -> None:
        self._request("POST", f"/tags/{tag_id}/notes", "tag note", {"id": note_id})


def create_joplin_client(
    config: SyncConfig, session: Optional[Session] = None
) -> JoplinClient:
    return JoplinClient(
        session=session or requests.Session(),
        base_url=config.joplin_base_url,
        token=config.joplin_token,
        timeout=config.request_timeout,
    )
