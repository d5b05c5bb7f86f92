"""
Exceptions raised by the Pocket to Joplin sync.
"""

from typing import Optional


class SyncError(Exception):
    """Base class for every failure the sync reports."""


class ConfigError(SyncError):
    """Required configuration is missing or invalid."""


class PocketFetchError(SyncError):
    """The unread article set could not be retrieved from Pocket."""


class JoplinAPIError(SyncError):
    """A Joplin Data API request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
        # set when a note was created but could not be tagged
        self.note_id: Optional[str] = None


class SyncAbortedError(SyncError):
    """A fatal phase failed and the run stopped before processing articles."""

    def __init__(self, phase: str, cause: Exception):
        super().__init__(f"{phase} failed: {cause}")
        self.phase = phase
        self.cause = cause
