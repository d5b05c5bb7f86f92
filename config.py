"""
Configuration for the Pocket to Joplin sync.

Values come from environment variables (or a .env file) and are read once
into an immutable SyncConfig that is handed to every component.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from errors import ConfigError

DEFAULT_JOPLIN_BASE_URL = "http://localhost:41184"
DEFAULT_TAG_TITLE = "to_read"
DEFAULT_FOLDER_TITLE = "Main"

REQUIRED_VARIABLES = ("POCKET_CONSUMER_KEY", "POCKET_ACCESS_TOKEN", "JOPLIN_TOKEN")


@dataclass(frozen=True)
class SyncConfig:
    pocket_consumer_key: str
    pocket_access_token: str
    joplin_token: str
    joplin_base_url: str = DEFAULT_JOPLIN_BASE_URL
    tag_title: str = DEFAULT_TAG_TITLE
    folder_title: str = DEFAULT_FOLDER_TITLE
    request_timeout: Optional[float] = None  # None: block as long as requests does


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"REQUEST_TIMEOUT must be a number of seconds, got '{raw}'")
    if timeout <= 0:
        raise ConfigError(f"REQUEST_TIMEOUT must be positive, got '{raw}'")
    return timeout


def load_config(environ: Optional[Mapping[str, str]] = None) -> SyncConfig:
    """
    Build a SyncConfig from the environment.

    Args:
        environ: Mapping to read instead of os.environ. When omitted, a .env
            file in the working directory is loaded first.

    Raises:
        ConfigError: a required variable is missing or blank, or an optional
            one is malformed.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    def get(name: str, default: str = "") -> str:
        return (environ.get(name) or "").strip() or default

    missing = [name for name in REQUIRED_VARIABLES if not get(name)]
    if missing:
        raise ConfigError(
            f"{', '.join(missing)} environment variable(s) are required"
        )

    return SyncConfig(
        pocket_consumer_key=get("POCKET_CONSUMER_KEY"),
        pocket_access_token=get("POCKET_ACCESS_TOKEN"),
        joplin_token=get("JOPLIN_TOKEN"),
        joplin_base_url=get("JOPLIN_BASE_URL", DEFAULT_JOPLIN_BASE_URL).rstrip("/"),
        tag_title=get("JOPLIN_TAG", DEFAULT_TAG_TITLE),
        folder_title=get("JOPLIN_FOLDER", DEFAULT_FOLDER_TITLE),
        request_timeout=_parse_timeout(environ.get("REQUEST_TIMEOUT")),
    )
