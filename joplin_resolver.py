import logging

from joplin_client import JoplinClient

logger = logging.getLogger(__name__)


def resolve_or_create(client: JoplinClient, kind: str, title: str) -> str:
    """
    Return the id of the Joplin tag or folder titled `title`, creating it
    when none exists.

    Titles are compared exactly and case-sensitively; when Joplin holds
    duplicates the first one listed wins.

    Args:
        client: JoplinClient to talk to
        kind: "tags" or "folders"
        title: Title to look up

    Raises:
        JoplinAPIError: listing or creation failed
    """
    for entity in client.list_entities(kind):
        if entity.title == title:
            logger.info(f"Using existing {kind[:-1]} '{title}' ({entity.id})")
            return entity.id

    created = client.create_entity(kind, title)
    logger.info(f"Created {kind[:-1]} '{title}' ({created.id})")
    return created.id
