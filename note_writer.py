import logging

from errors import JoplinAPIError
from joplin_client import JoplinClient
from models import JoplinNote, PocketArticle

logger = logging.getLogger(__name__)


def create_note_for_article(
    client: JoplinClient, tag_id: str, folder_id: str, article: PocketArticle
) -> str:
    """
    Create a Joplin note for a Pocket article and attach the marker tag.

    The note title is the article title and the body is its URL. Tagging
    uses the id Joplin assigned to the new note. If tagging fails the note
    is left in place untagged.

    Returns:
        Id of the created note

    Raises:
        JoplinAPIError: note creation or tagging failed; after a tagging
            failure its note_id names the untagged note
    """
    note = client.create_note(
        JoplinNote(title=article.title, body=article.url, parent_id=folder_id)
    )
    logger.debug(f"Created note {note.id} for item {article.item_id}")

    try:
        client.add_tag_to_note(tag_id, note.id)
    except JoplinAPIError as e:
        e.note_id = note.id
        raise
    return note.id
