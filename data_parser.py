from typing import Dict, Any, List
from models import PocketArticle, JoplinEntity


def parse_pocket_article(raw: Dict[str, Any]) -> PocketArticle:
    """
    Parse a raw Pocket API article dict into a PocketArticle dataclass.
    Prefers the resolved title/URL and falls back to the given ones when
    Pocket could not resolve the item.
    """

    def get_str(*fields):
        for name in fields:
            val = raw.get(name)
            if val not in (None, ""):
                return str(val)
        return ""

    return PocketArticle(
        item_id=get_str("item_id"),
        title=get_str("resolved_title", "given_title"),
        url=get_str("resolved_url", "given_url"),
    )


def parse_pocket_response(data: Any) -> List[PocketArticle]:
    """
    Flatten a Pocket /v3/get response into a list of articles.

    The "list" field maps item id to article record; its iteration order
    carries no meaning. Pocket sends an empty JSON array instead of an
    empty object when nothing matches.

    Raises:
        ValueError: the body is not shaped like a Pocket retrieve response.
    """
    if not isinstance(data, dict) or "list" not in data:
        raise ValueError("response has no 'list' field")

    items = data["list"]
    if isinstance(items, list) and not items:
        return []
    if not isinstance(items, dict):
        raise ValueError(f"'list' field is a {type(items).__name__}, expected an object")

    articles = []
    for item_id, record in items.items():
        if not isinstance(record, dict):
            raise ValueError(f"item {item_id} is not an object")
        article = parse_pocket_article(record)
        if not article.item_id:
            article = PocketArticle(item_id=str(item_id), title=article.title, url=article.url)
        articles.append(article)
    return articles


def parse_joplin_entity(raw: Any) -> JoplinEntity:
    if not isinstance(raw, dict) or not raw.get("id"):
        raise ValueError(f"expected an object with an 'id', got {raw!r}")
    return JoplinEntity(id=str(raw["id"]), title=str(raw.get("title") or ""))
