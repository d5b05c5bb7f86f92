from dataclasses import dataclass, field
from typing import Optional, Dict, List


@dataclass(frozen=True)
class PocketArticle:
    item_id: str
    title: str = ""
    url: str = ""


@dataclass(frozen=True)
class JoplinEntity:
    """A Joplin tag or folder; both only carry an id and a title here."""

    id: str
    title: str


@dataclass
class JoplinNote:
    title: str
    body: str
    parent_id: str
    id: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        return {"title": self.title, "body": self.body, "parent_id": self.parent_id}


@dataclass
class ArticleOutcome:
    article: PocketArticle
    note_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class SyncReport:
    tag_id: str
    folder_id: str
    outcomes: List[ArticleOutcome] = field(default_factory=list)

    def record(self, outcome: ArticleOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> List[ArticleOutcome]:
        return [o for o in self.outcomes if o.succeeded]

    @property
    def failed(self) -> List[ArticleOutcome]:
        return [o for o in self.outcomes if not o.succeeded]
