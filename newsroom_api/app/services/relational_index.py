"""
Article lookups by parent entity.

No separate index is maintained: every query filters the current
article list, so results always reflect the latest writes.  An empty
result is reported as ``NotFoundError``; a journalist without articles
and a journalist that does not exist look the same to the caller.
"""

from typing import List, Optional

from newsroom_api.app.core.exceptions import NotFoundError
from newsroom_api.app.schemas.article import ArticleRead
from newsroom_api.app.services.entity_store import EntityStore


class RelationalIndex:
    """Answer "all articles referencing X" queries."""

    def __init__(self, articles: EntityStore[ArticleRead]) -> None:
        self.articles = articles

    def articles_by_journalist(self, journalist_id: Optional[int]) -> List[ArticleRead]:
        """Articles written by ``journalist_id``, in insertion order."""
        return self._filter("journalist_id", journalist_id, "No articles found for this journalist")

    def articles_by_category(self, category_id: Optional[int]) -> List[ArticleRead]:
        """Articles filed under ``category_id``, in insertion order."""
        return self._filter("category_id", category_id, "No articles found for this category")

    def _filter(self, field: str, value: Optional[int], empty_message: str) -> List[ArticleRead]:
        matches = [
            article
            for article in self.articles.list_all()
            if value is not None and getattr(article, field) == value
        ]
        if not matches:
            raise NotFoundError(empty_message)
        return matches
