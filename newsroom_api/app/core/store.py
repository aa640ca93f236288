"""
The application's in‑memory data store.

``NewsroomStore`` bundles the three entity collections and the
relationship queries over them.  One instance is created per
application by ``create_app`` and kept on ``app.state.store``; request
handlers receive it through the ``get_store`` dependency in
``api/deps.py``.  Nothing is written to disk: the store starts empty
(or with the sample data from ``seed.py``) and disappears with the
process.
"""

import logging
from typing import Any, Mapping, Optional

from newsroom_api.app.core.config import Settings
from newsroom_api.app.core.exceptions import ValidationError
from newsroom_api.app.core.seed import SEED_ARTICLES, SEED_CATEGORIES, SEED_JOURNALISTS
from newsroom_api.app.schemas.article import ArticleRead
from newsroom_api.app.schemas.category import CategoryRead
from newsroom_api.app.schemas.journalist import JournalistRead
from newsroom_api.app.services.entity_store import EntityStore
from newsroom_api.app.services.relational_index import RelationalIndex

logger = logging.getLogger(__name__)


class NewsroomStore:
    """Articles, journalists and categories held in memory."""

    def __init__(self, id_strategy: str = "sequential", enforce_references: bool = False) -> None:
        self.enforce_references = enforce_references
        self.articles: EntityStore[ArticleRead] = EntityStore(
            ArticleRead,
            required_fields=("title", "content", "journalist_id", "category_id"),
            label="Article",
            id_strategy=id_strategy,
        )
        self.journalists: EntityStore[JournalistRead] = EntityStore(
            JournalistRead,
            required_fields=("name", "email"),
            label="Journalist",
            id_strategy=id_strategy,
        )
        self.categories: EntityStore[CategoryRead] = EntityStore(
            CategoryRead,
            required_fields=("name",),
            label="Category",
            id_strategy=id_strategy,
        )
        self.relations = RelationalIndex(self.articles)

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "NewsroomStore":
        store = cls(
            id_strategy=app_settings.id_strategy,
            enforce_references=app_settings.enforce_references,
        )
        if app_settings.seed_data:
            store.load_seed_data()
        return store

    def create_article(self, fields: Mapping[str, Any]) -> ArticleRead:
        """Create an article, checking its references when enforcement is on."""
        if self.enforce_references:
            # Falsy keys are reported by the required-field check instead.
            self._check_references({k: v for k, v in fields.items() if v})
        return self.articles.create(fields)

    def update_article(self, article_id: Optional[int], fields: Mapping[str, Any]) -> ArticleRead:
        """Patch an article, checking changed references when enforcement is on."""
        if self.enforce_references:
            # Resolve the article first so an unknown id is a 404, not a 400.
            self.articles.get_by_id(article_id)
            self._check_references(fields)
        return self.articles.update(article_id, fields)

    def load_seed_data(self) -> None:
        """Replace the contents of every collection with the sample data."""
        for collection in (self.articles, self.journalists, self.categories):
            collection.clear()
        for journalist in SEED_JOURNALISTS:
            self.journalists.create(journalist)
        for category in SEED_CATEGORIES:
            self.categories.create(category)
        for article in SEED_ARTICLES:
            self.articles.create(article)
        logger.info(
            "Loaded seed data: %d journalists, %d categories, %d articles",
            len(self.journalists),
            len(self.categories),
            len(self.articles),
        )

    def _check_references(self, fields: Mapping[str, Any]) -> None:
        # Absent or None keys are not being set, so there is nothing to resolve.
        references = (
            ("journalist_id", self.journalists),
            ("category_id", self.categories),
        )
        for field, collection in references:
            value = fields.get(field)
            if value is None:
                continue
            if not any(entity.id == value for entity in collection.list_all()):
                raise ValidationError(f"{collection.label} {value} does not exist")
