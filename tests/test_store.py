"""
Tests for the application store: settings, seeding and reference checks.
"""

import pytest

from newsroom_api.app.core.config import Settings
from newsroom_api.app.core.exceptions import NotFoundError, ValidationError
from newsroom_api.app.core.seed import SEED_ARTICLES, SEED_CATEGORIES, SEED_JOURNALISTS
from newsroom_api.app.core.store import NewsroomStore


@pytest.fixture
def strict_store():
    store = NewsroomStore(enforce_references=True)
    store.journalists.create({"name": "A", "email": "a@x.com"})
    store.categories.create({"name": "Tech"})
    return store


class TestFromSettings:

    def test_starts_empty_by_default(self):
        store = NewsroomStore.from_settings(Settings(seed_data=False))
        assert len(store.articles) == len(store.journalists) == len(store.categories) == 0

    def test_passes_id_strategy_to_every_collection(self):
        store = NewsroomStore.from_settings(Settings(id_strategy="length", seed_data=False))
        assert {s.id_strategy for s in (store.articles, store.journalists, store.categories)} == {"length"}

    def test_seed_data(self):
        store = NewsroomStore.from_settings(Settings(seed_data=True))
        assert len(store.journalists) == len(SEED_JOURNALISTS)
        assert len(store.categories) == len(SEED_CATEGORIES)
        assert len(store.articles) == len(SEED_ARTICLES)
        assert [a.id for a in store.relations.articles_by_journalist(1)] == [1, 3]

    def test_reseeding_replaces_contents(self):
        store = NewsroomStore()
        store.journalists.create({"name": "Extra", "email": "e@x.com"})
        store.load_seed_data()
        store.load_seed_data()
        assert [j.id for j in store.journalists.list_all()] == [1, 2]

    def test_seeded_articles_reference_existing_parents(self):
        store = NewsroomStore(enforce_references=True)
        store.load_seed_data()
        journalist_ids = {j.id for j in store.journalists.list_all()}
        category_ids = {c.id for c in store.categories.list_all()}
        for article in store.articles.list_all():
            assert article.journalist_id in journalist_ids
            assert article.category_id in category_ids


class TestRelaxedReferences:

    def test_dangling_references_are_accepted(self, store):
        article = store.create_article({"title": "T", "content": "C", "journalist_id": 9, "category_id": 9})
        assert article.journalist_id == 9

    def test_deleting_a_journalist_keeps_articles(self, store):
        store.journalists.create({"name": "A", "email": "a@x.com"})
        store.create_article({"title": "T", "content": "C", "journalist_id": 1, "category_id": 1})
        store.journalists.delete_by_id(1)
        assert len(store.relations.articles_by_journalist(1)) == 1


class TestEnforcedReferences:

    def test_valid_references(self, strict_store):
        article = strict_store.create_article({"title": "T", "content": "C", "journalist_id": 1, "category_id": 1})
        assert article.id == 1

    def test_unknown_journalist(self, strict_store):
        with pytest.raises(ValidationError) as excinfo:
            strict_store.create_article({"title": "T", "content": "C", "journalist_id": 2, "category_id": 1})
        assert excinfo.value.message == "Journalist 2 does not exist"
        assert len(strict_store.articles) == 0

    def test_unknown_category_on_update(self, strict_store):
        article = strict_store.create_article({"title": "T", "content": "C", "journalist_id": 1, "category_id": 1})
        with pytest.raises(ValidationError) as excinfo:
            strict_store.update_article(article.id, {"category_id": 5})
        assert excinfo.value.message == "Category 5 does not exist"
        assert article.category_id == 1

    def test_missing_fields_still_reported_as_missing(self, strict_store):
        with pytest.raises(ValidationError) as excinfo:
            strict_store.create_article({"title": "T"})
        assert excinfo.value.message == "Missing required fields"

    def test_update_unknown_article_is_not_found(self, strict_store):
        with pytest.raises(NotFoundError):
            strict_store.update_article(3, {"category_id": 5})

    def test_zero_reference_on_update_is_rejected(self, strict_store):
        article = strict_store.create_article({"title": "T", "content": "C", "journalist_id": 1, "category_id": 1})
        with pytest.raises(ValidationError) as excinfo:
            strict_store.update_article(article.id, {"journalist_id": 0})
        assert excinfo.value.message == "Journalist 0 does not exist"
        assert article.journalist_id == 1

    def test_zero_reference_on_create_is_missing(self, strict_store):
        with pytest.raises(ValidationError) as excinfo:
            strict_store.create_article({"title": "T", "content": "C", "journalist_id": 0, "category_id": 1})
        assert excinfo.value.message == "Missing required fields"
        assert excinfo.value.missing == ["journalist_id"]
