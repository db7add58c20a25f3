"""
Tests for the idea store.

Tests the IdeaStore contract on the in-memory implementation: id
allocation, ordering, update/archive/delete semantics and error handling.
"""

import pytest
from datetime import datetime, timedelta

from idealog.errors import NotFoundError, ValidationError
from idealog.models.idea import Category, Idea
from idealog.store.base import IdeaStore
from idealog.store.memory import MemoryIdeaStore

from tests.test_config import CONFIG


# =============================================================================
# Create
# =============================================================================

class TestCreate:
    """Tests for store.create()."""

    def test_create_returns_id_and_stores_fields(self, store):
        idea_id = store.create({
            "title": "Prototype app",
            "content": "Clickable",
            "category": "tech",
            "tags": ["mobile"],
        })

        idea = store.get(idea_id)
        assert idea.title == "Prototype app"
        assert idea.content == "Clickable"
        assert idea.category is Category.TECH
        assert idea.tags == ["mobile"]
        assert idea.archived is False
        assert idea.created_at == CONFIG["fixed_now"]

    def test_ids_are_unique_and_increasing(self, store):
        ids = [store.create({"title": f"Idea {n}", "category": "tech"}) for n in range(3)]

        assert ids == [1, 2, 3]

    def test_new_ideas_come_first(self, store):
        first = store.create({"title": "First", "category": "tech"})
        second = store.create({"title": "Second", "category": "tech"})

        assert [i.id for i in store.all()] == [second, first]

    def test_invalid_fields_leave_store_unchanged(self, store):
        with pytest.raises(ValidationError):
            store.create({"title": "", "category": "tech"})

        assert store.count() == 0

    def test_ids_not_reused_after_delete(self, store):
        first = store.create({"title": "First", "category": "tech"})
        store.delete(first)

        second = store.create({"title": "Second", "category": "tech"})

        assert second != first

    def test_all_returns_a_copy(self, store):
        store.create({"title": "First", "category": "tech"})

        store.all().clear()

        assert store.count() == 1


# =============================================================================
# Update
# =============================================================================

class TestUpdate:
    """Tests for store.update()."""

    def test_update_changes_only_supplied_fields(self, store, clock):
        idea_id = store.create({"title": "Old", "content": "keep", "category": "tech"})
        clock.advance(minutes=10)

        idea = store.update(idea_id, {"title": "New", "tags": ["ui"]})

        assert idea.title == "New"
        assert idea.content == "keep"
        assert idea.tags == ["ui"]
        assert idea.updated_at == CONFIG["fixed_now"] + timedelta(minutes=10)

    def test_update_never_changes_created_at(self, store, clock):
        idea_id = store.create({"title": "Old", "category": "tech"})
        clock.advance(days=1)

        store.update(idea_id, {"category": "design"})

        assert store.get(idea_id).created_at == CONFIG["fixed_now"]

    def test_update_rejects_created_at(self, store):
        idea_id = store.create({"title": "Old", "category": "tech"})

        with pytest.raises(ValidationError):
            store.update(idea_id, {"created_at": datetime(2000, 1, 1)})

    def test_update_with_empty_title_is_rejected_without_change(self, store):
        idea_id = store.create({"title": "Old", "category": "tech"})

        with pytest.raises(ValidationError):
            store.update(idea_id, {"title": " ", "content": "new"})

        assert store.get(idea_id).title == "Old"
        assert store.get(idea_id).content == ""

    def test_update_with_no_fields_is_rejected(self, store):
        idea_id = store.create({"title": "Old", "category": "tech"})

        with pytest.raises(ValidationError):
            store.update(idea_id, {})

    def test_update_missing_id_raises_not_found(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            store.update(99, {"title": "x"})

        assert exc_info.value.idea_id == 99


# =============================================================================
# Archive
# =============================================================================

class TestArchive:
    """Tests for store.archive()."""

    def test_archive_and_restore_round_trip(self, store):
        idea_id = store.create({"title": "Idea", "content": "c", "category": "design", "tags": ["ui"]})
        before = store.get(idea_id)
        snapshot = (before.title, before.content, before.category, list(before.tags), before.created_at)

        store.archive(idea_id, True)
        assert store.get(idea_id).archived is True

        store.archive(idea_id, False)
        after = store.get(idea_id)
        assert after.archived is False
        assert (after.title, after.content, after.category, after.tags, after.created_at) == snapshot

    def test_archive_missing_id_raises_not_found(self, store):
        with pytest.raises(NotFoundError):
            store.archive(5, True)


# =============================================================================
# Delete
# =============================================================================

class TestDelete:
    """Tests for store.delete()."""

    def test_delete_removes_idea(self, seeded_store, ids_by_title):
        idea_id = ids_by_title["Logo refresh"]

        seeded_store.delete(idea_id)

        assert idea_id not in [i.id for i in seeded_store.all()]
        assert not seeded_store.exists(idea_id)

    def test_second_delete_raises_not_found(self, store):
        idea_id = store.create({"title": "Idea", "category": "tech"})
        store.delete(idea_id)

        with pytest.raises(NotFoundError):
            store.delete(idea_id)

    def test_get_missing_raises_not_found(self, store):
        with pytest.raises(NotFoundError):
            store.get(1)


# =============================================================================
# Extras
# =============================================================================

class TestStoreExtras:
    """Tests for all_tags(), seed() and clear()."""

    def test_all_tags_in_first_seen_store_order(self, seeded_store):
        assert seeded_store.all_tags() == ["urgent", "marketing", "mobile", "backend"]

    def test_seed_keeps_timestamps_and_orders_newest_first(self, store):
        now = CONFIG["fixed_now"]
        ideas = [
            Idea(title="Older", created_at=now - timedelta(days=2)),
            Idea(title="Newer", created_at=now - timedelta(hours=1), archived=True),
        ]

        ids = store.seed(ideas)

        assert len(ids) == 2
        assert [i.title for i in store.all()] == ["Newer", "Older"]
        assert store.all()[0].archived is True
        assert store.all()[1].created_at == now - timedelta(days=2)

    def test_seed_does_not_share_tag_lists(self, store):
        source = Idea(title="x", tags=["a"])
        store.seed([source])

        store.all()[0].tags.append("b")

        assert source.tags == ["a"]

    def test_clear_keeps_id_counter(self, store):
        store.create({"title": "One", "category": "tech"})
        store.clear()

        assert store.count() == 0
        assert store.create({"title": "Two", "category": "tech"}) == 2

    def test_memory_store_is_an_idea_store(self, store):
        assert isinstance(store, IdeaStore)
        assert store.name == "memory"
        assert repr(store) == "<MemoryIdeaStore name='memory'>"
