"""Unit tests for MemoryRecordStore and MemoryQuery."""

import pytest

from translatable.operations import OperationStatus
from translatable.persistence import MemoryRecordStore, Record, RelatedPredicate

pytestmark = pytest.mark.unit


@pytest.fixture
def store():
    return MemoryRecordStore()


class TestMemoryPersist:
    """Test inserts and updates."""

    def test_insert_assigns_sequential_keys(self, store):
        first = Record("products", {"sku": "A"})
        second = Record("products", {"sku": "B"})

        assert store.persist(first).data == 1
        assert store.persist(second).data == 2
        assert first.exists and second.exists
        assert store.rows("products")[2] == {"id": 2, "sku": "B"}

    def test_insert_with_explicit_key(self, store):
        record = Record("products", {"id": 10, "sku": "A"})

        result = store.persist(record)

        assert result.is_success
        assert result.data == 10
        assert store.persist(Record("products", {"sku": "B"})).data == 11

    def test_duplicate_key_is_integrity_error(self, store):
        store.persist(Record("products", {"id": 1}))

        result = store.persist(Record("products", {"id": 1}))

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INTEGRITY_ERROR"

    def test_update_writes_dirty_fields(self, store):
        record = Record("products", {"sku": "A", "price": 1})
        store.persist(record)

        record.set("price", 2)
        result = store.persist(record)

        assert result.is_success
        assert result.message == "updated"
        assert store.rows("products")[1] == {"id": 1, "sku": "A", "price": 2}
        assert record.is_dirty() is False

    def test_update_missing_row(self, store):
        record = Record("products", {"id": 4, "sku": "A"}, exists=True)
        record.set("sku", "B")

        result = store.persist(record)

        assert result.status == OperationStatus.NOT_FOUND

    def test_stored_row_independent_of_record(self, store):
        record = Record("products", {"sku": "A"})
        store.persist(record)

        record.set("sku", "changed")

        assert store.rows("products")[1]["sku"] == "A"


class TestMemoryLoad:
    """Test find and load_related."""

    def test_find(self, store):
        store.persist(Record("products", {"sku": "A"}))

        found = store.find("products", "id", 1)

        assert found.exists
        assert found.get("sku") == "A"
        assert found.is_dirty() is False

    def test_find_missing(self, store):
        assert store.find("products", "id", 99) is None

    def test_load_related_in_insertion_order(self, store):
        for locale in ("en", "de"):
            store.persist(Record("product_translations", {"product_id": 1, "locale": locale}))
        store.persist(Record("product_translations", {"product_id": 2, "locale": "fr"}))

        related = store.load_related("product_translations", "product_id", 1)

        assert [r.get("locale") for r in related] == ["en", "de"]
        assert all(r.exists for r in related)


class TestMemoryQuery:
    """Test query composition."""

    @pytest.fixture
    def seeded(self, store):
        store.persist(Record("products", {"sku": "A", "active": True}))
        store.persist(Record("products", {"sku": "B", "active": False}))
        store.persist(Record("product_translations", {"product_id": 1, "locale": "en", "title": "Hello"}))
        store.persist(Record("product_translations", {"product_id": 2, "locale": "de", "title": "Hello"}))
        return store

    def test_where(self, seeded):
        rows = seeded.query("products").where("active", True).all()

        assert [r.key for r in rows] == [1]

    def test_where_exists(self, seeded):
        predicate = RelatedPredicate("product_translations", "product_id", "id").where(
            "title", "Hello"
        )

        rows = seeded.query("products").where_exists(predicate).all()

        assert [r.key for r in rows] == [1, 2]

    def test_where_exists_with_conditions_and_where(self, seeded):
        predicate = RelatedPredicate("product_translations", "product_id", "id").where(
            "title", "Hello"
        )

        rows = seeded.query("products").where_exists(predicate).where("active", False).all()

        assert [r.key for r in rows] == [2]

    def test_queries_are_immutable(self, seeded):
        base = seeded.query("products")

        base.where("active", True)

        assert len(base.all()) == 2


class TestRelatedPredicate:
    """Test predicate value semantics."""

    def test_where_returns_new_predicate(self):
        predicate = RelatedPredicate("t", "fk", "id")

        narrowed = predicate.where("locale", "en")

        assert predicate.conditions == ()
        assert narrowed.conditions == (("locale", "en"),)

    def test_matches(self):
        predicate = RelatedPredicate("t", "fk", "id").where("locale", "en")

        assert predicate.matches({"id": 1}, {"fk": 1, "locale": "en"})
        assert not predicate.matches({"id": 1}, {"fk": 2, "locale": "en"})
        assert not predicate.matches({"id": 1}, {"fk": 1, "locale": "de"})
