"""Unit tests for QueryScope.filter_by_translation."""

import pytest
from unittest.mock import MagicMock

from translatable.persistence import RelatedPredicate
from translatable.records import QueryScope, UnknownTranslatedFieldError
from tests.factories.records import make_model, make_saved_record

pytestmark = pytest.mark.unit


def _seed(model, store):
    """Three products with a mix of translations."""
    make_saved_record(model, store, {"sku": "A", "price": 1}, {"de": {"title": "Hallo"}, "en": {"title": "Hello"}})
    make_saved_record(model, store, {"sku": "B", "price": 2}, {"de": {"title": "Hallo"}})
    make_saved_record(model, store, {"sku": "C", "price": 1}, {"en": {"title": "Hallo"}})


class TestPredicate:
    """Test the predicate handed to the query."""

    def test_filter_builds_exists_predicate(self, product_model):
        query = MagicMock()

        QueryScope(product_model).filter_by_translation(query, "title", "Hallo", "de")

        query.where_exists.assert_called_once_with(
            RelatedPredicate(
                table="product_translations",
                foreign_key="product_id",
                owner_key="id",
                conditions=(("title", "Hallo"), ("locale", "de")),
            )
        )

    def test_without_locale_no_locale_condition(self, product_model):
        query = MagicMock()

        QueryScope(product_model).filter_by_translation(query, "title", "Hallo")

        predicate = query.where_exists.call_args.args[0]
        assert predicate.conditions == (("title", "Hallo"),)

    def test_returns_query_result(self, product_model):
        query = MagicMock()

        result = QueryScope(product_model).filter_by_translation(query, "title", "x")

        assert result is query.where_exists.return_value

    def test_non_translated_field_rejected(self, product_model):
        query = MagicMock()

        with pytest.raises(UnknownTranslatedFieldError) as exc_info:
            QueryScope(product_model).filter_by_translation(query, "sku", "A")

        assert exc_info.value.field == "sku"
        query.where_exists.assert_not_called()

    def test_custom_keys(self):
        model = make_model(primary_key="code", locale_key="lang")
        query = MagicMock()

        QueryScope(model).filter_by_translation(query, "title", "x", "fr")

        predicate = query.where_exists.call_args.args[0]
        assert predicate.foreign_key == "code"
        assert predicate.owner_key == "code"
        assert predicate.conditions == (("title", "x"), ("lang", "fr"))


class TestFilterMemoryStore:
    """Test filtering against the memory store."""

    def test_composed_with_other_predicate(self, product_model, memory_store):
        _seed(product_model, memory_store)
        scope = QueryScope(product_model)

        query = scope.filter_by_translation(memory_store.query("products"), "title", "Hallo", "de")

        assert [r.get("sku") for r in query.all()] == ["A", "B"]
        assert [r.get("sku") for r in query.where("price", 2).all()] == ["B"]

    def test_any_locale(self, product_model, memory_store):
        _seed(product_model, memory_store)

        query = QueryScope(product_model).filter_by_translation(
            memory_store.query("products"), "title", "Hallo"
        )

        assert [r.get("sku") for r in query.all()] == ["A", "B", "C"]


class TestFilterSQLAlchemyStore:
    """Test filtering against SQLite."""

    def test_composed_with_other_predicate(self, product_model, sql_store):
        _seed(product_model, sql_store)
        scope = QueryScope(product_model)

        query = scope.filter_by_translation(sql_store.query("products"), "title", "Hallo", "de")

        assert [r.get("sku") for r in query.all()] == ["A", "B"]
        assert [r.get("sku") for r in query.where("price", 1).all()] == ["A"]

    def test_two_translation_filters_and_together(self, product_model, sql_store):
        _seed(product_model, sql_store)
        scope = QueryScope(product_model)

        query = scope.filter_by_translation(sql_store.query("products"), "title", "Hallo", "de")
        query = scope.filter_by_translation(query, "title", "Hello", "en")

        assert [r.get("sku") for r in query.all()] == ["A"]

    def test_statement_uses_exists(self, product_model, sql_store):
        query = QueryScope(product_model).filter_by_translation(
            sql_store.query("products"), "title", "Hallo", "de"
        )

        assert "EXISTS" in str(query.statement)
