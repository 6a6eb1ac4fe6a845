"""Unit tests for TranslatableModel declarations."""

import pytest
from pydantic import ValidationError

from translatable.records import FieldAccess, InvalidModelConfigError, TranslatableModel

pytestmark = pytest.mark.unit


class TestTranslatableModelDefaults:
    """Test derived names and defaults."""

    def test_derived_table_names(self, product_model):
        assert product_model.table == "products"
        assert product_model.translation_table == "product_translations"
        assert product_model.primary_key == "id"
        assert product_model.locale_key == "locale"

    def test_explicit_table_names(self):
        model = TranslatableModel(
            name="category",
            table="categories",
            translation_table="category_i18n",
            translated_attributes=("label",),
        )

        assert model.table == "categories"
        assert model.translation_table == "category_i18n"

    def test_locale_key_defaults_from_settings(self):
        model = TranslatableModel(name="product", translated_attributes=("title",))

        assert model.locale_key == "locale"

    def test_model_is_frozen(self, product_model):
        with pytest.raises(ValidationError):
            product_model.name = "other"


class TestRelationKey:
    """Test foreign key derivation."""

    def test_conventional_primary_key(self, product_model):
        assert product_model.relation_key == "product_id"

    def test_custom_primary_key_is_reused(self):
        model = TranslatableModel(
            name="product", primary_key="product_code", translated_attributes=("title",)
        )

        assert model.relation_key == "product_code"

    def test_explicit_foreign_key_wins(self):
        model = TranslatableModel(
            name="product",
            translated_attributes=("title",),
            translation_foreign_key="owner_id",
        )

        assert model.relation_key == "owner_id"


class TestAccessorTable:
    """Test field routing."""

    def test_translated_attributes(self, product_model):
        assert product_model.access_for("title") is FieldAccess.TRANSLATED
        assert product_model.is_translated("description")

    def test_other_attributes_are_direct(self, product_model):
        assert product_model.access_for("sku") is FieldAccess.DIRECT
        assert not product_model.is_translated("id")


class TestValidation:
    """Test invalid declarations."""

    def test_requires_translated_attributes(self):
        with pytest.raises(InvalidModelConfigError):
            TranslatableModel(name="product", translated_attributes=())

    def test_rejects_duplicates(self):
        with pytest.raises(InvalidModelConfigError):
            TranslatableModel(name="product", translated_attributes=("title", "title"))

    @pytest.mark.parametrize("attribute", ["id", "locale", "product_id"])
    def test_rejects_key_columns(self, attribute):
        with pytest.raises(InvalidModelConfigError):
            TranslatableModel(name="product", translated_attributes=("title", attribute))
