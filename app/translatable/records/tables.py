"""SQLAlchemy table definitions for translatable models."""

from typing import Tuple

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

from translatable.records.models import TranslatableModel


def define_translatable_tables(
    metadata: MetaData, model: TranslatableModel, *base_columns: Column
) -> Tuple[Table, Table]:
    """Register the base and translation tables of ``model`` on ``metadata``.

    The base table gets an integer primary key plus ``base_columns``. The
    translation table gets its own ``id``, a cascading foreign key to the
    base row, the locale column and one Text column per translated
    attribute, with at most one row per (base row, locale).

    Returns:
        (base_table, translation_table)

    Example:
        products, product_translations = define_translatable_tables(
            metadata, product, Column("sku", String(32)), Column("price", Integer)
        )
    """
    base = Table(
        model.table,
        metadata,
        Column(model.primary_key, Integer, primary_key=True, autoincrement=True),
        *base_columns,
    )

    translations = Table(
        model.translation_table,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column(
            model.relation_key,
            Integer,
            ForeignKey(f"{model.table}.{model.primary_key}", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        Column(model.locale_key, String(10), nullable=False),
        *(Column(attribute, Text) for attribute in model.translated_attributes),
        UniqueConstraint(
            model.relation_key,
            model.locale_key,
            name=f"uq_{model.translation_table}_{model.locale_key}",
        ),
    )
    return base, translations
