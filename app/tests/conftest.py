import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `translatable.records`) works during pytest collection even
# when pytest is invoked from outside the project root.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
from sqlalchemy import Column, Integer, MetaData, String, create_engine
from sqlalchemy.pool import StaticPool

from translatable.events import clear_handlers
from translatable.i18n import LocaleContext, StaticDefaultLocaleProvider
from translatable.persistence import MemoryRecordStore, SQLAlchemyRecordStore
from translatable.records import define_translatable_tables
from tests.factories.records import make_model


@pytest.fixture
def product_model():
    """Translatable "product" with translated title and description."""
    return make_model()


@pytest.fixture
def memory_store():
    return MemoryRecordStore()


@pytest.fixture
def sql_engine():
    """Single-connection in-memory SQLite engine."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(sql_engine, product_model):
    """SQLAlchemyRecordStore with the product tables created."""
    metadata = MetaData()
    define_translatable_tables(
        metadata,
        product_model,
        Column("sku", String(32)),
        Column("price", Integer),
    )
    metadata.create_all(sql_engine)
    return SQLAlchemyRecordStore(sql_engine, metadata)


@pytest.fixture
def locale_context():
    """Factory for LocaleContext with a static default locale."""

    def _factory(locale=None, default_locale="en"):
        return LocaleContext(
            locale=locale,
            default_provider=StaticDefaultLocaleProvider(default_locale),
        )

    return _factory


@pytest.fixture
def clear_event_handlers():
    """Clear event handlers before and after test."""
    clear_handlers()
    yield
    clear_handlers()
