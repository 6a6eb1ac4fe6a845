"""Fixtures for translatable record tests."""

import pytest
from unittest.mock import MagicMock

from tests.factories.records import make_saved_record, make_translatable


@pytest.fixture
def emitter():
    """LifecycleEmitter mock allowing every notification."""
    mock = MagicMock()
    mock.fire_event.return_value = True
    return mock


@pytest.fixture
def fired(emitter):
    """Names of the notifications fired on ``emitter``, in order."""

    def _fired():
        return [c.args[0] for c in emitter.fire_event.call_args_list]

    return _fired


@pytest.fixture
def greeting_product(product_model, memory_store):
    """Persisted product {id: 1} with en "Hello" and de "Hallo" translations."""
    return make_saved_record(
        product_model,
        memory_store,
        {"sku": "A-1"},
        {"en": {"title": "Hello"}, "de": {"title": "Hallo"}},
    )


@pytest.fixture
def load_product(product_model, memory_store, locale_context):
    """Load a persisted product from the memory store and wrap it."""

    def _load(key=1, locale=None, default_locale="en", emitter=None, store=None):
        store = store or memory_store
        base = store.find(product_model.table, product_model.primary_key, key)
        return make_translatable(
            product_model,
            store,
            context=locale_context(locale, default_locale),
            emitter=emitter,
            base=base,
        )

    return _load
