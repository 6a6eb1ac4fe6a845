"""Unit tests for translatable.logging.

Tests cover:
- bind_locale_context() context manager
- get_logger() / get_module_logger() context binding
- configure_logging() under pytest
- add_locale_defaults processor
"""

import logging
import uuid

import pytest
import structlog

from translatable.configuration import settings
from translatable.logging import (
    add_locale_defaults,
    bind_locale_context,
    configure_logging,
    get_logger,
    get_module_logger,
)


@pytest.mark.unit
class TestBindLocaleContext:
    """Test suite for bind_locale_context context manager."""

    def test_binds_locale_and_model(self):
        with bind_locale_context(locale="de", model="product"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["locale"] == "de"
            assert ctx["model"] == "product"

    def test_auto_generates_correlation_id(self):
        with bind_locale_context():
            correlation_id = structlog.contextvars.get_contextvars()["correlation_id"]
            uuid.UUID(correlation_id)

    def test_uses_provided_correlation_id(self):
        with bind_locale_context(correlation_id="save-123"):
            assert structlog.contextvars.get_contextvars()["correlation_id"] == "save-123"

    def test_none_values_not_bound(self):
        with bind_locale_context(locale=None, model=None):
            ctx = structlog.contextvars.get_contextvars()
            assert "locale" not in ctx
            assert "model" not in ctx

    def test_extra_context(self):
        with bind_locale_context(table="products"):
            assert structlog.contextvars.get_contextvars()["table"] == "products"

    def test_context_cleared_on_exit(self):
        with bind_locale_context(locale="fr", model="product"):
            pass

        ctx = structlog.contextvars.get_contextvars()
        assert "locale" not in ctx
        assert "model" not in ctx
        assert "correlation_id" not in ctx

    def test_context_cleared_after_exception(self):
        with pytest.raises(ValueError):
            with bind_locale_context(locale="fr"):
                raise ValueError("boom")

        assert "locale" not in structlog.contextvars.get_contextvars()


@pytest.mark.unit
class TestLoggers:
    """Test logger helpers."""

    def test_configure_logging_silenced_under_pytest(self):
        configure_logging(log_level="DEBUG")

        assert logging.root.level > logging.CRITICAL

    def test_get_logger_with_name(self):
        logger = get_logger("translatable.records")

        assert logger is not None
        assert hasattr(logger, "info")

    def test_get_module_logger_binds_component(self):
        logger = get_module_logger()

        assert logger is not None
        assert hasattr(logger, "warning")

    def test_get_module_logger_binds_calling_module(self):
        ctx = structlog.get_context(get_module_logger())

        assert ctx["module_path"] == __name__
        assert ctx["component"] == __name__

    def test_package_modules_bind_relative_component(self):
        from translatable.records import record

        ctx = structlog.get_context(record.logger)

        assert ctx["module_path"] == "translatable.records.record"
        assert ctx["component"] == "records.record"


@pytest.mark.unit
class TestAddLocaleDefaults:
    """Test the default-locale processor."""

    def test_adds_configured_default_locale(self):
        event = add_locale_defaults(None, "info", {"event": "translation_saved"})

        assert event["default_locale"] == settings.locale.DEFAULT_LOCALE

    def test_keeps_explicit_default_locale(self):
        event = add_locale_defaults(None, "info", {"event": "x", "default_locale": "fr"})

        assert event["default_locale"] == "fr"
