"""Structured logging.

Centralized structlog configuration and utilities for translatable records.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - add_locale_defaults(): Processor adding the configured default locale
    - bind_locale_context(): Context manager for locale-scoped logging

Example:
    from translatable.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("translation_saved", table="product_translations", locale="de")
"""

from translatable.logging.context import bind_locale_context
from translatable.logging.setup import (
    add_locale_defaults,
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    "add_locale_defaults",
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_locale_context",
]
