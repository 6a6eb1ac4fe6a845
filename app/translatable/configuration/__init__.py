"""Configuration module - public API.

Centralized configuration for translatable records using Pydantic
BaseSettings, organized by concern.

Exports:
    settings: Singleton Settings instance
    get_settings: Accessor for the singleton (dependency injection friendly)
    Settings: Main settings class (for testing/overrides)
    LocaleSettings: Locale defaults
    PersistenceSettings: Storage options

Example:
    ```python
    from translatable.configuration import get_settings

    settings = get_settings()

    default_locale = settings.locale.DEFAULT_LOCALE
    if settings.persistence.use_transactions:
        ...
    ```
"""

from translatable.configuration.locale import LocaleSettings
from translatable.configuration.persistence import PersistenceSettings
from translatable.configuration.settings import Settings, get_settings, settings

__all__ = [
    "Settings",
    "LocaleSettings",
    "PersistenceSettings",
    "get_settings",
    "settings",
]
