"""Translatable records configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from translatable.configuration.locale import LocaleSettings
from translatable.configuration.persistence import PersistenceSettings


class Settings(BaseSettings):
    """Configuration settings - main aggregator.

    Aggregates the component settings into a single configuration object.

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from translatable.configuration import settings

        default_locale = settings.locale.DEFAULT_LOCALE
        database_url = settings.persistence.database_url

        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    locale: LocaleSettings
    persistence: PersistenceSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "locale": LocaleSettings,
            "persistence": PersistenceSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()


def get_settings() -> Settings:
    """Return the singleton Settings instance."""
    return settings
