"""Locale settings."""

from typing import List, Optional

from pydantic import Field

from translatable.configuration.base import ComponentSettings


class LocaleSettings(ComponentSettings):
    """Locale defaults used when building locale contexts.

    Environment Variables:
        DEFAULT_LOCALE: Secondary fallback locale for reads (default: "en").
            Empty string disables the default locale tier.
        SUPPORTED_LOCALES: Locales accepted when negotiating from an
            Accept-Language header (default: ["en"])
        LOCALE_KEY: Column holding the locale code on translation rows
            (default: "locale")

    Example:
        ```python
        from translatable.configuration import get_settings

        settings = get_settings()
        default = settings.locale.DEFAULT_LOCALE
        ```
    """

    DEFAULT_LOCALE: Optional[str] = Field(
        default="en",
        description="Fallback locale consulted when the requested locale has no translation",
    )
    SUPPORTED_LOCALES: List[str] = Field(
        default_factory=lambda: ["en"],
        description="Locales accepted by header-based locale resolution",
    )
    LOCALE_KEY: str = Field(
        default="locale",
        description="Name of the locale column on translation records",
    )
