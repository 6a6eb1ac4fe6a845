"""Factory functions for locale contexts."""

from typing import Optional

from translatable.configuration import Settings, get_settings
from translatable.i18n.models import LocaleContext
from translatable.i18n.resolvers import (
    HeaderLocaleResolver,
    SettingsDefaultLocaleProvider,
    StaticLocaleResolver,
)


def create_locale_context(
    locale: Optional[str] = None,
    accept_language: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> LocaleContext:
    """Create a LocaleContext wired to the configured default locale.

    The active locale comes from the Accept-Language header when one is
    given (negotiated against ``SUPPORTED_LOCALES``), otherwise from
    ``locale``. The default locale is read from ``DEFAULT_LOCALE``.

    Args:
        locale: Explicit active locale.
        accept_language: Accept-Language header value.
        settings: Settings instance (default: the singleton).

    Returns:
        LocaleContext

    Usage:
        context = create_locale_context(locale="de")
        context = create_locale_context(accept_language="de-AT,de;q=0.9,en;q=0.5")
    """
    settings = settings or get_settings()

    if accept_language is not None:
        resolver = HeaderLocaleResolver(
            accept_language, settings.locale.SUPPORTED_LOCALES
        )
    else:
        resolver = StaticLocaleResolver(locale)

    return LocaleContext(
        resolver=resolver,
        default_provider=SettingsDefaultLocaleProvider(settings),
    )
