"""Locale resolution for translatable records.

Main components:
- models: LocaleContext, the explicit locale state passed to record operations
- resolvers: LocaleResolver / DefaultLocaleProvider contracts and their
  static, header-based and settings-based implementations
- factory: create_locale_context() from settings
"""

from translatable.i18n.factory import create_locale_context
from translatable.i18n.models import LocaleContext
from translatable.i18n.resolvers import (
    DefaultLocaleProvider,
    HeaderLocaleResolver,
    LanguageNegotiator,
    LocaleResolver,
    SettingsDefaultLocaleProvider,
    StaticDefaultLocaleProvider,
    StaticLocaleResolver,
)

__all__ = [
    "LocaleContext",
    "LocaleResolver",
    "DefaultLocaleProvider",
    "StaticLocaleResolver",
    "HeaderLocaleResolver",
    "StaticDefaultLocaleProvider",
    "SettingsDefaultLocaleProvider",
    "LanguageNegotiator",
    "create_locale_context",
]
