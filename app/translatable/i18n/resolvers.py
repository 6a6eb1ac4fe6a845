"""Locale resolution strategies.

LocaleResolver supplies the active locale and DefaultLocaleProvider the
secondary fallback locale; both may return None, meaning "no constraint".
"""

from typing import List, Optional, Protocol, Sequence

import structlog

from translatable.configuration import Settings

logger = structlog.get_logger().bind(component="i18n.resolver")


class LocaleResolver(Protocol):
    """Reports the locale in effect for the current operation."""

    def current_locale(self) -> Optional[str]: ...


class DefaultLocaleProvider(Protocol):
    """Reports the request-scoped default locale."""

    def default_locale(self) -> Optional[str]: ...


class StaticLocaleResolver:
    """LocaleResolver returning a fixed locale (None for "unresolvable")."""

    def __init__(self, locale: Optional[str] = None):
        self.locale = locale

    def current_locale(self) -> Optional[str]:
        return self.locale


class HeaderLocaleResolver:
    """Resolves the active locale from an HTTP Accept-Language header.

    Returns the first supported locale in quality order, matching exactly
    first and then by language only (``de`` matches ``de-AT``). Returns None
    when nothing matches, leaving the fallback chain to the default locale.
    """

    def __init__(self, accept_language: Optional[str], supported_locales: Sequence[str]):
        self.accept_language = accept_language
        self.supported_locales = list(supported_locales)
        self.log = logger.bind(supported_locales=self.supported_locales)

    def preferences(self) -> List[str]:
        """Parse the header into language ranges, highest quality first.

        "en-US,en;q=0.9,fr;q=0.8" -> ["en-US", "en", "fr"]
        """
        if not self.accept_language:
            return []

        ranked = []
        for part in self.accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range or lang_range == "*":
                continue
            quality = 1.0
            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0
            # q=0 marks the range as not acceptable
            if quality <= 0:
                continue
            ranked.append((lang_range, quality))

        # sorted() is stable: equal qualities keep header order
        return [lang for lang, _ in sorted(ranked, key=lambda x: x[1], reverse=True)]

    def current_locale(self) -> Optional[str]:
        locale = LanguageNegotiator.find_best_match(
            self.preferences(), self.supported_locales
        )
        if locale is None:
            self.log.info("no_matching_locale_in_header", header=self.accept_language)
        else:
            self.log.debug("resolved_from_header", locale=locale)
        return locale


class StaticDefaultLocaleProvider:
    """DefaultLocaleProvider returning a fixed locale."""

    def __init__(self, locale: Optional[str]):
        self.locale = locale

    def default_locale(self) -> Optional[str]:
        return self.locale


class SettingsDefaultLocaleProvider:
    """DefaultLocaleProvider reading ``settings.locale.DEFAULT_LOCALE`` on each call."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def default_locale(self) -> Optional[str]:
        return self._settings.locale.DEFAULT_LOCALE or None


class LanguageNegotiator:
    """Language range matching (RFC 4647 style) between requested and available tags."""

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        requested_lang = requested.split("-")[0].lower()
        available_lang = available.split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language tags.
            default: Returned if no match found.

        Returns:
            Best matching language from available, or default if no match.
        """
        for req_lang in requested:
            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=True):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=False):
                    return avail_lang

        return default
