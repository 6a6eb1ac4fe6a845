"""Locale context passed explicitly to translatable record operations."""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator, Optional

from translatable.i18n.resolvers import DefaultLocaleProvider, LocaleResolver


@dataclass
class LocaleContext:
    """Locale state for one logical request.

    Active locale: the explicit ``locale`` when set, otherwise whatever the
    ``resolver`` reports. Default locale: the ``default_provider`` when one
    is configured, otherwise the ``resolver`` again. Both are evaluated on
    every call, so changing ``locale`` mid-flow takes effect immediately.

    Attributes:
        locale: Explicit active locale for reads and writes.
        resolver: Source of the active locale when none is set explicitly.
        default_provider: Request-scoped source of the default locale.
    """

    locale: Optional[str] = None
    resolver: Optional[LocaleResolver] = None
    default_provider: Optional[DefaultLocaleProvider] = None

    def active_locale(self, requested: Optional[str] = None) -> Optional[str]:
        """Resolve the locale for an operation.

        Args:
            requested: Locale asked for by the caller; empty means "resolve".

        Returns:
            Locale code, or None when nothing resolves.
        """
        if requested:
            return requested
        if self.locale:
            return self.locale
        if self.resolver is not None:
            return self.resolver.current_locale() or None
        return None

    def default_locale(self) -> Optional[str]:
        if self.default_provider is not None:
            return self.default_provider.default_locale() or None
        if self.resolver is not None:
            return self.resolver.current_locale() or None
        return None

    @contextmanager
    def use_locale(self, locale: Optional[str]) -> Generator["LocaleContext", None, None]:
        """Temporarily switch the explicit active locale."""
        previous = self.locale
        self.locale = locale
        try:
            yield self
        finally:
            self.locale = previous
