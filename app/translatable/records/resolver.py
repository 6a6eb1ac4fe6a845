"""Translation resolution: which record a translated read comes from."""

from typing import Optional

from translatable.i18n import LocaleContext
from translatable.persistence import Record
from translatable.records.translation_set import TranslationSet


class TranslationResolver:
    """Picks the record to read translated attributes from.

    Order, evaluated on every call: the requested locale's translation, then
    the default locale's translation, then the base record itself.
    """

    @staticmethod
    def resolve(
        translations: TranslationSet,
        base: Record,
        requested_locale: Optional[str],
        default_locale: Optional[str],
    ) -> Record:
        if requested_locale:
            translation = translations.find(requested_locale)
            if translation is not None:
                return translation

        if default_locale:
            translation = translations.find(default_locale)
            if translation is not None:
                return translation

        return base

    @classmethod
    def resolve_in_context(
        cls,
        translations: TranslationSet,
        base: Record,
        context: LocaleContext,
        locale: Optional[str] = None,
    ) -> Record:
        """Resolve with locales taken from ``context``.

        An empty ``locale`` is replaced by the context's active locale.
        """
        return cls.resolve(
            translations,
            base,
            context.active_locale(locale),
            context.default_locale(),
        )
