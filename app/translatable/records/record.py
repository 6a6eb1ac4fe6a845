"""TranslatableRecord: a base record plus its translations behaving as one record.

Reads of translated attributes resolve through the active and default
locales, writes go to the translation for the active locale at write time,
and save() persists the base record and then every dirty translation.

Usage:
    product = TranslatableModel(name="product", translated_attributes=("title",))
    record = TranslatableRecord(product, store, context=LocaleContext(locale="de"))

    record.set_field("sku", "A-1")        # base record
    record.set_field("title", "Hallo")    # "de" translation, created on demand
    result = record.save()
    if not result.is_success:
        failure = result.data             # PersistenceFailure
"""

from typing import Any, Dict, List, Optional, Tuple

from translatable.configuration import get_settings
from translatable.events import LifecycleEmitter
from translatable.i18n import LocaleContext
from translatable.logging import bind_locale_context, get_module_logger
from translatable.operations import OperationResult, OperationStatus
from translatable.persistence import Record, RecordStore
from translatable.records.errors import (
    BASE_PERSIST_FAILED,
    SAVE_CANCELLED,
    TRANSLATION_PERSIST_FAILED,
    PersistenceFailure,
)
from translatable.records.models import FieldAccess, TranslatableModel
from translatable.records.resolver import TranslationResolver
from translatable.records.translation_set import TranslationSet

logger = get_module_logger()


class TranslatableRecord:
    """Façade over a base Record and its TranslationSet.

    Attributes:
        model: Declaration of the entity.
        store: Storage collaborator.
        base: The wrapped base record.
        context: Locale context used when a call does not pass its own.
        emitter: Optional receiver of lifecycle notifications.
        use_transactions: Run save() inside ``store.transaction()`` when the
            store offers one.
    """

    def __init__(
        self,
        model: TranslatableModel,
        store: RecordStore,
        base: Optional[Record] = None,
        context: Optional[LocaleContext] = None,
        emitter: Optional[LifecycleEmitter] = None,
        use_transactions: Optional[bool] = None,
    ):
        self.model = model
        self.store = store
        self.base = base if base is not None else Record(model.table, primary_key=model.primary_key)
        self.context = context if context is not None else LocaleContext()
        self.emitter = emitter
        if use_transactions is None:
            use_transactions = get_settings().persistence.use_transactions
        self.use_transactions = use_transactions
        self._translations = TranslationSet(model, self.base, store)

    @property
    def key(self) -> Any:
        return self.base.key

    @property
    def exists(self) -> bool:
        return self.base.exists

    @property
    def relation_key(self) -> str:
        return self.model.relation_key

    @property
    def translations(self) -> TranslationSet:
        """The loaded translation set."""
        return self._translations.ensure_loaded()

    def _context(self, context: Optional[LocaleContext]) -> LocaleContext:
        return context if context is not None else self.context

    def translate(
        self, locale: Optional[str] = None, context: Optional[LocaleContext] = None
    ) -> Record:
        """Return the record translated reads come from.

        The ``locale`` translation (active locale when empty), else the default
        locale's translation, else the base record.
        """
        return TranslationResolver.resolve_in_context(
            self.translations, self.base, self._context(context), locale
        )

    def get_translation(self, locale: Optional[str]) -> Optional[Record]:
        return self.translations.find(locale)

    def get_translation_or_new(
        self, locale: Optional[str] = None, context: Optional[LocaleContext] = None
    ) -> Record:
        """Return the translation for ``locale`` (active locale when empty), creating it if missing.

        Raises:
            LocaleRequiredError: If no locale resolves.
        """
        locale = self._context(context).active_locale(locale)
        return self.translations.get_or_create(locale)

    def get_new_translation(self, locale: str) -> Record:
        """Append a new translation for ``locale``; it must not exist yet."""
        return self.translations.create(locale)

    def get_field(self, key: str, context: Optional[LocaleContext] = None) -> Any:
        if self.model.access_for(key) is FieldAccess.TRANSLATED:
            return self.translate(context=context).get(key)
        return self.base.get(key)

    def set_field(
        self, key: str, value: Any, context: Optional[LocaleContext] = None
    ) -> "TranslatableRecord":
        """Write ``key``; translated keys go to the active locale's translation.

        Raises:
            LocaleRequiredError: If ``key`` is translated and no locale resolves.
        """
        if self.model.access_for(key) is FieldAccess.TRANSLATED:
            self.get_translation_or_new(context=context).set(key, value)
        else:
            self.base.set(key, value)
        return self

    def fill(
        self, attributes: Dict[str, Any], context: Optional[LocaleContext] = None
    ) -> "TranslatableRecord":
        for key, value in attributes.items():
            self.set_field(key, value, context=context)
        return self

    def to_serialized(self, context: Optional[LocaleContext] = None) -> Dict[str, Any]:
        """Base attributes with every translated attribute resolved.

        Every translated attribute is present; None when nothing resolves.
        """
        data = dict(self.base.attributes)
        translation = self.translate(context=context)
        for key in self.model.translated_attributes:
            data[key] = translation.get(key)
        return data

    def save(self) -> OperationResult:
        """Persist the base record, then every dirty translation.

        Returns:
            Success with the base key as ``data``, or an error whose ``data``
            is a PersistenceFailure (or None when an observer cancelled).
        """
        with bind_locale_context(locale=self.context.active_locale(), model=self.model.name):
            transaction = getattr(self.store, "transaction", None)
            if not self.use_transactions or transaction is None:
                return self._save()

            state = self._snapshot()
            try:
                with transaction() as trans:
                    result = self._save()
                    if not result.is_success:
                        trans.rollback()
            except Exception:
                self._restore(state)
                raise

            if not result.is_success:
                self._restore(state)
                logger.info("save_rolled_back", key=self.base.key, error_code=result.error_code)
            return result

    def _save(self) -> OperationResult:
        self._translations.ensure_loaded()

        if self.base.exists:
            if not self.store.get_dirty(self.base):
                return self._save_translations_only()
            lifecycle = "updated"
        else:
            lifecycle = "created"

        if not self._fire("saving"):
            return self._cancelled()

        result = self.store.persist(self.base)
        if not result.is_success:
            return self._base_failure(result)

        self._fire(lifecycle)
        self._fire("saved")
        return self._save_translations()

    def _save_translations_only(self) -> OperationResult:
        if not self._fire("saving"):
            return self._cancelled()

        result = self._save_translations()
        if result.is_success:
            self._fire("saved")
            self._fire("updated")
        return result

    def _save_translations(self) -> OperationResult:
        saved = 0
        for translation in self._translations.all_dirty():
            fields = self._translations.dirty_fields(translation)
            translation.set(self.model.relation_key, self.base.key)
            result = self.store.persist(translation)
            if not result.is_success:
                return self._translation_failure(translation, fields, result)
            saved += 1

        logger.info("translatable_record_saved", key=self.base.key, translations_saved=saved)
        return OperationResult.success(data=self.base.key, message="saved")

    def _fire(self, name: str) -> bool:
        if self.emitter is None:
            return True
        return self.emitter.fire_event(name, self.base) is not False

    def _cancelled(self) -> OperationResult:
        logger.info("save_cancelled_by_observer", key=self.base.key)
        return OperationResult.error(
            OperationStatus.CANCELLED,
            f"Saving {self.model.name} was cancelled by an observer",
            error_code=SAVE_CANCELLED,
        )

    def _base_failure(self, result: OperationResult) -> OperationResult:
        failure = PersistenceFailure(
            table=self.base.table,
            result=result,
            fields=sorted(self.store.get_dirty(self.base)),
        )
        logger.warning(
            "base_persist_failed",
            table=failure.table,
            key=self.base.key,
            fields=failure.fields,
            error=result.message,
        )
        return OperationResult.error(
            result.status,
            f"Failed to persist {self.model.name}: {result.message}",
            error_code=BASE_PERSIST_FAILED,
            data=failure,
        )

    def _translation_failure(
        self, translation: Record, fields: List[str], result: OperationResult
    ) -> OperationResult:
        locale = translation.get(self.model.locale_key)
        failure = PersistenceFailure(
            table=translation.table,
            result=result,
            locale=locale,
            fields=fields,
        )
        logger.warning(
            "translation_persist_failed",
            table=failure.table,
            key=self.base.key,
            translation_locale=locale,
            fields=fields,
            error=result.message,
        )
        return OperationResult.error(
            result.status,
            f"Failed to persist {locale!r} translation of {self.model.name}: {result.message}",
            error_code=TRANSLATION_PERSIST_FAILED,
            data=failure,
        )

    def _snapshot(self) -> List[Tuple[Record, Any]]:
        records = [self.base, *self.translations]
        return [(record, record.snapshot()) for record in records]

    @staticmethod
    def _restore(state: List[Tuple[Record, Any]]) -> None:
        for record, snapshot in state:
            record.restore(snapshot)

    def __repr__(self) -> str:
        return f"TranslatableRecord(model={self.model.name!r}, key={self.key!r})"
