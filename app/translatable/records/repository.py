"""Repository service for translatable records.

Provides a class-based entry point that wires a model, a store, a locale
context and lifecycle events together, for easier dependency injection and
testing with mocks.
"""

from typing import TYPE_CHECKING, Any, List, Optional

from translatable.events import DispatcherLifecycleEmitter, LifecycleEmitter
from translatable.i18n import LocaleContext, create_locale_context
from translatable.logging import get_module_logger
from translatable.operations import OperationResult
from translatable.persistence import QueryBuilder, Record, RecordStore
from translatable.records.models import TranslatableModel
from translatable.records.record import TranslatableRecord
from translatable.records.scope import QueryScope

if TYPE_CHECKING:
    from translatable.configuration import Settings

logger = get_module_logger()


class TranslatableRepository:
    """Loads, queries and saves TranslatableRecords of one model.

    This is a thin facade: records do their own resolution and saving, the
    repository only hands them their collaborators.

    Usage:
        repository = TranslatableRepository(product, store)

        record = repository.new(sku="A-1", title="Hello")
        result = repository.save(record)

        found = repository.get(result.data)
        german = repository.where_translation("title", "Hallo", locale="de")
    """

    def __init__(
        self,
        model: TranslatableModel,
        store: RecordStore,
        context: Optional[LocaleContext] = None,
        emitter: Optional[LifecycleEmitter] = None,
        settings: Optional["Settings"] = None,
    ):
        """Initialize the repository.

        Args:
            model: Declaration of the entity.
            store: Storage collaborator.
            context: Locale context handed to records (default: built from settings).
            emitter: Lifecycle emitter (default: dispatches ``"{model}.{event}"``).
            settings: Settings instance (default: the singleton).
        """
        self.model = model
        self.store = store
        self.context = context if context is not None else create_locale_context(settings=settings)
        self.emitter = emitter if emitter is not None else DispatcherLifecycleEmitter(model.name)
        self.scope = QueryScope(model)
        self._use_transactions = (
            settings.persistence.use_transactions if settings is not None else None
        )
        logger.debug("initialized_translatable_repository", model=model.name)

    def wrap(self, base: Record) -> TranslatableRecord:
        return TranslatableRecord(
            self.model,
            self.store,
            base=base,
            context=self.context,
            emitter=self.emitter,
            use_transactions=self._use_transactions,
        )

    def new(self, **attributes: Any) -> TranslatableRecord:
        """Create an unsaved record and fill it.

        Translated attributes are written in the repository's active locale.

        Raises:
            LocaleRequiredError: If a translated attribute is given and no locale resolves.
        """
        record = self.wrap(Record(self.model.table, primary_key=self.model.primary_key))
        return record.fill(attributes)

    def get(self, key: Any) -> Optional[TranslatableRecord]:
        base = self.store.find(self.model.table, self.model.primary_key, key)
        if base is None:
            logger.debug("translatable_record_not_found", model=self.model.name, key=key)
            return None
        return self.wrap(base)

    def query(self) -> QueryBuilder:
        return self.store.query(self.model.table, self.model.primary_key)

    def where_translation(
        self,
        field: str,
        value: Any,
        locale: Optional[str] = None,
        query: Optional[QueryBuilder] = None,
    ) -> List[TranslatableRecord]:
        """Records having a translation where ``field == value``.

        Args:
            field: Translated attribute to match.
            value: Value to match.
            locale: Restrict the match to translations in this locale.
            query: Base query to narrow (default: every record).

        Raises:
            UnknownTranslatedFieldError: If ``field`` is not translated.
        """
        query = query if query is not None else self.query()
        return self.all(self.scope.filter_by_translation(query, field, value, locale))

    def all(self, query: QueryBuilder) -> List[TranslatableRecord]:
        return [self.wrap(base) for base in query.all()]

    def save(self, record: TranslatableRecord) -> OperationResult:
        result = record.save()
        if not result.is_success:
            logger.warning(
                "translatable_record_save_failed",
                model=self.model.name,
                error_code=result.error_code,
                error=result.message,
            )
        return result
