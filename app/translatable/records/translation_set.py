"""In-memory collection of one base record's translation records."""

from typing import Iterator, List, Optional

from translatable.logging import get_module_logger
from translatable.persistence import Record, RecordStore
from translatable.records.errors import LocaleRequiredError
from translatable.records.models import TranslatableModel

logger = get_module_logger()


class TranslationSet:
    """Ordered translation records of one base record, at most one per locale.

    Loading is explicit: call ``ensure_loaded()`` before reading from the set.
    Records are only ever added through ``get_or_create``; inserting a
    second record for a locale already present is a precondition violation
    this class does not guard against (``find`` returns the first match).

    Not safe for concurrent use from several threads.
    """

    def __init__(self, model: TranslatableModel, base: Record, store: RecordStore):
        self.model = model
        self.base = base
        self.store = store
        self._records: List[Record] = []
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> "TranslationSet":
        """Load the base record's translations once.

        An unpersisted base record has nothing to load; the set starts empty
        and stays authoritative after the base record is saved.
        """
        if self._loaded:
            return self
        if self.base.exists and self.base.key is not None:
            loaded = self.store.load_related(
                self.model.translation_table,
                self.model.relation_key,
                self.base.key,
            )
            self._records = loaded + self._records
            logger.debug(
                "translations_loaded",
                table=self.model.translation_table,
                key=self.base.key,
                count=len(loaded),
            )
        self._loaded = True
        return self

    def invalidate(self) -> None:
        """Forget loaded records, unsaved ones included; the next ensure_loaded() reloads."""
        self._records = []
        self._loaded = False

    def find(self, locale: Optional[str]) -> Optional[Record]:
        for record in self._records:
            if record.get(self.model.locale_key) == locale:
                return record
        return None

    def get_or_create(self, locale: Optional[str]) -> Record:
        """Return the record for ``locale``, creating a transient one if missing.

        Raises:
            LocaleRequiredError: If ``locale`` is empty.
        """
        existing = self.find(locale)
        if existing is not None:
            return existing
        return self.create(locale)

    def create(self, locale: Optional[str]) -> Record:
        """Append a new transient record stamped with ``locale``.

        The caller must ensure no record for ``locale`` exists yet.

        Raises:
            LocaleRequiredError: If ``locale`` is empty.
        """
        if not locale:
            raise LocaleRequiredError(
                f"Cannot create a {self.model.name} translation without a locale"
            )
        record = Record(
            self.model.translation_table,
            {self.model.locale_key: locale},
        )
        self._records.append(record)
        return record

    def all_dirty(self) -> List[Record]:
        """Records with unsaved changes to anything but the locale column."""
        return [record for record in self._records if self.dirty_fields(record)]

    def dirty_fields(self, record: Record) -> List[str]:
        dirty = self.store.get_dirty(record)
        return sorted(name for name in dirty if name != self.model.locale_key)

    def locales(self) -> List[Optional[str]]:
        return [record.get(self.model.locale_key) for record in self._records]

    def __contains__(self, locale: object) -> bool:
        return any(record.get(self.model.locale_key) == locale for record in self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
