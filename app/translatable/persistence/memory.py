"""In-memory record store.

Keeps rows in plain dicts keyed by table and primary key. Integer keys are
assigned on insert when the record carries none.
"""

from typing import Any, Dict, List, Optional, Tuple

from translatable.logging import get_module_logger
from translatable.operations import OperationResult, OperationStatus
from translatable.persistence.base import RelatedPredicate
from translatable.persistence.records import Record

logger = get_module_logger()


class MemoryRecordStore:
    """RecordStore holding rows in memory, in insertion order."""

    def __init__(self):
        self.tables: Dict[str, Dict[Any, Dict[str, Any]]] = {}
        self._sequences: Dict[str, int] = {}

    def rows(self, table: str) -> Dict[Any, Dict[str, Any]]:
        return self.tables.setdefault(table, {})

    def find(self, table: str, primary_key: str, key: Any) -> Optional[Record]:
        row = self.rows(table).get(key)
        if row is None:
            return None
        return Record(table, row, primary_key=primary_key, exists=True)

    def load_related(
        self, table: str, foreign_key: str, key: Any, primary_key: str = "id"
    ) -> List[Record]:
        return [
            Record(table, row, primary_key=primary_key, exists=True)
            for row in self.rows(table).values()
            if row.get(foreign_key) == key
        ]

    def persist(self, record: Record) -> OperationResult:
        rows = self.rows(record.table)

        if not record.exists:
            key = record.key
            if key is None:
                key = self._next_key(record.table)
            elif key in rows:
                logger.warning("duplicate_primary_key", table=record.table, key=key)
                return OperationResult.permanent_error(
                    f"Duplicate key {key!r} in {record.table}",
                    error_code="INTEGRITY_ERROR",
                )
            row = dict(record.attributes)
            row[record.primary_key] = key
            rows[key] = row
            record.mark_persisted(key)
            return OperationResult.success(data=key, message="inserted")

        if record.key not in rows:
            return OperationResult.error(
                OperationStatus.NOT_FOUND,
                f"No row {record.key!r} in {record.table}",
                error_code="NOT_FOUND",
            )
        rows[record.key].update(record.get_dirty())
        record.mark_persisted()
        return OperationResult.success(data=record.key, message="updated")

    def get_dirty(self, record: Record) -> Dict[str, Any]:
        return record.get_dirty()

    def query(self, table: str, primary_key: str = "id") -> "MemoryQuery":
        return MemoryQuery(self, table, primary_key)

    def _next_key(self, table: str) -> int:
        existing = [key for key in self.rows(table) if isinstance(key, int)]
        key = max([self._sequences.get(table, 0), *existing]) + 1
        self._sequences[table] = key
        return key


class MemoryQuery:
    """QueryBuilder evaluated against a MemoryRecordStore."""

    def __init__(
        self,
        store: MemoryRecordStore,
        table: str,
        primary_key: str = "id",
        conditions: Tuple[Tuple[str, Any], ...] = (),
        related: Tuple[RelatedPredicate, ...] = (),
    ):
        self.store = store
        self.table = table
        self.primary_key = primary_key
        self.conditions = conditions
        self.related = related

    def where(self, field: str, value: Any) -> "MemoryQuery":
        return MemoryQuery(
            self.store,
            self.table,
            self.primary_key,
            self.conditions + ((field, value),),
            self.related,
        )

    def where_exists(self, predicate: RelatedPredicate) -> "MemoryQuery":
        return MemoryQuery(
            self.store,
            self.table,
            self.primary_key,
            self.conditions,
            self.related + (predicate,),
        )

    def all(self) -> List[Record]:
        return [
            Record(self.table, row, primary_key=self.primary_key, exists=True)
            for row in self.store.rows(self.table).values()
            if self._matches(row)
        ]

    def _matches(self, row: Dict[str, Any]) -> bool:
        if not all(row.get(field) == value for field, value in self.conditions):
            return False
        for predicate in self.related:
            related_rows = self.store.rows(predicate.table).values()
            if not any(predicate.matches(row, related) for related in related_rows):
                return False
        return True
