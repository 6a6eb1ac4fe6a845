"""SQLAlchemy Core record store.

Each store operation runs in its own ``engine.begin()`` block unless a
``transaction()`` is active, in which case every operation shares the
transaction's connection.

Usage:
    from sqlalchemy import MetaData, create_engine

    engine = create_engine(settings.persistence.database_url)
    metadata = MetaData()
    define_translatable_tables(metadata, product_model)
    metadata.create_all(engine)

    store = SQLAlchemyRecordStore(engine, metadata)
"""

from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional

from sqlalchemy import Engine, MetaData, Select, Table, insert, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from translatable.logging import get_module_logger
from translatable.operations import (
    OperationResult,
    OperationStatus,
    classify_persistence_error,
)
from translatable.persistence.base import RelatedPredicate
from translatable.persistence.records import Record

logger = get_module_logger()


class SQLAlchemyRecordStore:
    """RecordStore over tables registered in a SQLAlchemy MetaData."""

    def __init__(self, engine: Engine, metadata: MetaData):
        self.engine = engine
        self.metadata = metadata
        self._active: Optional[Connection] = None

    def table(self, name: str) -> Table:
        try:
            return self.metadata.tables[name]
        except KeyError:
            raise KeyError(f"Table {name!r} is not registered in metadata") from None

    @contextmanager
    def connect(self) -> Generator[Connection, None, None]:
        """Yield the active transaction's connection, or a fresh autocommitting one."""
        if self._active is not None:
            yield self._active
            return
        with self.engine.begin() as connection:
            yield connection

    @contextmanager
    def transaction(self) -> Generator[Any, None, None]:
        """Run the enclosed store operations in one transaction.

        Yields the transaction; calling ``rollback()`` on it discards every
        write made inside the block. Commits on normal exit, rolls back on
        exception. Nested use opens a SAVEPOINT.
        """
        if self._active is not None:
            with self._active.begin_nested() as nested:
                yield nested
            return

        with self.engine.connect() as connection:
            trans = connection.begin()
            self._active = connection
            try:
                yield trans
                if trans.is_active:
                    trans.commit()
            except Exception:
                if trans.is_active:
                    trans.rollback()
                raise
            finally:
                self._active = None

    def find(self, table: str, primary_key: str, key: Any) -> Optional[Record]:
        t = self.table(table)
        with self.connect() as connection:
            row = (
                connection.execute(select(t).where(t.c[primary_key] == key))
                .mappings()
                .first()
            )
        if row is None:
            return None
        return Record(table, dict(row), primary_key=primary_key, exists=True)

    def load_related(
        self, table: str, foreign_key: str, key: Any, primary_key: str = "id"
    ) -> List[Record]:
        t = self.table(table)
        stmt = select(t).where(t.c[foreign_key] == key).order_by(t.c[primary_key])
        with self.connect() as connection:
            rows = connection.execute(stmt).mappings().all()
        return [Record(table, dict(row), primary_key=primary_key, exists=True) for row in rows]

    def persist(self, record: Record) -> OperationResult:
        t = self.table(record.table)
        try:
            if not record.exists:
                unknown = self._unknown_columns(t, record.attributes)
                if unknown:
                    return self._unknown_column_error(record, unknown)
                values = {
                    name: value
                    for name, value in record.attributes.items()
                    if not (name == record.primary_key and value is None)
                }
                with self.connect() as connection:
                    result = connection.execute(insert(t).values(**values))
                key = record.key
                if key is None:
                    key = result.inserted_primary_key[0]
                record.mark_persisted(key)
                return OperationResult.success(data=key, message="inserted")

            dirty = record.get_dirty()
            unknown = self._unknown_columns(t, dirty)
            if unknown:
                return self._unknown_column_error(record, unknown)
            if dirty:
                stmt = (
                    update(t)
                    .where(t.c[record.primary_key] == record.key)
                    .values(**dirty)
                )
                with self.connect() as connection:
                    result = connection.execute(stmt)
                if result.rowcount == 0:
                    return OperationResult.error(
                        OperationStatus.NOT_FOUND,
                        f"No row {record.key!r} in {record.table}",
                        error_code="NOT_FOUND",
                    )
            record.mark_persisted()
            return OperationResult.success(data=record.key, message="updated")
        except SQLAlchemyError as exc:
            logger.warning(
                "record_persist_failed",
                table=record.table,
                key=record.key,
                error=str(exc),
            )
            return classify_persistence_error(exc)

    @staticmethod
    def _unknown_columns(table: Table, attributes: Dict[str, Any]) -> List[str]:
        return sorted(name for name in attributes if name not in table.c)

    @staticmethod
    def _unknown_column_error(record: Record, unknown: List[str]) -> OperationResult:
        logger.warning(
            "record_has_unknown_columns",
            table=record.table,
            key=record.key,
            columns=unknown,
        )
        return OperationResult.permanent_error(
            f"{record.table} has no column(s): {', '.join(unknown)}",
            error_code="UNKNOWN_COLUMN",
        )

    def get_dirty(self, record: Record) -> Dict[str, Any]:
        return record.get_dirty()

    def query(self, table: str, primary_key: str = "id") -> "SQLAlchemyQuery":
        t = self.table(table)
        return SQLAlchemyQuery(self, t, primary_key, select(t))


class SQLAlchemyQuery:
    """QueryBuilder wrapping an immutable SQLAlchemy ``Select``.

    ``statement`` is exposed so callers can compose further or inspect the
    SQL without executing it.
    """

    def __init__(
        self,
        store: SQLAlchemyRecordStore,
        table: Table,
        primary_key: str,
        statement: Select,
    ):
        self.store = store
        self.table = table
        self.primary_key = primary_key
        self.statement = statement

    def _with(self, statement: Select) -> "SQLAlchemyQuery":
        return SQLAlchemyQuery(self.store, self.table, self.primary_key, statement)

    def where(self, field: str, value: Any) -> "SQLAlchemyQuery":
        return self._with(self.statement.where(self.table.c[field] == value))

    def where_exists(self, predicate: RelatedPredicate) -> "SQLAlchemyQuery":
        related = self.store.table(predicate.table)
        criteria = [
            related.c[predicate.foreign_key] == self.table.c[predicate.owner_key]
        ]
        criteria.extend(
            related.c[field] == value for field, value in predicate.conditions
        )
        subquery = select(related.c[predicate.foreign_key]).where(*criteria)
        return self._with(self.statement.where(subquery.exists()))

    def all(self) -> List[Record]:
        with self.store.connect() as connection:
            rows = connection.execute(self.statement).mappings().all()
        return [
            Record(self.table.name, dict(row), primary_key=self.primary_key, exists=True)
            for row in rows
        ]
