"""Storage collaborator contracts.

A RecordStore loads, persists and queries Records. Stores report persist
failures as OperationResult errors and never raise for them. A store may
also offer a ``transaction()`` context manager yielding an object with a
``rollback()`` method; TranslatableRecord.save() uses it when present.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple

from translatable.operations import OperationResult
from translatable.persistence.records import Record


@dataclass(frozen=True)
class RelatedPredicate:
    """Exists-predicate over a related table.

    Matches when some row of ``table`` references the owner row (its
    ``foreign_key`` equals the owner's ``owner_key``) and satisfies every
    condition.

    Immutable: ``where`` returns a new predicate.
    """

    table: str
    foreign_key: str
    owner_key: str
    conditions: Tuple[Tuple[str, Any], ...] = ()

    def where(self, field: str, value: Any) -> "RelatedPredicate":
        return replace(self, conditions=self.conditions + ((field, value),))

    def matches(self, owner: Mapping[str, Any], related: Mapping[str, Any]) -> bool:
        if related.get(self.foreign_key) != owner.get(self.owner_key):
            return False
        return all(related.get(field) == value for field, value in self.conditions)


class QueryBuilder(Protocol):
    """Immutable query over one table; every builder call returns a new query."""

    def where(self, field: str, value: Any) -> "QueryBuilder": ...

    def where_exists(self, predicate: RelatedPredicate) -> "QueryBuilder": ...

    def all(self) -> List[Record]: ...


class RecordStore(Protocol):
    """Storage operations consumed by translatable records."""

    def find(self, table: str, primary_key: str, key: Any) -> Optional[Record]: ...

    def load_related(
        self, table: str, foreign_key: str, key: Any, primary_key: str = "id"
    ) -> List[Record]: ...

    def persist(self, record: Record) -> OperationResult: ...

    def get_dirty(self, record: Record) -> Dict[str, Any]: ...

    def query(self, table: str, primary_key: str = "id") -> QueryBuilder: ...
