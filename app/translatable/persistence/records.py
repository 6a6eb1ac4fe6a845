"""Record value exchanged with record stores."""

from typing import Any, Dict, Optional, Tuple


class Record:
    """A row of a table plus the bookkeeping a store needs to persist it.

    ``original`` is the attribute snapshot taken when the record was loaded
    or last persisted; attributes that differ from it are dirty. Reading an
    attribute that was never set yields None.

    Attributes:
        table: Table the record belongs to.
        primary_key: Name of the primary key attribute.
        attributes: Current attribute values.
        original: Attribute values as last seen by the store.
        exists: Whether the record has been inserted.
    """

    def __init__(
        self,
        table: str,
        attributes: Optional[Dict[str, Any]] = None,
        primary_key: str = "id",
        exists: bool = False,
    ):
        self.table = table
        self.primary_key = primary_key
        self.attributes: Dict[str, Any] = dict(attributes or {})
        self.original: Dict[str, Any] = dict(self.attributes) if exists else {}
        self.exists = exists

    @property
    def key(self) -> Any:
        return self.attributes.get(self.primary_key)

    def get(self, name: str) -> Any:
        return self.attributes.get(name)

    def set(self, name: str, value: Any) -> None:
        self.attributes[name] = value

    def get_dirty(self) -> Dict[str, Any]:
        """Return attributes changed since load or last persist."""
        return {
            name: value
            for name, value in self.attributes.items()
            if name not in self.original or self.original[name] != value
        }

    def is_dirty(self) -> bool:
        return bool(self.get_dirty())

    def mark_persisted(self, key: Any = None) -> None:
        """Record a successful insert or update.

        Args:
            key: Primary key assigned by the store on insert.
        """
        if key is not None:
            self.attributes[self.primary_key] = key
        self.exists = True
        self.original = dict(self.attributes)

    def snapshot(self) -> Tuple[bool, Dict[str, Any], Dict[str, Any]]:
        """Capture in-memory state so a rolled back save can restore it."""
        return self.exists, dict(self.attributes), dict(self.original)

    def restore(self, state: Tuple[bool, Dict[str, Any], Dict[str, Any]]) -> None:
        self.exists, attributes, original = state
        self.attributes = dict(attributes)
        self.original = dict(original)

    def __repr__(self) -> str:
        return f"Record(table={self.table!r}, key={self.key!r}, exists={self.exists})"
