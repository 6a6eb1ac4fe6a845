"""Persistence layer consumed by translatable records.

Defines the storage collaborator contracts (RecordStore, QueryBuilder,
RelatedPredicate), the Record value they exchange, and two stores:
an in-memory store for tests and prototyping, and a SQLAlchemy Core store.
"""

from translatable.persistence.base import QueryBuilder, RecordStore, RelatedPredicate
from translatable.persistence.memory import MemoryQuery, MemoryRecordStore
from translatable.persistence.records import Record
from translatable.persistence.sql import SQLAlchemyQuery, SQLAlchemyRecordStore

__all__ = [
    "Record",
    "RecordStore",
    "QueryBuilder",
    "RelatedPredicate",
    "MemoryRecordStore",
    "MemoryQuery",
    "SQLAlchemyRecordStore",
    "SQLAlchemyQuery",
]
