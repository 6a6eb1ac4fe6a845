"""Translatable records.

Main components:
- models: TranslatableModel declarations and the per-model accessor table
- resolver: TranslationResolver (active locale, then default locale, then base)
- translation_set: TranslationSet, the per-record collection of translations
- record: TranslatableRecord, the façade over a base record and its translations
- scope: QueryScope, filtering base-record queries by translated values
- repository: TranslatableRepository service
- tables: SQLAlchemy table definitions for a model
"""

from translatable.records.errors import (
    BASE_PERSIST_FAILED,
    SAVE_CANCELLED,
    TRANSLATION_PERSIST_FAILED,
    InvalidModelConfigError,
    LocaleRequiredError,
    PersistenceFailure,
    TranslatableError,
    UnknownTranslatedFieldError,
)
from translatable.records.models import FieldAccess, TranslatableModel
from translatable.records.record import TranslatableRecord
from translatable.records.repository import TranslatableRepository
from translatable.records.resolver import TranslationResolver
from translatable.records.scope import QueryScope
from translatable.records.tables import define_translatable_tables
from translatable.records.translation_set import TranslationSet

__all__ = [
    "TranslatableModel",
    "FieldAccess",
    "TranslationResolver",
    "TranslationSet",
    "TranslatableRecord",
    "QueryScope",
    "TranslatableRepository",
    "define_translatable_tables",
    "PersistenceFailure",
    "TranslatableError",
    "InvalidModelConfigError",
    "UnknownTranslatedFieldError",
    "LocaleRequiredError",
    "BASE_PERSIST_FAILED",
    "TRANSLATION_PERSIST_FAILED",
    "SAVE_CANCELLED",
]
