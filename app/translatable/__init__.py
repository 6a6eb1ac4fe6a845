"""Translatable records - multi-locale records that read and write like single-locale ones.

Main components:
- records: TranslatableModel, TranslationSet, TranslationResolver,
  TranslatableRecord, QueryScope, TranslatableRepository
- persistence: Record, RecordStore protocol, in-memory and SQLAlchemy stores
- i18n: LocaleContext, locale resolvers and default locale providers
- events: lifecycle event dispatcher
- operations: OperationResult and OperationStatus
"""

__version__ = "0.1.0"
