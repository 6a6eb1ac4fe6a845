"""Errors raised or reported by translatable records.

Programming errors raise TranslatableError subclasses. Storage failures are
never raised: save() returns an OperationResult whose ``data`` is a
PersistenceFailure describing what could not be written.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from translatable.operations import OperationResult

BASE_PERSIST_FAILED = "BASE_PERSIST_FAILED"
TRANSLATION_PERSIST_FAILED = "TRANSLATION_PERSIST_FAILED"
SAVE_CANCELLED = "SAVE_CANCELLED"


class TranslatableError(Exception):
    """Base class for translatable record programming errors."""


class InvalidModelConfigError(TranslatableError):
    """A TranslatableModel declaration is inconsistent."""


class UnknownTranslatedFieldError(TranslatableError):
    """A translation query named a field that is not translated."""

    def __init__(self, model: str, field: str):
        self.model = model
        self.field = field
        super().__init__(f"{field!r} is not a translated attribute of {model!r}")


class LocaleRequiredError(TranslatableError):
    """A translated attribute was written while no locale resolved."""


@dataclass
class PersistenceFailure:
    """Which record a failed save could not write, and why.

    Attributes:
        table: Table of the record that failed.
        locale: Locale of the failed translation, None for the base record.
        fields: Dirty fields that were being written.
        result: The store's failed OperationResult.
    """

    table: str
    result: OperationResult
    locale: Optional[str] = None
    fields: List[str] = field(default_factory=list)
