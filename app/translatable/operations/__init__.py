"""Operation result types and status enums.

Standardized result types returned by storage and save operations, with an
error classifier for storage-layer exceptions.
"""

from translatable.operations.classifiers import classify_persistence_error
from translatable.operations.result import OperationResult
from translatable.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_persistence_error",
]
