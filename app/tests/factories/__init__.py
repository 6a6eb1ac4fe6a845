"""Test data factories for deterministic test data generation."""

from tests.factories.records import (
    make_model,
    make_record,
    make_saved_record,
    make_translatable,
)

__all__ = [
    "make_model",
    "make_record",
    "make_saved_record",
    "make_translatable",
]
