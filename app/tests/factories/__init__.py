"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_context_rule,
    make_dictionary,
    make_document,
    make_plural_rows,
)

__all__ = [
    "make_context_rule",
    "make_dictionary",
    "make_document",
    "make_plural_rows",
]
