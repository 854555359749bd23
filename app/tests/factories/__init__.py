"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog_store,
    make_localizer,
    make_message_catalog,
    make_message_definition,
)

__all__ = [
    "make_catalog_store",
    "make_localizer",
    "make_message_catalog",
    "make_message_definition",
]
