"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_locale_document,
    make_locale_source,
    write_locale_file,
)

__all__ = [
    "make_locale_document",
    "make_locale_source",
    "write_locale_file",
]
