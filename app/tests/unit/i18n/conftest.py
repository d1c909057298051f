"""Feature-level fixtures for i18n system tests.

Provides locale files written to temporary directories and sources that
point at them.
"""

import pytest

from phrasebook.i18n import Dictionary, Translator
from tests.factories.i18n import (
    make_locale_document,
    make_locale_source,
    write_locale_file,
)


@pytest.fixture
def locale_dir(tmp_path):
    """Create a temporary directory with two layered locale files.

    - a-base.locale.json: wildcard, en-GB and en-US (parent en-GB)
    - b-override.locale.json: en-US override of _imperial_gallons
    """
    write_locale_file(
        tmp_path / "a-base.locale.json",
        make_locale_document(
            wildcard={"phrases": {"_metre": "metre", "_litre": "litre"}},
            en_GB={"phrases": {"_imperial_gallons": "Gallons", "_pint": "pint"}},
            en_US={
                "parent": "en-GB",
                "phrases": {"_imperial_gallons": "imperial gallons", "_metre": "meter"},
            },
        ),
    )
    write_locale_file(
        tmp_path / "b-override.locale.json",
        make_locale_document(
            en_US={"phrases": {"_imperial_gallons": "Wonderful Gallons"}},
        ),
    )
    return tmp_path


@pytest.fixture
def locale_sources(locale_dir):
    """Single source matching every locale file in locale_dir."""
    return [make_locale_source("*.locale.json", root_dir=locale_dir)]


@pytest.fixture
def base_label(locale_dir):
    """Build the source label for a locale block of a-base.locale.json."""
    return lambda key: f"{locale_dir / 'a-base.locale.json'}:{key}".replace("\\", "/")


@pytest.fixture
def override_label(locale_dir):
    """Build the source label for a locale block of b-override.locale.json."""
    return lambda key: f"{locale_dir / 'b-override.locale.json'}:{key}".replace(
        "\\", "/"
    )


@pytest.fixture
def dictionary(locale_sources):
    """Dictionary for en-US loaded from locale_dir."""
    return Dictionary("en-US", locale_sources)


@pytest.fixture
def translator(locale_sources):
    """Translator over locale_dir with no dictionaries created yet."""
    return Translator(locale_sources)
