"""Phrase translation settings."""

from typing import List, Optional

from pydantic import Field

from phrasebook.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Locale file discovery and lookup logging configuration.

    Environment Variables:
        LOCALE_PATTERNS: JSON list of glob patterns for locale files, loaded in
            order (default: ["locales/**/*.locale.json"])
        LOCALE_ROOT_DIR: Directory the patterns are resolved against
            (default: current working directory)
        LOG_LOOKUPS: Start usage logging on translators built by the factory
            (default: False)

    Example:
        ```python
        from phrasebook.configuration import settings

        patterns = settings.i18n.LOCALE_PATTERNS
        ```
    """

    LOCALE_PATTERNS: List[str] = Field(
        default_factory=lambda: ["locales/**/*.locale.json"],
        description="Glob patterns for locale definition files, in load order",
    )
    LOCALE_ROOT_DIR: Optional[str] = Field(
        default=None,
        description="Base directory for LOCALE_PATTERNS",
    )
    LOG_LOOKUPS: bool = Field(
        default=False,
        description="Record phrase lookups on newly created translators",
    )
