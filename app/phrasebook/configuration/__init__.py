"""Configuration module - public API.

Centralized configuration for phrasebook using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale file settings class

Example:
    ```python
    from phrasebook.configuration import settings

    if settings.is_production:
        ...
    ```
"""

from phrasebook.configuration.i18n import I18nSettings
from phrasebook.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
