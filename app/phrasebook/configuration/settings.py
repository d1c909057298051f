"""Phrasebook configuration settings - main aggregator."""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from phrasebook.configuration.i18n import I18nSettings

PRODUCTION = "production"
DEVELOPMENT = "development"


class Settings(BaseSettings):
    """Phrasebook configuration settings.

    Environment Variables:
        APP_ENV: Runtime environment. Anything other than "production" is
            treated as "development".
        LOG_LEVEL: Log level name or number (silent, error, warn, info, debug,
            trace or 0-5). Defaults to warn in production, info otherwise.

    Example:
        ```python
        from phrasebook.configuration import settings

        if settings.is_production:
            ...
        patterns = settings.i18n.LOCALE_PATTERNS
        ```
    """

    ENVIRONMENT: str = Field(default=DEVELOPMENT, alias="APP_ENV")
    LOG_LEVEL: Optional[str] = Field(default=None, alias="LOG_LEVEL")

    i18n: I18nSettings

    @field_validator("ENVIRONMENT", mode="before")
    @classmethod
    def normalize_environment(cls, v: Any) -> str:
        """Collapse the environment name to production or development."""
        if isinstance(v, str) and v.strip().lower() == PRODUCTION:
            return PRODUCTION
        return DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production.

        Returns:
            True if APP_ENV is "production", False otherwise.
        """
        return self.ENVIRONMENT == PRODUCTION

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


# Create the singleton settings instance
settings = Settings()
