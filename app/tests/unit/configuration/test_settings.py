"""Unit tests for phrasebook configuration settings."""

import pytest

from phrasebook.configuration import I18nSettings, Settings, settings


@pytest.mark.unit
class TestSettings:
    """Test Settings configuration."""

    def test_singleton(self):
        """The module exposes a Settings singleton."""
        assert isinstance(settings, Settings)
        assert isinstance(settings.i18n, I18nSettings)

    def test_development_by_default(self, monkeypatch):
        """Without APP_ENV the environment is development."""
        monkeypatch.delenv("APP_ENV", raising=False)
        config = Settings()
        assert config.ENVIRONMENT == "development"
        assert config.is_production is False

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("production", "production"),
            ("Production ", "production"),
            ("staging", "development"),
            ("", "development"),
        ],
    )
    def test_environment_normalised(self, monkeypatch, value, expected):
        """APP_ENV collapses to production or development."""
        monkeypatch.setenv("APP_ENV", value)
        assert Settings().ENVIRONMENT == expected

    def test_log_level(self, monkeypatch):
        """LOG_LEVEL is read from the environment."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings().LOG_LEVEL == "debug"

    def test_explicit_i18n_section(self):
        """A given i18n section is used as-is."""
        i18n = I18nSettings(LOG_LOOKUPS=True)
        assert Settings(i18n=i18n).i18n is i18n


@pytest.mark.unit
class TestI18nSettings:
    """Test I18nSettings configuration."""

    def test_default_values(self, monkeypatch):
        """Test I18nSettings with default values."""
        for name in ("LOCALE_PATTERNS", "LOCALE_ROOT_DIR", "LOG_LOOKUPS"):
            monkeypatch.delenv(name, raising=False)
        config = I18nSettings()

        assert config.LOCALE_PATTERNS == ["locales/**/*.locale.json"]
        assert config.LOCALE_ROOT_DIR is None
        assert config.LOG_LOOKUPS is False

    def test_from_environment(self, monkeypatch):
        """Patterns are read as a JSON list."""
        monkeypatch.setenv("LOCALE_PATTERNS", '["a/*.json", "b/*.yml"]')
        monkeypatch.setenv("LOCALE_ROOT_DIR", "/opt/locales")
        monkeypatch.setenv("LOG_LOOKUPS", "true")

        config = I18nSettings()

        assert config.LOCALE_PATTERNS == ["a/*.json", "b/*.yml"]
        assert config.LOCALE_ROOT_DIR == "/opt/locales"
        assert config.LOG_LOOKUPS is True
