"""Unit tests for localization settings."""

import pytest
from pydantic import ValidationError

from i18n_resolver.configuration import LocalizationSettings, Settings


@pytest.mark.unit
class TestLocalizationSettings:
    """Test LocalizationSettings configuration."""

    def test_default_values(self, monkeypatch):
        """Test LocalizationSettings with default values."""
        for name in ("ROOT_PATH", "DEFAULT_LANGUAGE", "SUPPORTED_LANGUAGES", "FORMAT"):
            monkeypatch.delenv(f"I18N_{name}", raising=False)

        settings = LocalizationSettings()

        assert settings.ROOT_PATH == "./locales"
        assert settings.DEFAULT_LANGUAGE == "en"
        assert settings.SUPPORTED_LANGUAGES == ["en", "de", "fr"]
        assert settings.FORMAT == "yaml"
        assert settings.QUERY_PARAMETER == "lng"

    def test_comma_separated_languages(self, monkeypatch):
        """Test supported languages from a comma-separated variable."""
        monkeypatch.setenv("I18N_SUPPORTED_LANGUAGES", "en, fr ,pt-BR")

        settings = LocalizationSettings()

        assert settings.SUPPORTED_LANGUAGES == ["en", "fr", "pt-BR"]

    def test_json_languages(self, monkeypatch):
        """Test supported languages from a JSON list."""
        monkeypatch.setenv("I18N_SUPPORTED_LANGUAGES", '["en", "ja"]')

        settings = LocalizationSettings()

        assert settings.SUPPORTED_LANGUAGES == ["en", "ja"]

    def test_environment_overrides(self, monkeypatch):
        """Test the I18N_ prefix maps onto fields."""
        monkeypatch.setenv("I18N_ROOT_PATH", "/srv/locales")
        monkeypatch.setenv("I18N_DEFAULT_LANGUAGE", "fr")
        monkeypatch.setenv("I18N_FORMAT", ".JSON")

        settings = LocalizationSettings()

        assert settings.ROOT_PATH == "/srv/locales"
        assert settings.DEFAULT_LANGUAGE == "fr"
        assert settings.FORMAT == "json"

    def test_empty_default_language_rejected(self):
        """Test an empty default language fails validation."""
        with pytest.raises(ValidationError):
            LocalizationSettings(DEFAULT_LANGUAGE="  ")


@pytest.mark.unit
class TestSettings:
    """Test the settings aggregator."""

    def test_includes_localization_section(self):
        """Test Settings instantiates the i18n section."""
        settings = Settings()

        assert isinstance(settings.i18n, LocalizationSettings)

    def test_section_override(self):
        """Test a section can be passed explicitly."""
        section = LocalizationSettings(DEFAULT_LANGUAGE="fr")

        settings = Settings(i18n=section)

        assert settings.i18n.DEFAULT_LANGUAGE == "fr"

    def test_is_production(self, monkeypatch):
        """Test production detection from PREFIX."""
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False
