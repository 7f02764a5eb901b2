"""Unit tests for settings validation and application configuration."""

import pytest
from pydantic import ValidationError

from models.config import Settings, get_settings, settings


class TestSupportedLanguages:
    """Tests for the SUPPORTED_LANGUAGES setting."""

    def test_loaded_from_environment(self):
        """The test environment configures en,fr."""
        assert settings.supported_languages_list == ["en", "fr"]

    def test_parsed_in_order(self):
        """The first tag is the default."""
        config = Settings(SUPPORTED_LANGUAGES="fr-CA, en-CA")

        assert config.supported_languages_list == ["fr-CA", "en-CA"]

    def test_missing_rejected(self, monkeypatch):
        """There is no silent default when the list is missing."""
        monkeypatch.delenv("SUPPORTED_LANGUAGES", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("raw", ["", " ", ",,"])
    def test_blank_rejected(self, raw):
        """A blank list is a configuration error."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(SUPPORTED_LANGUAGES=raw)

        assert "supported language" in str(exc_info.value)


class TestLanguageParamName:
    """Tests for the LANGUAGE_PARAM_NAME setting."""

    def test_default(self, monkeypatch):
        """The query parameter and cookie default to 'lang'."""
        monkeypatch.delenv("LANGUAGE_PARAM_NAME", raising=False)

        assert Settings().LANGUAGE_PARAM_NAME == "lang"

    def test_stripped(self):
        """Surrounding whitespace is removed."""
        assert Settings(LANGUAGE_PARAM_NAME=" locale ").LANGUAGE_PARAM_NAME == "locale"

    def test_blank_rejected(self):
        """A blank name is rejected."""
        with pytest.raises(ValidationError):
            Settings(LANGUAGE_PARAM_NAME="  ")


class TestRedirectStatus:
    """Tests for the LANGUAGE_REDIRECT_STATUS setting."""

    @pytest.mark.parametrize("code", [301, 302, 303, 307, 308])
    def test_redirect_codes_accepted(self, code):
        """Any redirect status is accepted."""
        assert Settings(LANGUAGE_REDIRECT_STATUS=code).LANGUAGE_REDIRECT_STATUS == code

    @pytest.mark.parametrize("code", [200, 404, 300])
    def test_other_codes_rejected(self, code):
        """Non-redirect codes are rejected."""
        with pytest.raises(ValidationError):
            Settings(LANGUAGE_REDIRECT_STATUS=code)


class TestCorsOrigins:
    """Tests for the CORS_ORIGINS setting."""

    def test_comma_separated_string(self):
        """A comma-separated string is split into origins."""
        config = Settings(CORS_ORIGINS="https://a.example, https://b.example")

        assert config.CORS_ORIGINS == ["https://a.example", "https://b.example"]


def test_get_settings_returns_singleton():
    """Dependency injection returns the module settings."""
    assert get_settings() is settings


def test_api_title():
    """The application is named after its purpose."""
    from main import app

    assert app.title == "Language Selector API"
