import os
import sys
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from helpers.language import parse_supported_languages
from models.exceptions import MissingSupportedLanguagesException

_REDIRECT_STATUS_CODES = (301, 302, 303, 307, 308)


def _should_load_env_file() -> str | None:
    """Determine if .env should be loaded.

    For local development, load `.env` automatically so `SUPPORTED_LANGUAGES`
    can be provided from `backend/.env` (convenience). It remains required
    and must be set in production via environment variables.

    Do NOT auto-load `.env` when running under pytest or in CI (so tests
    that validate missing configuration continue to fail fast).
    """
    if any("pytest" in str(x) for x in sys.argv if x):
        return None
    if os.environ.get("CI") in ("1", "true", "True"):
        return None
    return ".env"


class Settings(BaseSettings):
    # Environment configuration
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: 'development', 'staging', 'production' or 'test'",
    )

    # Language selection
    SUPPORTED_LANGUAGES: str = Field(
        ...,  # Required, no default
        description="Comma-separated supported language tags; the first one is the default",
    )
    LANGUAGE_PARAM_NAME: str = Field(
        default="lang",
        description="Name of both the query parameter and the cookie holding the client preference",
    )
    LANGUAGE_REDIRECT_STATUS: int = Field(
        default=302,
        description="Status code of the root redirect to the language-prefixed path",
    )

    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins (comma-separated in env var)",
    )

    # Performance settings
    SLOW_REQUEST_THRESHOLD: float = Field(
        default=1.0,
        description="Log warning for requests slower than this (seconds)",
    )

    @property
    def supported_languages_list(self) -> list[str]:
        """Supported language tags in priority order."""
        return parse_supported_languages(self.SUPPORTED_LANGUAGES)

    @field_validator("SUPPORTED_LANGUAGES")
    @classmethod
    def validate_supported_languages(cls, v: str) -> str:
        """Reject a blank list instead of silently defaulting to a language."""
        try:
            parse_supported_languages(v)
        except MissingSupportedLanguagesException as e:
            raise ValueError(e.message) from e
        return v

    @field_validator("LANGUAGE_PARAM_NAME")
    @classmethod
    def validate_param_name(cls, v: str) -> str:
        """Parameter name must not be blank."""
        v = v.strip()
        if not v:
            raise ValueError("LANGUAGE_PARAM_NAME must not be blank")
        return v

    @field_validator("LANGUAGE_REDIRECT_STATUS")
    @classmethod
    def validate_redirect_status(cls, v: int) -> int:
        """Only redirect status codes are accepted."""
        if v not in _REDIRECT_STATUS_CODES:
            raise ValueError(
                f"LANGUAGE_REDIRECT_STATUS must be one of {_REDIRECT_STATUS_CODES}"
            )
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | List[str]) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    model_config = SettingsConfigDict(
        env_file=_should_load_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",  # Allow extra env vars (e.g., SENTRY_DSN) without validation errors
    )


# Rely on pydantic BaseSettings to load `.env` and validate required fields.
# Instantiating Settings() will raise pydantic.ValidationError if SUPPORTED_LANGUAGES isn't set.
settings = Settings()  # type: ignore[call-arg]


def get_settings() -> Settings:
    """Get the settings instance (for dependency injection)."""
    return settings
