from enum import Enum

from pydantic import BaseModel, Field


# Language Resolution Schemas
class ResolutionSource(str, Enum):
    """Where the resolved language came from."""

    QUERY = "query"
    COOKIE = "cookie"
    HEADER = "header"
    DEFAULT = "default"  # first supported language


class LanguageSources(BaseModel):
    """Raw client preferences, each in Accept-Language syntax.

    None means the source is absent. An empty string is a present source.
    """

    query: str | None = None
    cookie: str | None = None
    header: str | None = None


class LanguageResolutionRequest(LanguageSources):
    """Explicit resolution request for services that do their own lookup."""

    supported: list[str] = Field(
        ...,
        description="Supported language tags; the first one is the default",
        examples=[["en", "fr"]],
    )


class LanguageResolution(BaseModel):
    language: str
    source: ResolutionSource
    supported: list[str]
