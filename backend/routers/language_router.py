"""Language selection endpoints."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from models.config import Settings, get_settings
from models.exceptions import ValidationException
from models.schemas import (
    LanguageResolution,
    LanguageResolutionRequest,
    ResolutionSource,
)
from services.language_service import LanguageSelectionService

router = APIRouter(prefix="/language", tags=["language"])

# Mounted at the application root, outside the /api prefix
redirect_router = APIRouter(tags=["language"])


@router.get("", response_model=LanguageResolution)
def get_request_language(
    request: Request, config: Settings = Depends(get_settings)
) -> LanguageResolution:
    """Get the language resolved for the current request.

    Preferences are read from the query parameter, the cookie and the
    Accept-Language header, in that order.
    """
    return LanguageResolution(
        language=request.state.language,
        source=ResolutionSource(request.state.language_source),
        supported=config.supported_languages_list,
    )


@router.post("/resolve", response_model=LanguageResolution)
def resolve_language(payload: LanguageResolutionRequest) -> LanguageResolution:
    """Resolve a language from explicitly supplied preference sources.

    For services that read the query parameter, cookie and header
    themselves. Omitted sources are treated as absent.
    """
    supported = [tag.strip() for tag in payload.supported if tag.strip()]
    if not supported:
        raise ValidationException("At least one supported language is required")

    return LanguageSelectionService.resolve_details(
        list(dict.fromkeys(supported)),
        query=payload.query,
        cookie=payload.cookie,
        header=payload.header,
    )


@redirect_router.get("/", include_in_schema=False)
def redirect_to_language(
    request: Request, config: Settings = Depends(get_settings)
) -> RedirectResponse:
    """Redirect to the language-prefixed root, e.g. /fr/."""
    return RedirectResponse(
        url=f"/{request.state.language}/",
        status_code=config.LANGUAGE_REDIRECT_STATUS,
    )
