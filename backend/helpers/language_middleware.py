"""
Language selection middleware for FastAPI.

Resolves the client's language once per request so routes can read it from
``request.state.language``.
"""

from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from helpers.request_utils import get_language_sources
from models.config import settings
from services.language_service import LanguageSelectionService


class LanguageSelectorMiddleware(BaseHTTPMiddleware):
    """
    Middleware that resolves the language of every request.

    Sets on the request state:
    - language: Resolved language tag
    - language_source: Source that decided it (query, cookie, header, default)

    Headers added:
    - Content-Language: Resolved language tag
    - Vary: Accept-Language, Cookie (the response depends on both)
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Resolve the language and tag the response with it."""
        sources = get_language_sources(request, settings.LANGUAGE_PARAM_NAME)
        resolution = LanguageSelectionService.resolve_details(
            settings.supported_languages_list,
            query=sources.query,
            cookie=sources.cookie,
            header=sources.header,
        )

        request.state.language = resolution.language
        request.state.language_source = resolution.source

        response = await call_next(request)

        response.headers["Content-Language"] = resolution.language

        vary = response.headers.get("Vary")
        response.headers["Vary"] = (
            f"{vary}, Accept-Language, Cookie" if vary else "Accept-Language, Cookie"
        )

        return response
