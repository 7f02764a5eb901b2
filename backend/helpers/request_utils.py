"""
Request utilities for extracting client language preferences.

The query parameter and the cookie share one name (``lang`` by default) and,
like the Accept-Language header, carry preferences in Accept-Language
syntax.
"""

from typing import Optional

from fastapi import Request

from helpers.language import ACCEPT_LANGUAGE_HEADER, strip_header_name
from models.schemas import LanguageSources


def get_query_preference(request: Request, name: str) -> Optional[str]:
    """
    Extract the language preference from the query string.

    An empty value (``?lang=``) is returned as an empty string: the source
    is present even though it holds no preference.

    Args:
        request: FastAPI request object
        name: Query parameter name

    Returns:
        Raw preference string or None if the parameter is absent
    """
    return request.query_params.get(name)


def get_cookie_preference(request: Request, name: str) -> Optional[str]:
    """
    Extract the language preference from the cookie.

    Args:
        request: FastAPI request object
        name: Cookie name

    Returns:
        Raw preference string or None if the cookie is absent
    """
    return request.cookies.get(name)


def get_header_preference(request: Request) -> Optional[str]:
    """
    Extract the Accept-Language header value.

    A leading "Accept-Language:" prefix, as sent by some proxies that forward
    the raw header line, is stripped.

    Args:
        request: FastAPI request object

    Returns:
        Header value or None if the header is absent
    """
    return strip_header_name(request.headers.get(ACCEPT_LANGUAGE_HEADER))


def get_language_sources(request: Request, name: str = "lang") -> LanguageSources:
    """
    Collect every language preference source from a request.

    Args:
        request: FastAPI request object
        name: Shared name of the query parameter and the cookie

    Returns:
        LanguageSources with query, cookie and header values
    """
    return LanguageSources(
        query=get_query_preference(request, name),
        cookie=get_cookie_preference(request, name),
        header=get_header_preference(request),
    )
