"""
Language selection service.

Resolves the client's language from up to three preference sources, in
priority order: query parameter, cookie, Accept-Language header. The first
supported language is the default.
"""

from collections.abc import Sequence
from enum import Enum

from loguru import logger

from helpers.language import match_preferences
from models.exceptions import MissingSupportedLanguagesException
from models.schemas import LanguageResolution, ResolutionSource


class ResolutionState(Enum):
    """States of the source resolution state machine."""

    TRY_QUERY = "try_query"
    TRY_COOKIE = "try_cookie"
    TRY_HEADER = "try_header"
    DEFAULT = "default"


# Source consulted in each state, and the state to move to when it is absent
_SOURCE_STATES: dict[ResolutionState, tuple[ResolutionSource, ResolutionState]] = {
    ResolutionState.TRY_QUERY: (ResolutionSource.QUERY, ResolutionState.TRY_COOKIE),
    ResolutionState.TRY_COOKIE: (ResolutionSource.COOKIE, ResolutionState.TRY_HEADER),
    ResolutionState.TRY_HEADER: (ResolutionSource.HEADER, ResolutionState.DEFAULT),
}


class LanguageSelectionService:
    """Service for resolving the client's preferred language."""

    @staticmethod
    def resolve(
        supported: Sequence[str],
        query: str | None = None,
        cookie: str | None = None,
        header: str | None = None,
    ) -> str:
        """
        Resolve the client's language.

        Args:
            supported: Supported language tags; the first one is the default
            query: Query parameter value, None if absent
            cookie: Cookie value, None if absent
            header: Accept-Language header value, None if absent

        Returns:
            A tag from supported

        Raises:
            MissingSupportedLanguagesException: If supported is empty
        """
        return LanguageSelectionService.resolve_details(
            supported, query=query, cookie=cookie, header=header
        ).language

    @staticmethod
    def resolve_details(
        supported: Sequence[str],
        query: str | None = None,
        cookie: str | None = None,
        header: str | None = None,
    ) -> LanguageResolution:
        """
        Resolve the client's language and report which source decided it.

        Only the first present source is evaluated. A present source that
        matches nothing does not fall through to the next one: resolution
        goes straight to the default language.

        Raises:
            MissingSupportedLanguagesException: If supported is empty
        """
        if not supported:
            raise MissingSupportedLanguagesException()

        supported = list(supported)
        raw_sources = {
            ResolutionSource.QUERY: query,
            ResolutionSource.COOKIE: cookie,
            ResolutionSource.HEADER: header,
        }

        reason = "no preferences"
        state = ResolutionState.TRY_QUERY
        while state is not ResolutionState.DEFAULT:
            source, next_state = _SOURCE_STATES[state]
            raw = raw_sources[source]

            # Absent source: move on to the next one
            if raw is None:
                state = next_state
                continue

            # Present source: it decides alone. No match -> DEFAULT,
            # the remaining sources are never consulted.
            language = match_preferences(raw, supported)
            if language is not None:
                logger.debug(f"Resolved language {language!r} from {source.value}")
                return LanguageResolution(
                    language=language, source=source, supported=supported
                )

            reason = f"no supported language in {source.value} preferences {raw!r}"
            break

        logger.debug(f"Resolved default language {supported[0]!r}: {reason}")
        return LanguageResolution(
            language=supported[0],
            source=ResolutionSource.DEFAULT,
            supported=supported,
        )
