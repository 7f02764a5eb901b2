"""
Language preference parsing and matching.

Client preferences use the Accept-Language header syntax, e.g.
"en-US,en;q=0.8,fr-FR;q=0.5,fr;q=0.3". The same syntax is accepted from the
query parameter and the cookie, so every source goes through the same
parse -> rank -> match pipeline.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from models.exceptions import MissingSupportedLanguagesException

ACCEPT_LANGUAGE_HEADER = "Accept-Language"

WILDCARD = "*"

# One comma-separated segment: a tag, optionally followed by a q-value.
# q-values are 1, 1.0, 0 or 0.xxx (any number of ASCII decimals)
_SEGMENT_PATTERN = re.compile(
    r"(?P<tag>[-*\w]+)(?:\s*;\s*q\s*=\s*(?P<weight>1(?:\.0*)?|0(?:\.\d*)?))?",
    re.ASCII,
)


@dataclass(frozen=True)
class PreferenceEntry:
    """A single client preference: a language tag and its weight."""

    tag: str
    weight: float = 1.0


def parse_accept_language(raw: str | None) -> list[PreferenceEntry]:
    """
    Parse a client preferences string into (tag, weight) entries.

    Handles formats like:
    - "fr" -> [fr (1.0)]
    - "fr-CA,fr;q=0.9,en;q=0.8" -> [fr-CA (1.0), fr (0.9), en (0.8)]
    - "*;q=0.5, de" -> [de (1.0)]

    Malformed segments are skipped, never fatal. The wildcard and entries
    with a weight of 0 are dropped. Entries are returned in encounter order,
    not priority order (see rank_preferences).

    Args:
        raw: Preferences string, or None

    Returns:
        List of PreferenceEntry, possibly empty
    """
    if not raw:
        return []

    entries: list[PreferenceEntry] = []
    for segment in raw.split(","):
        segment = segment.strip()
        if not segment:
            continue

        match = _SEGMENT_PATTERN.fullmatch(segment)
        if match is None:
            continue

        tag = match.group("tag")
        if tag == WILDCARD:
            continue

        weight_text = match.group("weight")
        weight = float(weight_text) if weight_text else 1.0
        if weight <= 0:
            continue

        entries.append(PreferenceEntry(tag=tag, weight=weight))

    return entries


def rank_preferences(entries: Iterable[PreferenceEntry]) -> list[PreferenceEntry]:
    """Order entries by descending weight. Ties keep encounter order."""
    return sorted(entries, key=lambda entry: entry.weight, reverse=True)


def match_supported_language(
    ranked: Sequence[PreferenceEntry], supported: Sequence[str]
) -> str | None:
    """
    Find the supported language matching the ranked client preferences.

    Two passes over the ranked entries:
    1. Exact match: "fr" with "fr"
    2. Loose match, one tag contained in the other: "en-US" with "en",
       "fr" with "fr-FR"

    The loose pass only runs when no entry has an exact match, so an exact
    match on a low-weight entry beats a loose match on a high-weight one.
    Within a pass, client priority wins over supported list order.

    Args:
        ranked: Entries sorted by rank_preferences
        supported: Supported language tags

    Returns:
        A tag from supported, or None if nothing matches
    """
    for entry in ranked:
        for language in supported:
            if entry.tag == language:
                return language

    for entry in ranked:
        for language in supported:
            if entry.tag in language or language in entry.tag:
                return language

    return None


def match_preferences(raw: str | None, supported: Sequence[str]) -> str | None:
    """Parse, rank and match a single preferences string."""
    ranked = rank_preferences(parse_accept_language(raw))
    return match_supported_language(ranked, supported)


def parse_supported_languages(raw: str | None) -> list[str]:
    """
    Parse a comma-separated list of supported language tags.

    Whitespace is stripped, empty items and duplicates are dropped. The first
    tag is the default language.

    Raises:
        MissingSupportedLanguagesException: If no tag is left
    """
    languages: list[str] = []
    for item in (raw or "").split(","):
        tag = item.strip()
        if tag and tag not in languages:
            languages.append(tag)

    if not languages:
        raise MissingSupportedLanguagesException()

    return languages


def strip_header_name(value: str | None) -> str | None:
    """Remove a leading "Accept-Language:" prefix from a raw header value."""
    if value is None:
        return None

    prefix = f"{ACCEPT_LANGUAGE_HEADER}:"
    if value[: len(prefix)].lower() == prefix.lower():
        value = value[len(prefix) :]

    return value.strip()
