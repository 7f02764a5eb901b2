#!/usr/bin/env python
"""
Script to resolve a client language from the command line.

Positional arguments: the supported languages and, optionally, the shared
query parameter / cookie name.

Can be run via:
- Manual: python scripts/resolve_language.py en,fr --header "en-US,fr"
- Shell: LANG_DIR=$(python scripts/resolve_language.py en,fr --cookie "$C")

Options:
    --query VALUE: Query parameter value (Accept-Language syntax)
    --cookie VALUE: Cookie value (Accept-Language syntax)
    --header VALUE: Accept-Language header value
    --verbose: Log which source decided the language

Exit codes: 0 on success, 2 on configuration errors.
"""

import argparse
import sys
from pathlib import Path

# Add the backend directory to the path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from loguru import logger

from core.correlation import correlation_scope
from helpers.language import parse_supported_languages, strip_header_name
from models.exceptions import ConfigurationException
from services.language_service import LanguageSelectionService

EXIT_CONFIGURATION_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Resolve the preferred client language"
    )
    parser.add_argument(
        "supported",
        help="Comma-separated supported languages, first is the default (e.g. en,fr)",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default="lang",
        help="Query parameter and cookie name (default: lang)",
    )
    parser.add_argument("--query", default=None, help="Query parameter value")
    parser.add_argument("--cookie", default=None, help="Cookie value")
    parser.add_argument("--header", default=None, help="Accept-Language header value")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log which source decided the language",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Resolve and print the language."""
    args = build_parser().parse_args(argv)

    with correlation_scope():
        try:
            supported = parse_supported_languages(args.supported)
            resolution = LanguageSelectionService.resolve_details(
                supported,
                query=args.query,
                cookie=args.cookie,
                header=strip_header_name(args.header),
            )
        except ConfigurationException as e:
            logger.error(
                f"Language resolution failed: {e.message} "
                f"(correlation_id={e.correlation_id})"
            )
            return EXIT_CONFIGURATION_ERROR

    if args.verbose:
        logger.info(
            f"Resolved {resolution.language!r} from {resolution.source.value} "
            f"(name={args.name!r}, supported={supported})"
        )

    print(resolution.language)
    return 0


if __name__ == "__main__":
    sys.exit(main())
