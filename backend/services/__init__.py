"""
Services layer for business logic.

This package contains service modules that encapsulate business logic
separate from the API routes.
"""

from .language_service import LanguageSelectionService

__all__ = [
    "LanguageSelectionService",
]
