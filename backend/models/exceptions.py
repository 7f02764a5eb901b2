"""
Custom domain exceptions for the application.

These exceptions are raised by the helpers and service layer and converted to
HTTP exceptions by centralized exception handlers in main.py. The language
resolution core stays HTTP-agnostic, so the same exceptions surface from the
command line script.

"No match" is never an exception: it is an ordinary outcome of resolution.

Enhanced with correlation IDs for Sentry integration and user error reporting.
"""

from core.correlation import generate_correlation_id, get_correlation_id


class DomainException(Exception):
    """
    Base class for all domain exceptions.

    Attributes:
        message: Human-readable error message.
        correlation_id: Unique ID for error tracking (auto-generated if not provided).
    """

    def __init__(self, message: str, correlation_id: str | None = None):
        self.message = message
        # Use request correlation ID if available, otherwise generate new one
        self.correlation_id = (
            correlation_id or get_correlation_id() or generate_correlation_id()
        )
        super().__init__(self.message)


class ValidationException(DomainException):
    """Raised when client input validation fails."""

    pass


class ConfigurationException(DomainException):
    """Raised when the service is misconfigured."""

    pass


class MissingSupportedLanguagesException(ConfigurationException):
    """Raised when no supported language is configured."""

    def __init__(
        self,
        message: str = "At least one supported language must be configured",
        correlation_id: str | None = None,
    ):
        super().__init__(message, correlation_id)
