"""
Sentry SDK configuration.

Implements:
- Environment-based initialization (disabled without SENTRY_DSN)
- Request scrubbing: cookies and credentials never leave the service
- Sampling that skips health checks and the high-volume redirect
- Loguru integration
"""

import os
from typing import Any

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.loguru import LoguruIntegration
from sentry_sdk.types import Event, Hint

_HEALTH_PATHS = ("/health", "/api/health")

_FILTERED_HEADERS = frozenset({"authorization", "cookie"})


def _before_send(event: Event, hint: Hint) -> Event | None:
    """
    Scrub request data before sending to Sentry.

    The language cookie may sit next to session cookies, so cookies are
    dropped entirely and credential headers are filtered.

    Args:
        event: Sentry event.
        hint: Additional context about the event.

    Returns:
        Modified event.
    """
    request = event.get("request")
    if request and isinstance(request, dict):
        request.pop("cookies", None)
        headers = request.get("headers")
        if isinstance(headers, dict):
            # Header names are matched case-insensitively (ASGI lowercases them)
            for name in headers:
                if name.lower() in _FILTERED_HEADERS:
                    headers[name] = "[Filtered]"

    return event


def _before_send_transaction(event: Event, hint: Hint) -> Event | None:
    """Drop health check transactions."""
    transaction_name = event.get("transaction", "")
    # Endpoint-style names ("main.health_check") or path-style names
    if transaction_name.endswith("health_check") or any(
        transaction_name.endswith(path) for path in _HEALTH_PATHS
    ):
        return None
    return event


def _traces_sampler(sampling_context: dict[str, Any]) -> float:
    """
    Sample rate per request path.

    Args:
        sampling_context: Context about the request being sampled.

    Returns:
        Sample rate between 0.0 and 1.0.
    """
    # If parent was sampled, continue the trace
    if sampling_context.get("parent_sampled") is True:
        return 1.0

    asgi_scope = sampling_context.get("asgi_scope", {})
    path = asgi_scope.get("path", "")

    if path in _HEALTH_PATHS:
        return 0.0

    # Root redirect is hit on every visit and carries little signal
    if path == "/":
        return 0.01

    return 0.2


def init_sentry() -> None:
    """
    Initialize Sentry SDK with FastAPI integration.

    Call this BEFORE creating the FastAPI app instance.
    Sentry is disabled if SENTRY_DSN environment variable is not set.
    """
    dsn = os.getenv("SENTRY_DSN")

    if not dsn:
        # Sentry disabled if no DSN
        return

    sentry_sdk.init(
        dsn=dsn,
        environment=os.getenv("ENVIRONMENT", "development"),
        release=os.getenv("SENTRY_RELEASE", "unknown"),
        send_default_pii=False,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            LoguruIntegration(),
        ],
        traces_sampler=_traces_sampler,
        sample_rate=1.0,
        before_send=_before_send,
        before_send_transaction=_before_send_transaction,
        attach_stacktrace=True,
        max_breadcrumbs=50,
        ignore_errors=[
            KeyboardInterrupt,
            SystemExit,
        ],
    )
