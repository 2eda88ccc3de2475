"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Comment created", comment_id=comment.id, post_id=comment.post_id)

    # Manual spans around service operations
    with logfire.span("comment_service.create_comment", post_id=post_id):
        ...
"""

import logfire
from fastapi import FastAPI

from feed.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Logs go to the console only, unless a token is configured
    (OBSERVABILITY__LOGFIRE_TOKEN) or OBSERVABILITY__SEND_TO_LOGFIRE is set.

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "feed-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Traces every request with its duration, status and errors.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, capture_headers=True)
    logfire.info("FastAPI instrumented")


def instrument_httpx() -> None:
    """Instrument httpx so FeedApiClient requests are traced."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
