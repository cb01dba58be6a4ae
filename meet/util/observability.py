"""Logfire setup for the scheduling service.

Services log through ``logfire`` directly: a span per domain operation and
``logfire.warn`` for refused transitions (authorization, conflicts, missing
venue details). This module only wires the exporter and the FastAPI and
SQLAlchemy integrations.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from meet.config import Settings

SERVICE_NAME = "meet-backend"
SERVICE_VERSION = "0.1.0"

# Polled by load balancers; tracing it only adds noise
_UNTRACED_URLS = "/health"


def send_to_logfire(settings: Settings) -> bool:
    """Decide whether spans leave the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise spans are sent
    whenever a token is configured.
    """
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created.

    Args:
        settings: Application settings
    """
    sending = send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=sending,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
            min_log_level="debug" if settings.debug else "info",
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=sending,
    )


def _request_attributes(request, attributes):
    """Attach the route template so spans group by endpoint, not by ID."""
    result = {**attributes}
    route = request.scope.get("route")
    if route is not None:
        result["route"] = getattr(route, "path", None)
    if request.client:
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks.

    Headers are not captured: they carry bearer tokens and the auth cookie.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=_UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, including the conditional status updates."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
