"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from meet.config import AuthSettings, Settings
from meet.interface.api.routes import health, invites, meetings, notifications, people
from meet.util.di.container import create_container, setup_di
from meet.util.error import ConfigurationError
from meet.util.observability import instrument_fastapi


def check_settings(settings: Settings) -> None:
    """Refuse to start outside development with the placeholder JWT secret.

    Raises:
        ConfigurationError: If the settings are unsafe for the environment
    """
    if (
        settings.environment in ("staging", "production")
        and settings.auth.jwt_secret == AuthSettings().jwt_secret
    ):
        raise ConfigurationError(
            "AUTH__JWT_SECRET must be set outside development and test"
        )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container by default
    """
    settings = Settings()
    check_settings(settings)

    app_instance = FastAPI(
        title="Meet API",
        description="One-on-one invites and meetings between community members",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type", "Retry-After"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(meetings.router)
    app_instance.include_router(people.router)
    app_instance.include_router(notifications.router)

    return app_instance
