#!/usr/bin/env python3
"""Serve the API with uvicorn."""

import sys

import logfire
import uvicorn

from meet.config import Settings
from meet.interface.api.app import check_settings
from meet.util.logging import setup_logging
from meet.util.observability import configure_logfire


def main() -> int:
    """Validate settings, wire logging, then hand over to uvicorn."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        # Fail here, with a logged reason, rather than in every worker
        check_settings(settings)

        logfire.info(
            "Starting API",
            port=settings.port,
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "meet.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
