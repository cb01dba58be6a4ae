"""Standard library logging for uvicorn and third-party libraries.

Application events go through logfire; this only keeps library output on
stdout at a sensible level.
"""

import logging
import sys

from meet.config import Settings

# Libraries that are chatty at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from the debug flag.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # SQL echo is controlled by the engine's echo flag instead
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
