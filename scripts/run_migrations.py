#!/usr/bin/env python3
"""Apply the schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py base       # or any other revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from meet.config import Settings
from meet.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision."""
    revision = argv[1] if len(argv) > 1 else "head"
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start on a half-migrated schema
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
