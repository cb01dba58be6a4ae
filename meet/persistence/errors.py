"""Translation of database driver failures into domain errors."""

import functools
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import ParamSpec, TypeVar

import logfire
from sqlalchemy import Select
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from meet.domain.error import ConflictError, TransientError

P = ParamSpec("P")
R = TypeVar("R")

# SQLSTATEs that mean "retry the whole transaction"
RETRYABLE_SQLSTATES = frozenset({"40001", "40P01"})


def sqlstate_of(error: DBAPIError) -> str | None:
    """Extract the SQLSTATE from a wrapped driver error, if it has one."""
    orig = error.orig
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return str(code)
    return None


def is_transient(error: DBAPIError) -> bool:
    """Check whether a driver error is a connectivity or serialization failure."""
    if isinstance(error, IntegrityError):
        return False
    if error.connection_invalidated:
        return True
    if isinstance(error, (OperationalError, InterfaceError)):
        return True
    return sqlstate_of(error) in RETRYABLE_SQLSTATES


def translate_db_errors(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Repository method decorator mapping transient driver errors.

    IntegrityError passes through untouched; services turn it into a
    conflict. Connectivity and serialization failures become TransientError.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except DBAPIError as e:
            if not is_transient(e):
                raise
            logfire.warn(
                "Transient database error",
                operation=func.__qualname__,
                sqlstate=sqlstate_of(e),
                error=str(e),
            )
            raise TransientError("Storage temporarily unavailable") from e

    return wrapper


async def read_latest_status(session: AsyncSession, stmt: Select) -> str | None:
    """Run a single-value read on its own connection.

    The request transaction keeps its snapshot, so it cannot see a commit it
    just collided with. A new connection starts a new transaction that can.
    """
    async with session.bind.connect() as connection:
        result = await connection.execute(stmt)
        return result.scalar()


@asynccontextmanager
async def guarded_write(
    session: AsyncSession,
    resource: str,
    resource_id: str,
    status_stmt: Select,
    expected_status: str,
) -> AsyncIterator[None]:
    """Savepoint around an UPDATE whose WHERE clause requires a status.

    At READ COMMITTED the loser of a race matches zero rows. At SERIALIZABLE
    it fails with a serialization error instead. The savepoint is rolled back
    and the row is read again on a fresh connection: if it left
    ``expected_status`` the write raises ConflictError with the status it
    holds now, otherwise the failure stays transient.

    Raises:
        ConflictError: If a concurrent commit moved the row
    """
    try:
        async with session.begin_nested():
            yield
    except DBAPIError as e:
        if sqlstate_of(e) not in RETRYABLE_SQLSTATES:
            raise
        current = await read_latest_status(session, status_stmt)
        if current is None or current == expected_status:
            raise
        logfire.warn(
            "Concurrent write moved row",
            resource=resource,
            resource_id=resource_id,
            status=current,
        )
        raise ConflictError(
            f"{resource.lower()} not {expected_status}",
            resource=resource,
            resource_id=resource_id,
            current_state=current,
        ) from e
