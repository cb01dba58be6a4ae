"""PostgreSQL repository implementations."""

from meet.persistence.repository.invite import PostgresInviteRepository
from meet.persistence.repository.meeting import PostgresMeetingRepository
from meet.persistence.repository.notification import PostgresNotificationRepository
from meet.persistence.repository.person import PostgresPersonRepository

__all__ = [
    "PostgresInviteRepository",
    "PostgresMeetingRepository",
    "PostgresNotificationRepository",
    "PostgresPersonRepository",
]
