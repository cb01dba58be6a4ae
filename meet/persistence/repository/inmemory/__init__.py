"""In-memory repository implementations for testing."""

from .invite import InMemoryInviteRepository
from .meeting import InMemoryMeetingRepository
from .notification import InMemoryNotificationRepository
from .person import InMemoryPersonRepository
from .store import InMemoryDatabase
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryDatabase",
    "InMemoryInviteRepository",
    "InMemoryMeetingRepository",
    "InMemoryNotificationRepository",
    "InMemoryPersonRepository",
    "InMemoryUnitOfWork",
]
