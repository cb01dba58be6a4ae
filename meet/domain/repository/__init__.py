"""Repository interfaces for the connection engine.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from meet.domain.repository.invite import InviteRepository
from meet.domain.repository.meeting import MeetingRepository
from meet.domain.repository.notification import NotificationRepository
from meet.domain.repository.person import PersonRepository
from meet.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "PersonRepository",
    "InviteRepository",
    "MeetingRepository",
    "NotificationRepository",
    "UnitOfWork",
]
