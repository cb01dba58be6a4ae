"""Domain services."""

from .base import Service
from .invite_service import InviteService
from .jwt_service import JWTService
from .meeting_service import MeetingService
from .notification_service import NotificationService
from .person_service import PersonService
from .scheduling_service import SchedulingService

__all__ = [
    "InviteService",
    "JWTService",
    "MeetingService",
    "NotificationService",
    "PersonService",
    "SchedulingService",
    "Service",
]
