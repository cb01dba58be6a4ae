"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from meet.domain.model.common import DomainModel
from meet.domain.value import NotificationId, NotificationStatus, PersonId
from meet.util.clock import utcnow


class Notification(DomainModel):
    """Feed entry telling a person that one of their invites or meetings changed."""

    id: NotificationId
    person_id: PersonId
    title: str
    content: str
    path: Optional[str] = None  # Client route to open, e.g. /connections
    status: NotificationStatus = NotificationStatus.UNREAD
    created_at: datetime = Field(default_factory=utcnow)
