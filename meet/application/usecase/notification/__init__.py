"""Notification feed use cases."""

from meet.application.usecase.notification.list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from meet.application.usecase.notification.mark_notifications_read import (
    MarkNotificationsReadRequest,
    MarkNotificationsReadResponse,
    MarkNotificationsReadUseCase,
)

__all__ = [
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkNotificationsReadRequest",
    "MarkNotificationsReadResponse",
    "MarkNotificationsReadUseCase",
    "NotificationItem",
]
