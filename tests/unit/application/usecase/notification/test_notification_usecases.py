"""Unit tests for the notification use cases."""

from uuid import uuid4

import pytest

from meet.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadUseCase,
)
from meet.domain.service import NotificationService
from meet.domain.value import NotificationStatus, PersonId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestNotificationUseCases:
    """Tests for listing and marking notifications."""

    @pytest.mark.asyncio
    async def test_mark_one_then_all(self, unit_env):
        """Marking one and then all notifications read."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        person_id = PersonId(uuid4())
        first = await notification_service.notify(person_id, "One", "")
        await notification_service.notify(person_id, "Two", "")
        await notification_service.notify(person_id, "Three", "")
        list_use_case = await unit_env.get(ListNotificationsUseCase)
        mark_use_case = await unit_env.get(MarkNotificationsReadUseCase)

        # Act
        one = await mark_use_case.execute(
            MarkNotificationsReadRequest(
                person_id=str(person_id), notification_id=str(first.id)
            )
        )
        rest = await mark_use_case.execute(
            MarkNotificationsReadRequest(person_id=str(person_id))
        )

        # Assert
        assert one.marked == 1
        assert rest.marked == 2
        unread = await list_use_case.execute(
            ListNotificationsRequest(
                person_id=str(person_id), status=NotificationStatus.UNREAD
            )
        )
        assert unread.notifications == []

    @pytest.mark.asyncio
    async def test_list_paginates(self, unit_env):
        """Limit and offset page through the feed, newest first."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        person_id = PersonId(uuid4())
        for title in ("One", "Two", "Three"):
            await notification_service.notify(person_id, title, "")
        use_case = await unit_env.get(ListNotificationsUseCase)

        # Act
        page = await use_case.execute(
            ListNotificationsRequest(person_id=str(person_id), limit=2, offset=1)
        )

        # Assert
        assert [n.title for n in page.notifications] == ["Two", "One"]
