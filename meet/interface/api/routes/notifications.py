"""Notification feed routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query
from pydantic import BaseModel

from meet.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadResponse,
    MarkNotificationsReadUseCase,
)
from meet.domain.error import DomainError
from meet.domain.service import JWTService
from meet.domain.value import NotificationStatus
from meet.interface.api.auth import authenticate
from meet.interface.error import to_http_exception

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class MarkReadAPIRequest(BaseModel):
    """Mark one notification read; omit the ID to mark all read."""

    notification_id: str | None = None


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    status_filter: NotificationStatus | None = Query(default=None, alias="status"),
    limit: int = Query(default=50, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """List the current person's notifications, newest first."""
    actor_id = authenticate(jwt_service, auth_token, authorization)

    try:
        return await list_notifications_use_case.execute(
            ListNotificationsRequest(
                person_id=actor_id, status=status_filter, limit=limit, offset=offset
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/read", response_model=MarkNotificationsReadResponse)
async def mark_notifications_read(
    request: MarkReadAPIRequest,
    mark_read_use_case: FromDishka[MarkNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> MarkNotificationsReadResponse:
    """Mark one or all of the current person's notifications read."""
    actor_id = authenticate(jwt_service, auth_token, authorization)

    try:
        return await mark_read_use_case.execute(
            MarkNotificationsReadRequest(
                person_id=actor_id, notification_id=request.notification_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
