"""Meeting use cases."""

from meet.application.usecase.meeting.accept_invite import (
    AcceptInviteRequest,
    AcceptInviteUseCase,
)
from meet.application.usecase.meeting.list_meetings import (
    ListMeetingsRequest,
    ListMeetingsResponse,
    ListMeetingsUseCase,
)
from meet.application.usecase.meeting.update_meeting import (
    UpdateMeetingRequest,
    UpdateMeetingUseCase,
)

__all__ = [
    "AcceptInviteRequest",
    "AcceptInviteUseCase",
    "ListMeetingsRequest",
    "ListMeetingsResponse",
    "ListMeetingsUseCase",
    "UpdateMeetingRequest",
    "UpdateMeetingUseCase",
]
