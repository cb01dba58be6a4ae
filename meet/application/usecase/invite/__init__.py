"""Invite use cases."""

from meet.application.usecase.invite.create_invite import (
    CreateInviteRequest,
    CreateInviteUseCase,
    SlotInput,
)
from meet.application.usecase.invite.list_invites import (
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)
from meet.application.usecase.invite.update_invite import (
    UpdateInviteRequest,
    UpdateInviteUseCase,
)

__all__ = [
    "CreateInviteRequest",
    "CreateInviteUseCase",
    "ListInvitesRequest",
    "ListInvitesResponse",
    "ListInvitesUseCase",
    "SlotInput",
    "UpdateInviteRequest",
    "UpdateInviteUseCase",
]
