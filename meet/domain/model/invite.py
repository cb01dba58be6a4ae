"""Invite entity.

An invite is one person's proposal to meet another person one-on-one,
carrying up to three advisory time slots.
"""

from datetime import datetime

from pydantic import Field, model_validator

from meet.domain.model.common import DomainModel
from meet.domain.value import InviteId, InviteStatus, PersonId, Slot
from meet.util.clock import utcnow

MAX_PROPOSED_SLOTS = 3


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - Inviter and invitee are different people
    - 1 to 3 proposed slots, fixed at creation
    - Status only moves out of pending, and never moves again
    - Invites are never deleted; terminal invites stay visible as history
    """

    id: InviteId
    inviter_id: PersonId
    invitee_id: PersonId
    message: str = ""
    proposed_slots: tuple[Slot, ...] = Field(
        min_length=1, max_length=MAX_PROPOSED_SLOTS
    )
    status: InviteStatus = InviteStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def check_distinct_parties(self) -> "Invite":
        """An invite always has two distinct parties."""
        if self.inviter_id == self.invitee_id:
            raise ValueError("inviter_id and invitee_id must differ")
        return self

    def role_of(self, person_id: PersonId) -> str | None:
        """Return 'inviter', 'invitee' or None for a given person."""
        if person_id == self.inviter_id:
            return "inviter"
        if person_id == self.invitee_id:
            return "invitee"
        return None

    def counterpart_of(self, person_id: PersonId) -> PersonId:
        """Return the other party of the invite."""
        return self.invitee_id if person_id == self.inviter_id else self.inviter_id
