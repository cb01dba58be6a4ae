"""Invite repository interface."""

from abc import ABC, abstractmethod

from meet.domain.model.invite import Invite
from meet.domain.value import InviteId, InviteRole, InviteStatus, PersonId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Args:
            invite: The invite to insert

        Returns:
            The stored invite
        """
        pass

    @abstractmethod
    async def find_by_person(
        self,
        person_id: PersonId,
        role: InviteRole,
        status: InviteStatus | None = None,
    ) -> list[Invite]:
        """Find invites where a person holds the given role.

        Terminal invites are included so history stays visible.

        Args:
            person_id: The person's ID
            role: Whether the person is the inviter or the invitee
            status: Optional status filter

        Returns:
            Invites ordered by created_at descending
        """
        pass

    @abstractmethod
    async def transition_status(
        self,
        invite_id: InviteId,
        from_status: InviteStatus,
        to_status: InviteStatus,
    ) -> Invite | None:
        """Move an invite between statuses if it is still in from_status.

        The current-state check is part of the write itself, so of two
        concurrent writers only one can succeed.

        Args:
            invite_id: The invite's ID
            from_status: Status the invite must currently have
            to_status: Status to set

        Returns:
            The updated invite, or None if the invite is missing or no longer
            in from_status
        """
        pass
