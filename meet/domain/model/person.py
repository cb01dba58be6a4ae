"""Person aggregate.

People are owned by the external person store. The connection engine only
reads them, to validate actors and to show counterpart summaries.
"""

from typing import Optional

from meet.domain.model.common import DomainModel
from meet.domain.value import PersonId


class Profile(DomainModel):
    """Self-described profile used by the directory."""

    bio: Optional[str] = None
    interests: tuple[str, ...] = ()
    expertise: tuple[str, ...] = ()
    offerings: tuple[str, ...] = ()
    seeking: tuple[str, ...] = ()
    availability_text: Optional[str] = None
    timezone: Optional[str] = None
    wechat_id: Optional[str] = None
    city: Optional[str] = None


class Person(DomainModel):
    """Person aggregate root (read-only)."""

    id: PersonId
    name: str
    username: str
    profile: Optional[Profile] = None
