"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for entities.

    Entities are frozen; a status change produces a new instance via
    ``model_copy`` and is persisted through a conditional write.
    """

    model_config = ConfigDict(frozen=True)
