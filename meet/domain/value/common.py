"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, compared by value.

    Slots, directory filters and meeting change sets are all value objects.
    """

    model_config = ConfigDict(frozen=True)
