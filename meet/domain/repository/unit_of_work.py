"""Transaction boundary interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """The storage transaction one request's writes belong to.

    Mutating use cases commit before they return, so a write that fails to
    become durable is reported to the caller instead of a success.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every write of the current request durable.

        Raises:
            TransientError: If storage refused the commit and the request
                can be retried
        """
        pass
