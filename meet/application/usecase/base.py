"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One API operation: parse IDs, call domain services, shape the response."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
