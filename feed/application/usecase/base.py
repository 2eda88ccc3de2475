"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case: turns one request model into one response model."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
