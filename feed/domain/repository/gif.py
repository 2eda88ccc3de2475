"""GIF catalog repository interface."""

from abc import ABC, abstractmethod
from typing import List

from feed.domain.model.gif import Gif


class GifRepository(ABC):
    """Read-only access to the GIF catalog."""

    @abstractmethod
    async def find_all(self) -> List[Gif]:
        """Return every GIF in catalog order."""
        pass
