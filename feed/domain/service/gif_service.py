"""GIF catalog domain service."""

import logfire

from feed.domain.model.gif import Gif
from feed.domain.repository import GifRepository

from .base import Service


class GifService(Service):
    """Domain service for browsing the GIF catalog."""

    def __init__(self, gif_repository: GifRepository) -> None:
        """Initialize GIF service.

        Args:
            gif_repository: GIF catalog repository
        """
        self.gif_repository = gif_repository

    async def search(self, query: str | None = None) -> list[Gif]:
        """Find GIFs whose name contains ``query``, ignoring case.

        Args:
            query: Search text (None or blank returns the whole catalog)

        Returns:
            Matching GIFs in catalog order
        """
        with logfire.span("gif_service.search", query=query):
            gifs = await self.gif_repository.find_all()
            if query and query.strip():
                needle = query.strip().lower()
                gifs = [gif for gif in gifs if needle in gif.name.lower()]
            logfire.info("GIFs found", query=query, count=len(gifs))
            return gifs
