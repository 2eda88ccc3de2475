"""List GIFs use case."""

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.domain.service import GifService


class GifItem(BaseModel):
    """GIF in a response."""

    id: str
    name: str
    url: str


class ListGifsRequest(BaseModel):
    """List GIFs request."""

    query: str | None = None  # Case-insensitive name filter


class ListGifsResponse(BaseModel):
    """List GIFs response."""

    gifs: list[GifItem]
    total: int


class ListGifsUseCase(BaseUseCase):
    """Use case for browsing the GIF catalog from the comment form."""

    def __init__(self, gif_service: GifService) -> None:
        """Initialize list GIFs use case.

        Args:
            gif_service: GIF domain service
        """
        self.gif_service = gif_service

    async def execute(self, request: ListGifsRequest) -> ListGifsResponse:
        """Execute list GIFs flow."""
        gifs = await self.gif_service.search(request.query)

        return ListGifsResponse(
            gifs=[GifItem(id=gif.id, name=gif.name, url=gif.url) for gif in gifs],
            total=len(gifs),
        )
