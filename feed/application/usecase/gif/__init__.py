"""GIF catalog use cases."""

from .list_gifs import GifItem, ListGifsRequest, ListGifsResponse, ListGifsUseCase

__all__ = [
    "GifItem",
    "ListGifsRequest",
    "ListGifsResponse",
    "ListGifsUseCase",
]
