"""Persistence infrastructure providers."""

from dishka import Scope, provide

from feed.config import GifSettings
from feed.domain.repository import CommentRepository, GifRepository, PostRepository
from feed.persistence.repository.gif import JsonGifRepository
from feed.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
)
from feed.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Stores live in process memory and are APP-scoped: every request shares
    the same collections until the process exits.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide Post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide Comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_gif_repository(self, gif_settings: GifSettings) -> GifRepository:
        """Provide GIF catalog loaded from the configured file."""
        return JsonGifRepository.from_file(gif_settings.catalog_path)
