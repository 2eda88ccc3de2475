"""Domain layer DI providers."""

from dishka import Scope, provide

from feed.config import CommentSettings
from feed.domain.repository import CommentRepository, GifRepository, PostRepository
from feed.domain.service import CommentService, GifService, PostService
from feed.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped; the repositories they wrap decide whether
    state is shared between requests.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, comment_settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            detect_cycles=comment_settings.detect_cycles,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_gif_service(self, gif_repository: GifRepository) -> GifService:
        """Provide GIF domain service."""
        return GifService(gif_repository=gif_repository)
