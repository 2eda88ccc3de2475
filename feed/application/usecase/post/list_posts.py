"""List posts use case."""

from pydantic import BaseModel

from feed.application.usecase.post.get_post import PostItem
from feed.domain.service import PostService


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostItem]
    total: int


class ListPostsUseCase:
    """Use case for listing the feed, newest post first."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self) -> ListPostsResponse:
        """Execute list posts flow.

        Returns:
            Every post, most recently created first
        """
        posts = await self.post_service.list_posts()

        return ListPostsResponse(
            posts=[PostItem.from_domain(post) for post in posts],
            total=len(posts),
        )
