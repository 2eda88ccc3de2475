"""Get post use case."""

from datetime import datetime

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.domain.model.post import Post
from feed.domain.service import PostService
from feed.domain.value import PostId


class PostItem(BaseModel):
    """Post in a response."""

    id: str
    username: str
    text: str
    file_url: str | None
    file_name: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostItem":
        """Convert a domain post to a response item."""
        return cls(
            id=post.id,
            username=post.username,
            text=post.text,
            file_url=post.file_url,
            file_name=post.file_name,
            created_at=post.created_at,
        )


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(PostItem):
    """Get post response."""

    pass


class GetPostUseCase(BaseUseCase):
    """Use case for fetching a single post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post_by_id(PostId(request.post_id))
        return GetPostResponse.from_domain(post)
