"""Create post use case."""

import logfire
from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.post.get_post import PostItem
from feed.domain.error import ValidationError
from feed.domain.model.post import PostDraft
from feed.domain.service import PostService


class CreatePostRequest(BaseModel):
    """Create post request."""

    text: str | None = None
    file_url: str | None = None  # Data URL of the attachment
    file_name: str | None = None


class CreatePostResponse(PostItem):
    """Create post response."""

    pass


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, username: str) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            username: Name every post is attributed to (there are no accounts)
        """
        self.post_service = post_service
        self.username = username

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The stored post

        Raises:
            ValidationError: If the text is missing or blank
        """
        if not request.text or not request.text.strip():
            logfire.warn("Post rejected: missing text")
            raise ValidationError("text required")

        post = await self.post_service.create_post(
            PostDraft(
                username=self.username,
                text=request.text,
                file_url=request.file_url,
                file_name=request.file_name,
            )
        )

        return CreatePostResponse.from_domain(post)
