"""Post domain service."""

import logfire

from feed.domain.error import NotFoundError
from feed.domain.model.post import Post, PostDraft
from feed.domain.repository import PostRepository
from feed.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, draft: PostDraft) -> Post:
        """Create a post.

        Args:
            draft: Validated post submission

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post",
            username=draft.username,
            has_file=draft.file_url is not None,
        ):
            saved = await self.post_repository.create(draft)
            logfire.info("Post created", post_id=saved.id)
            return saved

    async def list_posts(self) -> list[Post]:
        """List all posts, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post entity

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", post_id)
            logfire.info("Post found", post_id=post_id)
            return post
