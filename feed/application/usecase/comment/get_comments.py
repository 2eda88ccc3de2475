"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.domain.model.comment import Comment
from feed.domain.service import CommentService
from feed.domain.value import PostId


class CommentItem(BaseModel):
    """Comment item in response."""

    id: str
    post_id: str
    parent_id: str | None
    text: str | None
    image: str | None
    gif: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        """Convert a domain comment to a response item."""
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            text=comment.text,
            image=comment.image,
            gif=comment.gif,
            created_at=comment.created_at,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting the flat comment list of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Comments come back in creation order. An unknown post simply has no
        comments; it is not an error.

        Args:
            request: Get comments request with post ID

        Returns:
            Flat comment list and its length
        """
        comments = await self.comment_service.get_comments_for_post(
            PostId(request.post_id)
        )

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=[CommentItem.from_domain(comment) for comment in comments],
            total=len(comments),
        )
