"""Create comment use case."""

import logfire
from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.comment.get_comments import CommentItem
from feed.domain.error import ValidationError
from feed.domain.model.comment import CommentDraft
from feed.domain.service import CommentService
from feed.domain.value import CommentId, PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    parent_id: str | None = None  # Parent comment ID for replies
    text: str | None = None
    image: str | None = None  # Data URL
    gif: str | None = None  # URL from the GIF catalog
    comment_id: str | None = None  # Client-chosen ID, doubles as idempotency key


class CreateCommentResponse(CommentItem):
    """Create comment response."""

    pass


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Require a post ID
        2. Require at least one of text, image or gif
        3. Store the comment via comment service

        The post and the parent comment are not looked up; see
        CommentService.create_comment.

        Args:
            request: Create comment request

        Returns:
            The stored comment

        Raises:
            ValidationError: If the post ID or all content is missing
            IdempotencyConflictError: If comment_id is reused for other content
        """
        if not request.post_id.strip():
            logfire.warn("Comment rejected: missing post ID")
            raise ValidationError("postId required")

        draft = CommentDraft(
            post_id=PostId(request.post_id),
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
            text=request.text,
            image=request.image,
            gif=request.gif,
            id=CommentId(request.comment_id) if request.comment_id else None,
        )
        if not draft.has_content:
            logfire.warn("Comment rejected: no content", post_id=request.post_id)
            raise ValidationError("at least one of text/image/gif required")

        comment = await self.comment_service.create_comment(draft)

        return CreateCommentResponse.from_domain(comment)
