"""Comment domain service."""

import logfire

from feed.domain.model.comment import Comment, CommentDraft, CommentNode
from feed.domain.repository import CommentRepository
from feed.domain.value import PostId

from .base import Service
from .comment_tree import build_comment_tree, count_nodes


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, detect_cycles: bool = True
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            detect_cycles: Whether tree building demotes reply cycles to roots
        """
        self.comment_repository = comment_repository
        self.detect_cycles = detect_cycles

    async def create_comment(self, draft: CommentDraft) -> Comment:
        """Create a comment on a post or a reply to another comment.

        The parent is not looked up: a reply to a comment that does not
        exist is stored anyway and shown at top level.

        Args:
            draft: Validated comment submission

        Returns:
            Created comment, with id and timestamp assigned by the store

        Raises:
            IdempotencyConflictError: If the draft's id is already taken
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=draft.post_id,
            parent_id=draft.parent_id,
            client_id=draft.id,
        ):
            saved = await self.comment_repository.create(draft)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=saved.post_id,
                is_reply=saved.parent_id is not None,
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post in creation order.

        Args:
            post_id: Post ID

        Returns:
            Flat list of comments (empty for unknown posts)
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=post_id
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=post_id, count=len(comments)
            )
            return comments

    async def get_comment_tree(self, post_id: PostId) -> list[CommentNode]:
        """Get the reply forest for a post.

        Args:
            post_id: Post ID

        Returns:
            Root comment nodes with replies nested beneath them
        """
        with logfire.span("comment_service.get_comment_tree", post_id=post_id):
            comments = await self.comment_repository.find_by_post(post_id)
            roots = build_comment_tree(comments, detect_cycles=self.detect_cycles)
            logfire.info(
                "Comment tree built",
                post_id=post_id,
                comments=len(comments),
                roots=len(roots),
                placed=count_nodes(roots),
            )
            return roots
