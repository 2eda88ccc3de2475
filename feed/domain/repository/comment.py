"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from feed.domain.model.comment import Comment, CommentDraft
from feed.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment records.

    Append-only: comments are created and read, never updated or deleted.
    Implementations shared between concurrent requests must make ``create``
    atomic, so that no append is lost and no id is handed out twice.
    """

    @abstractmethod
    async def create(self, draft: CommentDraft) -> Comment:
        """Store a new comment.

        Assigns ``id`` and ``created_at`` when the draft has none. If the
        draft carries an id that is already stored with the same content,
        the stored comment is returned and nothing is appended.

        Args:
            draft: The comment to store

        Returns:
            The canonical stored comment

        Raises:
            IdempotencyConflictError: If the draft's id is already stored
                with different content
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in creation order.

        Must reflect every ``create`` that returned before this call.

        Args:
            post_id: The post ID

        Returns:
            Comments in the order they were created (empty for unknown posts)
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Find every comment, across all posts, in creation order."""
        pass
