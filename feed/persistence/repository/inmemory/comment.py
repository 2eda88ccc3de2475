"""In-memory comment repository.

This is the process-lifetime comment store. One instance is shared by every
request, so all access goes through a lock. The lock is a threading lock and
is never held across an await.
"""

import threading
from datetime import datetime
from typing import Optional
from uuid import uuid4

from feed.domain.error import IdempotencyConflictError
from feed.domain.model.comment import Comment, CommentDraft
from feed.domain.repository.comment import CommentRepository
from feed.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._comments: dict[CommentId, Comment] = {}  # Insertion ordered
        self._by_post: dict[PostId, list[Comment]] = {}

    async def create(self, draft: CommentDraft) -> Comment:
        """Append a comment, or replay an earlier create with the same id."""
        with self._lock:
            if draft.id is not None:
                existing = self._comments.get(draft.id)
                if existing is not None:
                    if not existing.matches(draft):
                        raise IdempotencyConflictError(draft.id)
                    return existing

            comment = Comment(
                id=draft.id or self._new_id(),
                post_id=draft.post_id,
                parent_id=draft.parent_id,
                text=draft.text,
                image=draft.image,
                gif=draft.gif,
                created_at=draft.created_at or datetime.now(),
            )
            self._comments[comment.id] = comment
            self._by_post.setdefault(comment.post_id, []).append(comment)
            return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        with self._lock:
            return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post in creation order."""
        with self._lock:
            return list(self._by_post.get(post_id, []))

    async def find_all(self) -> list[Comment]:
        """Find every comment in creation order."""
        with self._lock:
            return list(self._comments.values())

    def _new_id(self) -> CommentId:
        # Caller holds the lock
        comment_id = CommentId(str(uuid4()))
        while comment_id in self._comments:
            comment_id = CommentId(str(uuid4()))
        return comment_id
