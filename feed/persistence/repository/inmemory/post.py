"""In-memory post repository."""

import threading
from datetime import datetime
from typing import Optional
from uuid import uuid4

from feed.domain.model.post import Post, PostDraft
from feed.domain.repository.post import PostRepository
from feed.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository.

    Listing order is reverse insertion order rather than a timestamp sort,
    so posts created within the same clock tick still come back newest first.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._posts: dict[PostId, Post] = {}  # Insertion ordered

    async def create(self, draft: PostDraft) -> Post:
        """Store a new post."""
        with self._lock:
            post_id = PostId(str(uuid4()))
            while post_id in self._posts:
                post_id = PostId(str(uuid4()))

            post = Post(
                id=post_id,
                username=draft.username,
                text=draft.text,
                file_url=draft.file_url,
                file_name=draft.file_name,
                created_at=datetime.now(),
            )
            self._posts[post.id] = post
            return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with self._lock:
            return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Find all posts, newest first."""
        with self._lock:
            return list(reversed(self._posts.values()))
