"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from feed.domain.model.post import Post, PostDraft
from feed.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post records.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def create(self, draft: PostDraft) -> Post:
        """Store a new post, assigning its id and creation time.

        Args:
            draft: The post to store

        Returns:
            The stored post
        """
        pass

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, most recently created first."""
        pass
