"""In-memory repository implementations."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
]
