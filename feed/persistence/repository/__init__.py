"""Repository implementations."""

from feed.persistence.repository.gif import JsonGifRepository
from feed.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
)

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "JsonGifRepository",
]
