"""Post records.

Posts are the top-level items of the feed: a piece of text, optionally with
one attached file.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from feed.domain.model.common import DomainModel
from feed.domain.value import PostId


class PostDraft(DomainModel):
    """A post as submitted to the store, before id and timestamp are assigned."""

    username: str = Field(min_length=1)
    text: str = Field(min_length=1)
    file_url: Optional[str] = None  # Data URL of the attachment
    file_name: Optional[str] = None


class Post(DomainModel):
    """Stored post."""

    id: PostId = Field(min_length=1)
    username: str = Field(min_length=1)
    text: str = Field(min_length=1)
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
