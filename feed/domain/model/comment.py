"""Comment records and reply-tree nodes.

Comments are stored flat. Each one names its post and, optionally, the
comment it replies to. The reply tree is never stored; it is rebuilt from
the flat set by ``feed.domain.service.comment_tree`` whenever needed.

A comment carries up to three kinds of content:
- text: plain text
- image: an image as a data URL
- gif: the URL of a GIF picked from the catalog
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import Field

from feed.domain.model.common import DomainModel
from feed.domain.value import CommentId, PostId


def _present(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


class CommentDraft(DomainModel):
    """A comment as submitted to the store.

    The store assigns ``id`` and ``created_at`` when they are missing.
    A client-supplied ``id`` doubles as an idempotency key: submitting the
    same draft twice yields the same stored comment.
    """

    post_id: PostId
    parent_id: Optional[CommentId] = None
    text: Optional[str] = None
    image: Optional[str] = None
    gif: Optional[str] = None
    id: Optional[CommentId] = Field(default=None, min_length=1)
    created_at: Optional[datetime] = None

    @property
    def has_content(self) -> bool:
        """Whether at least one of text, image or gif is non-blank."""
        return any(_present(value) for value in (self.text, self.image, self.gif))


class Comment(DomainModel):
    """Stored comment.

    Immutable once created. ``parent_id`` is None for a top-level comment.
    It is otherwise treated as an opaque reference: it may name a comment
    that does not exist, and the tree builder copes with that.
    """

    id: CommentId = Field(min_length=1)
    post_id: PostId = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    text: Optional[str] = None
    image: Optional[str] = None
    gif: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)

    def matches(self, draft: CommentDraft) -> bool:
        """Whether ``draft`` describes this comment (ignoring id and timestamp)."""
        return (
            self.post_id == draft.post_id
            and self.parent_id == draft.parent_id
            and self.text == draft.text
            and self.image == draft.image
            and self.gif == draft.gif
        )


@dataclass
class CommentNode:
    """A comment together with its direct replies.

    Children are in the order the replies were created.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id

    @property
    def parent_id(self) -> Optional[CommentId]:
        return self.comment.parent_id
