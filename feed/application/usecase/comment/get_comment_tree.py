"""Get comment tree use case."""

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.application.usecase.comment.get_comments import CommentItem
from feed.domain.model.comment import CommentNode
from feed.domain.service import CommentService, walk
from feed.domain.value import PostId


class CommentTreeItem(CommentItem):
    """Comment placed in the reply tree.

    The tree is sent flat, in display order, so that reply chains of any
    depth serialize without nesting. ``children`` holds the ids of the
    direct replies and ``depth`` is 0 for a root.
    """

    depth: int
    children: list[str]

    @classmethod
    def from_node(cls, node: CommentNode, depth: int) -> "CommentTreeItem":
        """Convert a placed tree node to a response item."""
        comment = node.comment
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            text=comment.text,
            image=comment.image,
            gif=comment.gif,
            created_at=comment.created_at,
            depth=depth,
            children=[child.id for child in node.children],
        )


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    post_id: str


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response.

    ``roots`` lists the top-level comment ids in order. ``comments`` is the
    depth-first display order: each comment is followed by its replies.
    """

    post_id: str
    roots: list[str]
    comments: list[CommentTreeItem]
    total: int


class GetCommentTreeUseCase(BaseUseCase):
    """Use case for getting a post's comments as a reply tree."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Args:
            request: Get comment tree request with post ID

        Returns:
            Root ids and every placed comment in display order
        """
        roots = await self.comment_service.get_comment_tree(PostId(request.post_id))
        comments = [CommentTreeItem.from_node(node, depth) for node, depth in walk(roots)]
        return GetCommentTreeResponse(
            post_id=request.post_id,
            roots=[root.id for root in roots],
            comments=comments,
            total=len(comments),
        )
