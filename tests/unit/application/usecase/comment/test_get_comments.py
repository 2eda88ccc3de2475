"""Unit tests for the comment listing use cases."""

import sys

import pytest

from feed.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentTreeRequest,
    GetCommentTreeUseCase,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_unknown_post_returns_empty_list(self, unit_env):
        """A post nobody commented on has an empty comment list."""
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(post_id="nothing"))

        assert response.post_id == "nothing"
        assert response.comments == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_lists_flat_comments_in_creation_order(self, unit_env):
        """Replies are listed flat, after the comments created before them."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(GetCommentsUseCase)
        root = await create.execute(CreateCommentRequest(post_id="p1", text="root"))
        await create.execute(
            CreateCommentRequest(post_id="p1", parent_id=root.id, text="reply")
        )

        # Act
        response = await use_case.execute(GetCommentsRequest(post_id="p1"))

        # Assert
        assert response.total == 2
        assert [c.text for c in response.comments] == ["root", "reply"]
        assert response.comments[1].parent_id == root.id


class TestGetCommentTreeUseCase:
    """Tests for GetCommentTreeUseCase."""
    @pytest.mark.asyncio
    async def test_thread_scenario(self, unit_env):
        """Two threads with a nested reply come back as a two-root tree."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(GetCommentTreeUseCase)

        first = await create.execute(CreateCommentRequest(post_id="p1", text="first"))
        reply = await create.execute(
            CreateCommentRequest(post_id="p1", parent_id=first.id, text="reply")
        )
        gif = await create.execute(
            CreateCommentRequest(
                post_id="p1", parent_id=reply.id, gif="/gifs/applause.gif"
            )
        )
        second = await create.execute(CreateCommentRequest(post_id="p1", text="second"))

        # Act
        response = await use_case.execute(GetCommentTreeRequest(post_id="p1"))

        # Assert
        assert response.total == 4
        assert response.roots == [first.id, second.id]
        assert [(c.id, c.depth) for c in response.comments] == [
            (first.id, 0),
            (reply.id, 1),
            (gif.id, 2),
            (second.id, 0),
        ]
        assert response.comments[0].children == [reply.id]
        assert response.comments[1].children == [gif.id]
        assert response.comments[2].gif == "/gifs/applause.gif"
        assert response.comments[2].children == []

    @pytest.mark.asyncio
    async def test_orphan_reply_shown_at_top_level(self, unit_env):
        """A reply whose parent does not exist becomes a root."""
        create = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(GetCommentTreeUseCase)
        orphan = await create.execute(
            CreateCommentRequest(post_id="p1", parent_id="ghost", text="orphan")
        )

        response = await use_case.execute(GetCommentTreeRequest(post_id="p1"))

        assert response.roots == [orphan.id]
        assert response.comments[0].depth == 0
        assert response.comments[0].parent_id == "ghost"

    @pytest.mark.asyncio
    async def test_deep_reply_chain(self, unit_env):
        """A reply chain deeper than the recursion limit is returned whole."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(GetCommentTreeUseCase)
        depth = max(1000, sys.getrecursionlimit() + 100)

        parent_id = None
        for i in range(depth):
            comment = await create.execute(
                CreateCommentRequest(post_id="p1", parent_id=parent_id, text=f"level {i}")
            )
            parent_id = comment.id

        # Act
        response = await use_case.execute(GetCommentTreeRequest(post_id="p1"))

        # Assert
        assert response.total == depth
        assert len(response.roots) == 1
        assert [c.depth for c in response.comments] == list(range(depth))
        assert response.comments[-1].text == f"level {depth - 1}"
        assert response.comments[-1].children == []
