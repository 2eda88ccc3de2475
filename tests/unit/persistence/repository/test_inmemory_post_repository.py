"""Unit tests for InMemoryPostRepository."""

import asyncio

import pytest

from feed.domain.model.post import PostDraft
from feed.domain.value import PostId
from feed.persistence.repository.inmemory import InMemoryPostRepository


class TestInMemoryPostRepository:
    """Tests for the in-memory post store."""

    @pytest.mark.asyncio
    async def test_find_all_newest_first(self):
        """Posts created in quick succession still list newest first."""
        repo = InMemoryPostRepository()
        for text in ["a", "b", "c"]:
            await repo.create(PostDraft(username="demo_user", text=text))

        posts = await repo.find_all()

        assert [p.text for p in posts] == ["c", "b", "a"]

    @pytest.mark.asyncio
    async def test_find_by_id(self):
        """Stored posts are found by id; unknown ids are not."""
        repo = InMemoryPostRepository()
        post = await repo.create(PostDraft(username="demo_user", text="a"))

        assert await repo.find_by_id(post.id) == post
        assert await repo.find_by_id(PostId("missing")) is None

    @pytest.mark.asyncio
    async def test_concurrent_creates(self):
        """Concurrent creates each get a distinct id."""
        repo = InMemoryPostRepository()

        posts = await asyncio.gather(
            *(repo.create(PostDraft(username="u", text=str(i))) for i in range(50))
        )

        assert len({p.id for p in posts}) == 50
        assert len(await repo.find_all()) == 50
