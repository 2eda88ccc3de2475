"""Unit tests for PostService."""

import pytest

from feed.domain.error import NotFoundError
from feed.domain.model.post import PostDraft
from feed.domain.service import PostService
from feed.domain.value import PostId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPostService:
    """Tests for PostService."""

    @pytest.mark.asyncio
    async def test_create_post_assigns_id(self, unit_env):
        """Created posts get an id and keep their attachment."""
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post(
            PostDraft(
                username="demo_user",
                text="Hello",
                file_url="data:text/plain;base64,aGk=",
                file_name="hi.txt",
            )
        )

        assert post.id
        assert post.username == "demo_user"
        assert post.file_name == "hi.txt"

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, unit_env):
        """Posts are listed in reverse creation order."""
        # Arrange
        post_service = await unit_env.get(PostService)
        for text in ["first", "second", "third"]:
            await post_service.create_post(PostDraft(username="demo_user", text=text))

        # Act
        posts = await post_service.list_posts()

        # Assert
        assert [p.text for p in posts] == ["third", "second", "first"]

    @pytest.mark.asyncio
    async def test_get_post_by_id(self, unit_env):
        """A stored post can be fetched by id."""
        post_service = await unit_env.get(PostService)
        created = await post_service.create_post(
            PostDraft(username="demo_user", text="Hello")
        )

        found = await post_service.get_post_by_id(created.id)

        assert found == created

    @pytest.mark.asyncio
    async def test_get_unknown_post_raises(self, unit_env):
        """Fetching an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found: missing"):
            await post_service.get_post_by_id(PostId("missing"))
