"""Unit tests for GifService."""

import pytest

from feed.domain.service import GifService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGifSearch:
    """Tests for GifService.search."""

    @pytest.mark.asyncio
    async def test_no_query_returns_whole_catalog(self, unit_env):
        """Without a query every GIF is returned in catalog order."""
        gif_service = await unit_env.get(GifService)

        gifs = await gif_service.search()

        assert len(gifs) == 10
        assert gifs[0].id == "thumbs-up"

    @pytest.mark.asyncio
    async def test_blank_query_returns_whole_catalog(self, unit_env):
        """A whitespace query does not filter."""
        gif_service = await unit_env.get(GifService)

        assert len(await gif_service.search("   ")) == 10

    @pytest.mark.asyncio
    async def test_query_matches_name_case_insensitively(self, unit_env):
        """Names containing the query in any case are returned."""
        gif_service = await unit_env.get(GifService)

        gifs = await gif_service.search("TH")

        assert [g.name for g in gifs] == ["Thumbs Up", "Thank You", "Thinking"]

    @pytest.mark.asyncio
    async def test_query_without_match_returns_empty(self, unit_env):
        """An unmatched query returns nothing."""
        gif_service = await unit_env.get(GifService)

        assert await gif_service.search("zebra") == []
