"""Test harness for unit and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
Nothing external needs to be running: all stores live in memory.
"""

import pytest_asyncio

from feed.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - fresh in-memory stores per test
        unit_env = create_env_fixture()

        # Production wiring - APP-scoped stores, catalog from settings
        prod_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            service = await unit_env.get(PostService)
            post = await service.create_post(PostDraft(...))
            assert post.id
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
