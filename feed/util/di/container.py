"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from feed.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings come from the environment. The comment and post stores are
    APP-scoped, so they are created on first use and shared by every request
    served by this container.

    Returns:
        Configured DI container with production providers
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to the app so routes can use FromDishka.

    Calling this again on the same app replaces the container, which is how
    tests swap in their own.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
