"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a test implementation; stores are the only one
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider with the metadata used to swap in test stores.

    Attributes:
        __mock_component__: Set on PersistenceProvider, None elsewhere
        __is_mock__: True on the test store provider
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
